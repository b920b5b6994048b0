"""
Tests for configuration management.
"""

import json

import pytest

from bank_prompts.config import AppConfig, ConfigManager, LLMConfig, get_config
from bank_prompts.constants import DEFAULT_CLIENT, DEFAULT_LOG_LEVEL, DEFAULT_MODEL


@pytest.fixture
def clean_env(monkeypatch):
    """Remove API key variables so tests see only what they set."""
    monkeypatch.delenv("BANK_PROMPTS_API_KEY", raising=False)
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    return monkeypatch


class TestConfigManager:
    """Tests for ConfigManager."""

    def test_defaults_when_file_missing(self, tmp_path, clean_env):
        """A missing file yields defaults and is not created."""
        config_file = tmp_path / "config.json"
        manager = ConfigManager(config_file)

        assert manager.llm.client == DEFAULT_CLIENT
        assert manager.llm.model == DEFAULT_MODEL
        assert manager.get_api_key() is None
        assert not config_file.exists()

    def test_load_from_file(self, tmp_path, clean_env):
        """Values in the file override defaults."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({
            "llm": {"client": "http", "model": "bank-model", "api_key": "file-key"},
            "log_level": "DEBUG",
        }))

        manager = ConfigManager(config_file)

        assert manager.llm.client == "http"
        assert manager.llm.model == "bank-model"
        assert manager.log_level == "DEBUG"
        assert manager.get_api_key() == "file-key"

    def test_corrupt_file_falls_back_to_defaults(self, tmp_path, clean_env):
        """Invalid JSON is ignored in favor of defaults."""
        config_file = tmp_path / "config.json"
        config_file.write_text("{not json")

        manager = ConfigManager(config_file)

        assert manager.config == AppConfig()

    def test_unknown_llm_field_falls_back_to_defaults(self, tmp_path, clean_env):
        """Unknown keys in the llm block are rejected as a whole."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"llm": {"provider": "groq"}}))

        manager = ConfigManager(config_file)

        assert manager.llm == LLMConfig()

    def test_non_utf8_file_falls_back_to_defaults(self, tmp_path, clean_env):
        """A file that is not UTF-8 text is ignored in favor of defaults."""
        config_file = tmp_path / "config.json"
        config_file.write_bytes(b"\xff\xfe\x00")

        manager = ConfigManager(config_file)

        assert manager.config == AppConfig()

    @pytest.mark.parametrize("llm", [
        {"mock_delay": "fast"},
        {"max_tokens": 12.5},
        {"max_tokens": True},
        {"model": None},
        {"timeout": "60"},
    ])
    def test_wrong_field_type_falls_back_to_defaults(self, tmp_path, clean_env, llm):
        """Fields of the wrong type reject the whole file."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"llm": llm}))

        manager = ConfigManager(config_file)

        assert manager.config == AppConfig()

    @pytest.mark.parametrize("log_level", ["verbose", 10, None])
    def test_invalid_log_level_falls_back_to_defaults(self, tmp_path, clean_env, log_level):
        """Unknown or non-string log levels reject the whole file."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"log_level": log_level}))

        manager = ConfigManager(config_file)

        assert manager.log_level == DEFAULT_LOG_LEVEL

    def test_non_object_file_falls_back_to_defaults(self, tmp_path, clean_env):
        """A JSON document that is not an object is rejected."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps(["llm"]))

        manager = ConfigManager(config_file)

        assert manager.config == AppConfig()

    def test_integer_values_accepted_for_float_fields(self, tmp_path, clean_env):
        """Whole numbers are valid for float settings."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({
            "llm": {"mock_delay": 0, "temperature": 1},
            "log_level": "info",
        }))

        manager = ConfigManager(config_file)

        assert manager.llm.mock_delay == 0
        assert manager.llm.temperature == 1
        assert manager.log_level == "info"

    def test_environment_key_takes_precedence(self, tmp_path, clean_env):
        """API keys from the environment win over the file."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"llm": {"api_key": "file-key"}}))
        clean_env.setenv("OPENAI_API_KEY", "openai-key")
        clean_env.setenv("BANK_PROMPTS_API_KEY", "bank-key")

        manager = ConfigManager(config_file)

        assert manager.get_api_key() == "bank-key"

    def test_update_and_save(self, tmp_path, clean_env):
        """Persisted updates survive a reload; env keys are not written."""
        config_file = tmp_path / "nested" / "config.json"
        clean_env.setenv("OPENAI_API_KEY", "env-key")
        manager = ConfigManager(config_file)

        manager.update_llm(persist=True, model="bank-model", not_a_field="x")

        saved = json.loads(config_file.read_text())
        assert saved["llm"]["model"] == "bank-model"
        assert saved["llm"]["api_key"] is None
        assert "not_a_field" not in saved["llm"]

        reloaded = ConfigManager(config_file)
        assert reloaded.llm.model == "bank-model"

    def test_update_without_persist_does_not_write(self, tmp_path, clean_env):
        """In-memory updates leave the file alone."""
        config_file = tmp_path / "config.json"
        manager = ConfigManager(config_file)

        manager.update_llm(client="http")

        assert manager.llm.client == "http"
        assert not config_file.exists()

    def test_reset(self, tmp_path, clean_env):
        """reset restores and saves defaults."""
        config_file = tmp_path / "config.json"
        manager = ConfigManager(config_file)
        manager.update_llm(model="other")

        manager.reset()

        assert manager.llm.model == DEFAULT_MODEL
        assert json.loads(config_file.read_text())["llm"]["model"] == DEFAULT_MODEL

    def test_reload_picks_up_changes(self, tmp_path, clean_env):
        """reload re-reads the file."""
        config_file = tmp_path / "config.json"
        manager = ConfigManager(config_file)
        config_file.write_text(json.dumps({"llm": {"client": "http"}}))

        manager.reload()

        assert manager.llm.client == "http"


def test_get_config_with_file_replaces_shared_instance(tmp_path, clean_env):
    """Passing a file swaps the shared manager; later calls reuse it."""
    config_file = tmp_path / "config.json"
    manager = get_config(config_file)

    assert manager.config_file == config_file
    assert get_config() is manager
