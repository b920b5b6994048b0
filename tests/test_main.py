"""
Tests for the command line entry point.
"""

import json

import pytest

from bank_prompts.main import build_parser, main, parse_param


@pytest.fixture
def config_args(tmp_path, monkeypatch):
    """Point the CLI at an isolated config file with no API keys."""
    monkeypatch.delenv("BANK_PROMPTS_API_KEY", raising=False)
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({"llm": {"mock_delay": 0.0}}))
    return ["--config", str(config_file)]


FRAUD_ARGS = [
    "fraud-detection",
    "-p", "channel=online banking",
    "-p", "scope=real-time monitoring",
]


class TestParser:
    """Tests for argument parsing."""

    def test_parse_param(self):
        """KEY=VALUE splits on the first equals sign."""
        assert parse_param("scope=a=b") == ("scope", "a=b")
        assert parse_param("channel=") == ("channel", "")

    def test_parse_param_rejects_missing_equals(self):
        """Parameters without '=' are rejected."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["render", "credit-risk", "-p", "credit_type"])

    def test_command_is_required(self):
        """A subcommand must be given."""
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestCommands:
    """Tests for the CLI commands."""

    def test_render(self, config_args, capsys):
        """render prints the template prompt with extra steps."""
        code = main(config_args + ["render"] + FRAUD_ARGS + ["-s", "Escalate to analyst"])
        out = capsys.readouterr().out

        assert code == 0
        assert "Goal: Detect fraud in online banking using real-time monitoring" in out
        assert "5. Escalate to analyst" in out

    def test_render_json(self, config_args, capsys):
        """render --json prints importable JSON."""
        code = main(config_args + ["render"] + FRAUD_ARGS + ["--json"])
        data = json.loads(capsys.readouterr().out)

        assert code == 0
        assert data["sections"][0] == {
            "kind": "goal",
            "text": "Detect fraud in online banking using real-time monitoring",
        }

    def test_show(self, config_args, tmp_path, capsys):
        """show renders a prompt saved as JSON."""
        prompt_file = tmp_path / "prompt.json"
        prompt_file.write_text(json.dumps({
            "version": "1.0",
            "sections": [{"kind": "goal", "text": "Review"}],
        }))

        assert main(config_args + ["show", str(prompt_file)]) == 0
        assert "Goal: Review" in capsys.readouterr().out

    def test_show_invalid_file(self, config_args, tmp_path, capsys):
        """An invalid prompt file exits with status 1."""
        prompt_file = tmp_path / "prompt.json"
        prompt_file.write_text("[]")

        assert main(config_args + ["show", str(prompt_file)]) == 1
        assert "Invalid prompt file" in capsys.readouterr().out

    def test_show_non_utf8_file(self, config_args, tmp_path, capsys):
        """A prompt file that is not UTF-8 exits with status 1."""
        prompt_file = tmp_path / "prompt.json"
        prompt_file.write_bytes(b"\xff\xfe{bad")

        assert main(config_args + ["show", str(prompt_file)]) == 1
        assert "Invalid prompt file" in capsys.readouterr().out

    def test_show_missing_file(self, config_args, tmp_path, capsys):
        """A missing prompt file exits with status 1."""
        assert main(config_args + ["show", str(tmp_path / "missing.json")]) == 1
        assert "File error" in capsys.readouterr().out

    def test_unknown_template(self, config_args, capsys):
        """Unknown templates exit with status 1."""
        assert main(config_args + ["render", "mortgage-pricing"]) == 1
        assert "Template error" in capsys.readouterr().out

    def test_missing_parameter(self, config_args, capsys):
        """Missing parameters exit with status 1."""
        assert main(config_args + ["render", "fraud-detection", "-p", "channel=ATM"]) == 1
        assert "scope" in capsys.readouterr().out

    def test_templates(self, config_args, capsys):
        """templates lists the catalog."""
        assert main(config_args + ["templates"]) == 0
        assert "credit-risk" in capsys.readouterr().out

    def test_send_with_mock_client(self, config_args, capsys):
        """send delivers the rendered prompt to the mock client."""
        code = main(config_args + ["send"] + FRAUD_ARGS + ["--client", "mock"])
        out = capsys.readouterr().out

        assert code == 0
        assert "FRAUD ALERT ISSUED" in out

    def test_send_with_unknown_client(self, config_args, capsys):
        """An unregistered client exits with status 1."""
        code = main(config_args + ["send"] + FRAUD_ARGS + ["--client", "carrier-pigeon"])

        assert code == 1
        assert "not found" in capsys.readouterr().out

    def test_demo_with_invalid_config_uses_defaults(self, tmp_path, monkeypatch, capsys):
        """Badly typed settings in the config file do not break startup."""
        monkeypatch.delenv("BANK_PROMPTS_API_KEY", raising=False)
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({
            "llm": {"mock_delay": "fast"},
            "log_level": "verbose",
        }))

        assert main(["--config", str(config_file), "demo"]) == 0
        assert "CREDIT ANALYSIS COMPLETE" in capsys.readouterr().out

    def test_demo(self, config_args, capsys):
        """demo runs the full flow against the mock client."""
        assert main(config_args + ["demo"]) == 0
        out = capsys.readouterr().out

        assert "Built manually: 5 sections" in out
        assert "CREDIT ANALYSIS COMPLETE" in out
