"""
Configuration management for bank_prompts.
Handles loading, saving, and accessing configuration from JSON files and environment variables.
"""
import json
import logging
import os
from dataclasses import dataclass, field, fields, asdict
from pathlib import Path
from typing import Any, Optional

from .constants import (
    API_KEY_ENV_VARS,
    CONFIG_FILE,
    DEFAULT_BASE_URL,
    DEFAULT_CLIENT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_TOKENS,
    DEFAULT_MOCK_DELAY,
    DEFAULT_MODEL,
    DEFAULT_TEMPERATURE,
    DEFAULT_TIMEOUT,
)


logger = logging.getLogger(__name__)


@dataclass
class LLMConfig:
    """LLM client configuration."""
    client: str = DEFAULT_CLIENT
    base_url: str = DEFAULT_BASE_URL
    model: str = DEFAULT_MODEL
    api_key: Optional[str] = None
    max_tokens: int = DEFAULT_MAX_TOKENS
    temperature: float = DEFAULT_TEMPERATURE
    timeout: float = DEFAULT_TIMEOUT
    mock_delay: float = DEFAULT_MOCK_DELAY


@dataclass
class AppConfig:
    """Main application configuration."""
    llm: LLMConfig = field(default_factory=LLMConfig)
    log_level: str = DEFAULT_LOG_LEVEL


# Accepted JSON types per LLMConfig field; api_key may also be null
_LLM_FIELD_TYPES: dict[str, Any] = {
    'client': str,
    'base_url': str,
    'model': str,
    'api_key': str,
    'max_tokens': int,
    'temperature': (int, float),
    'timeout': (int, float),
    'mock_delay': (int, float),
}


def validate_app_config(config: AppConfig) -> None:
    """
    Check field types and the log level of a loaded configuration.

    Raises:
        TypeError: If a field holds a value of the wrong type
        ValueError: If log_level is not a known logging level name
    """
    for f in fields(config.llm):
        value = getattr(config.llm, f.name)
        if f.name == 'api_key' and value is None:
            continue
        expected = _LLM_FIELD_TYPES[f.name]
        if isinstance(value, bool) or not isinstance(value, expected):
            raise TypeError(
                f"Field 'llm.{f.name}' has wrong type {type(value).__name__}"
            )

    if not isinstance(config.log_level, str):
        raise TypeError(
            f"Field 'log_level' has wrong type {type(config.log_level).__name__}"
        )
    if not isinstance(logging.getLevelName(config.log_level.upper()), int):
        raise ValueError(f"Unknown log level: {config.log_level!r}")


class ConfigManager:
    """
    Manages application configuration with support for JSON files and environment variables.

    Environment variables take precedence over config file values for API keys.
    Keys picked up from the environment are never written back to disk.
    """

    def __init__(self, config_file: Optional[Path] = None) -> None:
        """
        Initialize the manager and load configuration.

        Args:
            config_file: Path to the JSON config file (defaults to ~/.bank_prompts/config.json)
        """
        self._config_file = Path(config_file) if config_file else CONFIG_FILE
        self._config: AppConfig = AppConfig()
        self._env_api_key: Optional[str] = None
        self._load_config()
        self._load_env_vars()

    @property
    def config_file(self) -> Path:
        """Path of the backing JSON file."""
        return self._config_file

    def _load_config(self) -> None:
        """Load configuration from JSON file."""
        if not self._config_file.exists():
            logger.debug(f"No config file at {self._config_file}, using defaults")
            return

        try:
            with open(self._config_file, 'r', encoding='utf-8') as f:
                data = json.load(f)

            if not isinstance(data, dict):
                raise TypeError("Config file must hold a JSON object")

            config = AppConfig()
            if 'llm' in data:
                config.llm = LLMConfig(**data['llm'])
            if 'log_level' in data:
                config.log_level = data['log_level']
            validate_app_config(config)
            self._config = config
            logger.info(f"Loaded configuration from {self._config_file}")
        except (json.JSONDecodeError, UnicodeDecodeError, TypeError, ValueError) as e:
            logger.warning(f"Failed to load config file {self._config_file}: {e}")
            self._config = AppConfig()

    def _load_env_vars(self) -> None:
        """Load the API key from environment variables."""
        self._env_api_key = None
        for key in API_KEY_ENV_VARS:
            value = os.environ.get(key)
            if value:
                self._env_api_key = value
                logger.debug(f"Using API key from {key}")
                break

    def _save_config(self) -> None:
        """Save current configuration to JSON file."""
        self._config_file.parent.mkdir(parents=True, exist_ok=True)
        data = {
            'llm': asdict(self._config.llm),
            'log_level': self._config.log_level,
        }

        with open(self._config_file, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)

    @property
    def config(self) -> AppConfig:
        """Get the current configuration."""
        return self._config

    @property
    def llm(self) -> LLMConfig:
        """Get LLM configuration."""
        return self._config.llm

    @property
    def log_level(self) -> str:
        """Get the configured log level name."""
        return self._config.log_level

    def get_api_key(self) -> Optional[str]:
        """
        Get the API key for the HTTP client.

        Returns:
            The key from the environment if set, else the one from the config file
        """
        return self._env_api_key or self._config.llm.api_key

    def update_llm(self, persist: bool = False, **kwargs: Any) -> None:
        """
        Update LLM configuration.

        Unknown keys are ignored.

        Args:
            persist: Whether to save to the config file
            **kwargs: LLMConfig fields to change
        """
        for key, value in kwargs.items():
            if hasattr(self._config.llm, key):
                setattr(self._config.llm, key, value)
            else:
                logger.warning(f"Ignoring unknown LLM setting: {key}")
        if persist:
            self._save_config()

    def save(self) -> None:
        """Explicitly save configuration."""
        self._save_config()

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()
        self._load_env_vars()

    def reset(self) -> None:
        """Reset configuration to defaults."""
        self._config = AppConfig()
        self._save_config()


_config_manager: Optional[ConfigManager] = None


def get_config(config_file: Optional[Path] = None) -> ConfigManager:
    """
    Get the shared configuration manager instance.

    Passing a config_file replaces the shared instance with one backed by that file.
    """
    global _config_manager
    if _config_manager is None or config_file is not None:
        _config_manager = ConfigManager(config_file)
    return _config_manager
