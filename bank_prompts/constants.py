"""
Constants and configuration defaults for bank_prompts.
"""
from pathlib import Path
from typing import Final

APP_NAME: Final[str] = "bank_prompts"
APP_VERSION: Final[str] = "0.1.0"
APP_DESCRIPTION: Final[str] = "Structured banking prompt builder for LLM calls"

CONFIG_DIR: Final[Path] = Path.home() / ".bank_prompts"
CONFIG_FILE: Final[Path] = CONFIG_DIR / "config.json"

DEFAULT_CLIENT: Final[str] = "mock"
DEFAULT_BASE_URL: Final[str] = "https://api.openai.com/v1"
DEFAULT_MODEL: Final[str] = "gpt-4o-mini"
DEFAULT_MAX_TOKENS: Final[int] = 1024
DEFAULT_TEMPERATURE: Final[float] = 0.2
DEFAULT_TIMEOUT: Final[float] = 60.0
DEFAULT_MOCK_DELAY: Final[float] = 0.05
DEFAULT_LOG_LEVEL: Final[str] = "WARNING"

# Checked in order; the first one set wins
API_KEY_ENV_VARS: Final[tuple[str, ...]] = (
    "BANK_PROMPTS_API_KEY",
    "OPENAI_API_KEY",
)
