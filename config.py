"""
Configuration management for the MCP Sample Server.
Persists server preferences between sessions; the environment can override them.
"""

import json
import logging
from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "mcp-sample"
CONFIG_FILE = CONFIG_DIR / "config.json"

DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Overrides the persisted log level when set
LOG_LEVEL_ENV = "MCP_SAMPLE_LOG_LEVEL"


def normalize_log_level(level) -> str | None:
    """Return the canonical level name, or None if it is not a known level."""
    if not isinstance(level, str):
        return None
    upper = level.strip().upper()
    return upper if upper in LOG_LEVELS else None


class EnvSettings(BaseSettings):
    """Settings read from the process environment."""

    log_level: str | None = Field(default=None, validation_alias=AliasChoices(LOG_LEVEL_ENV))

    model_config = SettingsConfigDict(extra="ignore")

    @field_validator("log_level", mode="before")
    @classmethod
    def _known_level(cls, value):
        # Unknown levels fall through to the saved preference
        return normalize_log_level(value)


def _load_config() -> dict:
    """Load config from file, or return empty dict if not found or malformed."""
    if CONFIG_FILE.exists():
        try:
            with open(CONFIG_FILE, 'r') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError):
            logger.warning("Ignoring unreadable config file %s", CONFIG_FILE)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring config file %s: expected a JSON object", CONFIG_FILE)
            return {}
        return data
    return {}


def _save_config(config: dict) -> None:
    """Save config to file."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    with open(CONFIG_FILE, 'w') as f:
        json.dump(config, f, indent=2)


def get_log_level() -> str:
    """Get the effective log level: environment, then saved config, then default."""
    env_level = EnvSettings().log_level
    if env_level:
        return env_level

    saved = normalize_log_level(_load_config().get("log_level"))
    if saved:
        return saved

    return DEFAULT_LOG_LEVEL


def set_log_level(level: str) -> None:
    """Set and persist the log level."""
    canonical = normalize_log_level(level)
    if canonical is None:
        raise ValueError(f"Unknown log level: {level}")
    config = _load_config()
    config["log_level"] = canonical
    _save_config(config)
