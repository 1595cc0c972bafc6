"""
Configuration management for Noted.

Uses XDG base directories:
- Config: ~/.config/noted/config.toml
- Data: ./db.db (relative to the working directory)
"""

from pathlib import Path
from typing import Any
import os

# XDG defaults
DEFAULT_CONFIG_HOME = Path.home() / ".config"
DEFAULT_DB_NAME = "db.db"
DEFAULT_LOG_LEVEL = "WARNING"


def get_config_dir() -> Path:
    """Get the config directory (XDG_CONFIG_HOME/noted)."""
    base = Path(os.environ.get("XDG_CONFIG_HOME", DEFAULT_CONFIG_HOME))
    return base / "noted"


def get_config_path() -> Path:
    """Get the path to config.toml."""
    return get_config_dir() / "config.toml"


def load_config() -> dict[str, Any]:
    """
    Load configuration from config.toml.

    Returns default config if file doesn't exist. Values from the file are
    layered over the defaults section by section.

    Raises ValueError if a known section is not a table.
    """
    config = get_default_config()
    config_path = get_config_path()

    if not config_path.exists():
        return config

    # Lazy import tomli only when needed
    import tomli

    with open(config_path, "rb") as f:
        loaded = tomli.load(f)

    for section, values in loaded.items():
        if isinstance(config.get(section), dict):
            if not isinstance(values, dict):
                raise ValueError(
                    f"[{section}] in {config_path} must be a table, got {values!r}"
                )
            config[section].update(values)
        else:
            config[section] = values
    return config


def get_default_config() -> dict[str, Any]:
    """Return default configuration."""
    return {
        "storage": {
            "path": DEFAULT_DB_NAME,
        },
        "logging": {
            "level": DEFAULT_LOG_LEVEL,
        },
    }


def get_db_path(config: dict[str, Any] | None = None) -> Path:
    """
    Get the path to the notes database.

    NOTED_DB wins over the config file. Relative paths are resolved against
    the current working directory.
    """
    if env_path := os.environ.get("NOTED_DB"):
        path = Path(env_path)
    else:
        config = config or load_config()
        path = Path(config.get("storage", {}).get("path") or DEFAULT_DB_NAME)

    path = path.expanduser()
    if not path.is_absolute():
        path = Path.cwd() / path
    return path


def get_log_level(config: dict[str, Any] | None = None) -> str:
    """Get the logging level name (NOTED_LOG_LEVEL or [logging] level)."""
    if env_level := os.environ.get("NOTED_LOG_LEVEL"):
        return env_level.upper()
    config = config or load_config()
    return str(config.get("logging", {}).get("level", DEFAULT_LOG_LEVEL)).upper()
