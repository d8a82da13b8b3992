"""Configuration loading from TOML files and environment variables."""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from todolist.config.models import ConfigError, TodoListConfig
from todolist.config.paths import get_config_path

logger = logging.getLogger(__name__)

# (section, key, env var) overrides applied on top of the file
ENV_OVERRIDES = [
    ("storage", "path", "TODOLIST_STORAGE_PATH"),
    ("storage", "key", "TODOLIST_STORAGE_KEY"),
    ("logging", "level", "TODOLIST_LOG_LEVEL"),
]


def _get_default_config_paths() -> list[Path]:
    """Get ordered list of default config file locations."""
    return [
        Path("todolist.toml"),  # Current directory
        get_config_path(),  # ~/.todolist/config.toml (or TODOLIST_HOME)
    ]


def _apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """Apply environment variable overrides to the raw config."""
    for section_name, key, env_var in ENV_OVERRIDES:
        value = os.environ.get(env_var)
        if not value:
            continue
        section = config.get(section_name)
        if not isinstance(section, dict):
            section = {}
            config[section_name] = section
        if key == "level":
            value = value.upper()
        section[key] = value
    return config


def load_config(path: Path | None = None) -> TodoListConfig:
    """Load configuration from a TOML file.

    Args:
        path: Explicit path to config file. If None, searches default
            locations and falls back to defaults when none exists.

    Returns:
        Validated TodoListConfig instance.

    Raises:
        FileNotFoundError: If an explicit path does not exist.
        ConfigError: If the config file is invalid.
    """
    config_path: Path | None = None

    if path is not None:
        config_path = Path(path).expanduser()
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        for default_path in _get_default_config_paths():
            expanded = default_path.expanduser()
            if expanded.exists():
                config_path = expanded
                break

    raw_config: dict[str, Any] = {}
    if config_path is not None:
        try:
            with config_path.open("rb") as f:
                raw_config = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e
        logger.debug("Loaded config", extra={"path": str(config_path)})

    raw_config = _apply_env_overrides(raw_config)

    try:
        return TodoListConfig.model_validate(raw_config)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


def get_default_config() -> TodoListConfig:
    """Get a default configuration for development/testing."""
    return TodoListConfig()
