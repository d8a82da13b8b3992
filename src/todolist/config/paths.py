"""Centralized path management for todolist.

All state (config, store, logs) is stored under a single base directory.
The base directory can be overridden with the TODOLIST_HOME environment variable.

Default locations:
- Linux/macOS: ~/.todolist
- Windows: %USERPROFILE%\\.todolist
"""

import os
from pathlib import Path

ENV_VAR = "TODOLIST_HOME"


def get_todolist_home() -> Path:
    """Get the base directory for all todolist data.

    Resolution order:
    1. TODOLIST_HOME environment variable (if set)
    2. Platform default (~/.todolist)
    """
    if env_home := os.environ.get(ENV_VAR):
        return Path(env_home).expanduser().resolve()
    return Path.home() / ".todolist"


def get_config_path() -> Path:
    """Get the default config file path."""
    return get_todolist_home() / "config.toml"


def get_store_path() -> Path:
    """Get the default key-value store file path."""
    return get_todolist_home() / "todos.json"


def get_logs_path() -> Path:
    """Get the default logs directory path."""
    return get_todolist_home() / "logs"
