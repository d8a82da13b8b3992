"""Configuration module."""

from todolist.config.loader import get_default_config, load_config
from todolist.config.models import (
    ConfigError,
    LoggingConfig,
    StorageConfig,
    TodoListConfig,
)
from todolist.config.paths import (
    get_config_path,
    get_logs_path,
    get_store_path,
    get_todolist_home,
)

__all__ = [
    "ConfigError",
    "LoggingConfig",
    "StorageConfig",
    "TodoListConfig",
    "get_config_path",
    "get_default_config",
    "get_logs_path",
    "get_store_path",
    "get_todolist_home",
    "load_config",
]
