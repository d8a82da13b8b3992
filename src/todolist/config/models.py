"""Configuration models using Pydantic."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from todolist.config.paths import get_store_path
from todolist.storage.gateway import DEFAULT_STORAGE_KEY


class StorageConfig(BaseModel):
    """Configuration for the persistence slot.

    The "file" backend keeps every key in one JSON file at ``path``. The
    "memory" backend forgets everything when the process exits.
    """

    backend: Literal["file", "memory"] = "file"
    path: Path = Field(default_factory=get_store_path)
    key: str = DEFAULT_STORAGE_KEY

    @field_validator("key")
    @classmethod
    def _key_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("storage key must not be blank")
        return value

    @field_validator("path")
    @classmethod
    def _expand_path(cls, value: Path) -> Path:
        return value.expanduser()


class LoggingConfig(BaseModel):
    """Configuration for log output."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_to_file: bool = False


class ConfigError(Exception):
    """Configuration error."""

    pass


class TodoListConfig(BaseModel):
    """Root configuration model."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
