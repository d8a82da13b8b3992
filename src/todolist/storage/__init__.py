"""Durable storage for the entry collection.

Public API:
- PersistenceGateway: Load/save entries under one storage key
- create_gateway: Factory wiring the configured backend

Backends:
- KeyValueStore: Protocol implemented by every backend
- JSONFileStore, MemoryStore
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from todolist.storage.file import JSONFileStore
from todolist.storage.gateway import (
    DEFAULT_STORAGE_KEY,
    PersistenceGateway,
    decode_entries,
    encode_entries,
)
from todolist.storage.memory import MemoryStore
from todolist.storage.protocols import KeyValueStore

if TYPE_CHECKING:
    from todolist.config.models import TodoListConfig


def create_gateway(config: TodoListConfig) -> PersistenceGateway:
    """Create a gateway over the backend selected in ``config.storage``.

    Raises:
        PersistenceUnavailable: If the file backend cannot be opened.
    """
    storage = config.storage
    store: KeyValueStore
    if storage.backend == "memory":
        store = MemoryStore()
    else:
        store = JSONFileStore(storage.path)
    return PersistenceGateway(store, key=storage.key)


__all__ = [
    "DEFAULT_STORAGE_KEY",
    "JSONFileStore",
    "KeyValueStore",
    "MemoryStore",
    "PersistenceGateway",
    "create_gateway",
    "decode_entries",
    "encode_entries",
]
