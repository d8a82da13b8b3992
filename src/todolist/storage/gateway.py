"""Persistence gateway for the entry collection.

The whole collection is stored as a JSON array under a single key. Only
entries are persisted; the view filter and input buffers never are.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from todolist.todos.errors import DeserializationFailure
from todolist.todos.types import Entry

if TYPE_CHECKING:
    from todolist.storage.protocols import KeyValueStore

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "quinnjr.todomvc.self"


def encode_entries(entries: list[Entry]) -> str:
    return json.dumps([entry.to_dict() for entry in entries])


def decode_entries(raw: str) -> list[Entry]:
    """Decode a serialized entry collection.

    Raises:
        DeserializationFailure: If ``raw`` is not a JSON array of complete
            entry records.
    """
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, RecursionError) as e:
        raise DeserializationFailure(f"invalid JSON: {e}") from e
    if not isinstance(data, list):
        raise DeserializationFailure("expected a JSON array of entries")
    try:
        return [Entry.from_dict(item) for item in data]
    except ValueError as e:
        raise DeserializationFailure(str(e)) from e


class PersistenceGateway:
    """Reads and writes the entry collection under one storage key."""

    def __init__(self, store: KeyValueStore, key: str = DEFAULT_STORAGE_KEY) -> None:
        self._store = store
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    @property
    def store(self) -> KeyValueStore:
        return self._store

    def load(self) -> list[Entry]:
        """Load the persisted entries.

        A missing or undecodable slot yields an empty list. Errors from the
        store itself (PersistenceUnavailable) propagate.
        """
        raw = self._store.get(self._key)
        if raw is None:
            logger.debug("No persisted entries", extra={"key": self._key})
            return []
        try:
            entries = decode_entries(raw)
        except DeserializationFailure as e:
            logger.warning(
                "Discarding undecodable entries, starting fresh",
                extra={"key": self._key, "error": str(e)},
            )
            return []
        logger.debug("Loaded %d entries", len(entries))
        return entries

    def save(self, entries: list[Entry]) -> None:
        self._store.set(self._key, encode_entries(entries))
