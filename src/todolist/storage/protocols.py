"""Protocol definitions for the storage subsystem.

A key-value store holds serialized string values under named keys. Backends
implement this interface so the persistence gateway can be exercised against
an in-memory store in tests.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """Protocol for durable key-value storage."""

    def get(self, key: str) -> str | None:
        """Get the value stored under ``key``, or None."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ...

    def delete(self, key: str) -> bool:
        """Delete ``key``. Returns False if it was not present."""
        ...
