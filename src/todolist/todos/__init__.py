"""Todo list core.

Public API:
- TodoApp: Intent dispatcher with persist-after-update
- State: In-memory reducer
- resolve_filtered_index: Filtered-view to absolute index mapping

Types:
- Entry, Filter

Errors:
- TodoError, IndexOutOfRange, PersistenceUnavailable, DeserializationFailure
"""

from todolist.todos.app import TodoApp
from todolist.todos.errors import (
    DeserializationFailure,
    IndexOutOfRange,
    PersistenceUnavailable,
    TodoError,
)
from todolist.todos.state import State, resolve_filtered_index
from todolist.todos.types import Entry, Filter

__all__ = [
    "DeserializationFailure",
    "Entry",
    "Filter",
    "IndexOutOfRange",
    "PersistenceUnavailable",
    "State",
    "TodoApp",
    "TodoError",
    "resolve_filtered_index",
]
