"""Todo app: applies intents to State and persists after each one."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from todolist.todos.errors import IndexOutOfRange, PersistenceUnavailable
from todolist.todos.messages import (
    Add,
    ClearCompleted,
    Edit,
    Message,
    Remove,
    SetFilter,
    Toggle,
    ToggleAll,
    ToggleEdit,
    Update,
    UpdateEdit,
)
from todolist.todos.state import State, resolve_filtered_index
from todolist.todos.types import Entry, Filter

if TYPE_CHECKING:
    from todolist.storage.gateway import PersistenceGateway

logger = logging.getLogger(__name__)


class TodoApp:
    """Single-writer loop around a State and its persistence gateway.

    A presentation shell dispatches one message per user gesture, then
    re-renders from ``state`` or ``visible()``.
    """

    def __init__(self, *, state: State, gateway: PersistenceGateway) -> None:
        self._state = state
        self._gateway = gateway

    @classmethod
    def open(cls, gateway: PersistenceGateway) -> TodoApp:
        """Build an app from the persisted entries.

        Raises:
            PersistenceUnavailable: If the store cannot be read.
        """
        state = State(entries=gateway.load(), filter=Filter.ALL)
        logger.debug("Todo app opened", extra={"entries": state.total()})
        return cls(state=state, gateway=gateway)

    @property
    def state(self) -> State:
        return self._state

    def visible(self) -> list[tuple[int, Entry]]:
        """Return ``(idx, entry)`` pairs of the filtered view."""
        return list(enumerate(self._state.filtered()))

    def dispatch(self, message: Message) -> bool:
        """Apply one message, then save the entries.

        Returns False when the message referenced an index outside the
        filtered view; the state is left unchanged in that case.
        """
        logger.debug("Dispatching %s", message)
        applied = True
        try:
            self._update(message)
        except IndexOutOfRange as e:
            logger.warning(
                "Ignoring %s: %s", type(message).__name__, e, extra={"idx": e.idx}
            )
            applied = False
        self._persist()
        return applied

    def _update(self, message: Message) -> None:
        state = self._state
        match message:
            case Add():
                state.add(state.value)
            case Edit(idx=idx):
                state.complete_edit(idx, state.edit_value.strip())
                state.edit_value = ""
            case Update(text=text):
                state.update_value(text)
            case UpdateEdit(text=text):
                state.update_edit_value(text)
            case Remove(idx=idx):
                state.remove(idx)
            case SetFilter(filter=filter):
                state.filter = filter
            case ToggleEdit(idx=idx):
                position = resolve_filtered_index(state.entries, state.filter, idx)
                state.edit_value = state.entries[position].description
                state.clear_all_edit()
                state.toggle_edit(idx)
            case ToggleAll():
                state.toggle_all(not state.is_all_completed())
            case Toggle(idx=idx):
                state.toggle(idx)
            case ClearCompleted():
                state.clear_completed()

    def _persist(self) -> None:
        try:
            self._gateway.save(self._state.entries)
        except PersistenceUnavailable:
            logger.error("Failed to persist entries", exc_info=True)
