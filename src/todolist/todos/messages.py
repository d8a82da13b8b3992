"""Intents a presentation shell dispatches to the todo app."""

from __future__ import annotations

from dataclasses import dataclass

from todolist.todos.types import Filter


@dataclass(frozen=True)
class Add:
    """Commit the new-entry buffer as an entry."""


@dataclass(frozen=True)
class Edit:
    """Commit the edit buffer to the entry at ``idx``."""

    idx: int


@dataclass(frozen=True)
class Update:
    text: str


@dataclass(frozen=True)
class UpdateEdit:
    text: str


@dataclass(frozen=True)
class Remove:
    idx: int


@dataclass(frozen=True)
class SetFilter:
    filter: Filter


@dataclass(frozen=True)
class ToggleAll:
    """Flip completion of the visible entries based on the first one."""


@dataclass(frozen=True)
class ToggleEdit:
    idx: int


@dataclass(frozen=True)
class Toggle:
    idx: int


@dataclass(frozen=True)
class ClearCompleted:
    pass


Message = (
    Add
    | Edit
    | Update
    | UpdateEdit
    | Remove
    | SetFilter
    | ToggleAll
    | ToggleEdit
    | Toggle
    | ClearCompleted
)
