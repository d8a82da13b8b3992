"""Todo list public types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


@dataclass
class Entry:
    """A single item in the todo list."""

    description: str
    completed: bool = False
    editing: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "description": self.description,
            "completed": self.completed,
            "editing": self.editing,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Entry:
        """Hydrate an entry from its serialized record.

        All three fields are required and must carry the right type; anything
        else raises ValueError.
        """
        try:
            description = data["description"]
            completed = data["completed"]
            editing = data["editing"]
        except (KeyError, TypeError) as e:
            raise ValueError(f"malformed entry record: {data!r}") from e
        if not isinstance(description, str):
            raise ValueError("description must be a string")
        if not isinstance(completed, bool) or not isinstance(editing, bool):
            raise ValueError("completed and editing must be booleans")
        return cls(description=description, completed=completed, editing=editing)


class Filter(StrEnum):
    """View mode selecting which entries are visible."""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"

    def fits(self, entry: Entry) -> bool:
        match self:
            case Filter.ALL:
                return True
            case Filter.ACTIVE:
                return not entry.completed
            case Filter.COMPLETED:
                return entry.completed

    @property
    def href(self) -> str:
        match self:
            case Filter.ALL:
                return "#/"
            case Filter.ACTIVE:
                return "#/active"
            case Filter.COMPLETED:
                return "#/completed"

    @property
    def label(self) -> str:
        return self.value.capitalize()
