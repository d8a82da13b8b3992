"""Todo list state reducer.

Every index taken by a State operation is a position within the currently
filtered view, never an absolute position in ``entries``. Indexes are resolved
through ``resolve_filtered_index`` before anything is mutated.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from todolist.todos.errors import IndexOutOfRange
from todolist.todos.types import Entry, Filter


def resolve_filtered_index(entries: list[Entry], filter: Filter, idx: int) -> int:
    """Map a filtered-view position to its absolute position in ``entries``.

    Raises:
        IndexOutOfRange: If the filtered view has no element at ``idx``.
    """
    positions = [i for i, entry in enumerate(entries) if filter.fits(entry)]
    if idx < 0 or idx >= len(positions):
        raise IndexOutOfRange(idx, len(positions))
    return positions[idx]


@dataclass
class State:
    """Entry collection, current view filter, and the two input buffers."""

    entries: list[Entry] = field(default_factory=list)
    filter: Filter = Filter.ALL
    value: str = ""
    edit_value: str = ""

    def filtered(self) -> list[Entry]:
        return [entry for entry in self.entries if self.filter.fits(entry)]

    def total(self) -> int:
        return len(self.entries)

    def total_completed(self) -> int:
        return sum(1 for entry in self.entries if Filter.COMPLETED.fits(entry))

    def is_all_completed(self) -> bool:
        """Report the completed flag of the first entry in the filtered view.

        An empty view reports False. Later entries are not consulted.
        """
        for entry in self.entries:
            if self.filter.fits(entry):
                return entry.completed
        return False

    def add(self, description: str) -> None:
        text = description.strip()
        if text:
            self.entries.append(Entry(description=text))
        self.value = ""

    def update_value(self, text: str) -> None:
        self.value = text

    def update_edit_value(self, text: str) -> None:
        self.edit_value = text

    def remove(self, idx: int) -> None:
        del self.entries[self._resolve(idx)]

    def toggle(self, idx: int) -> None:
        entry = self.entries[self._resolve(idx)]
        entry.completed = not entry.completed

    def toggle_all(self, value: bool) -> None:
        for entry in self.entries:
            if self.filter.fits(entry):
                entry.completed = value

    def toggle_edit(self, idx: int) -> None:
        entry = self.entries[self._resolve(idx)]
        entry.editing = not entry.editing

    def clear_all_edit(self) -> None:
        for entry in self.entries:
            entry.editing = False

    def complete_edit(self, idx: int, text: str) -> None:
        """Commit an edit, or drop the entry when ``text`` is empty.

        The entry's editing flag is flipped rather than cleared.
        """
        if not text:
            self.remove(idx)
            return
        entry = self.entries[self._resolve(idx)]
        entry.description = text
        entry.editing = not entry.editing

    def clear_completed(self) -> None:
        self.entries = [entry for entry in self.entries if Filter.ACTIVE.fits(entry)]

    def _resolve(self, idx: int) -> int:
        return resolve_filtered_index(self.entries, self.filter, idx)
