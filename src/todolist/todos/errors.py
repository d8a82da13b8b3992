"""Todo list error taxonomy."""


class TodoError(Exception):
    """Base class for todo list errors."""

    pass


class IndexOutOfRange(TodoError, IndexError):
    """An index did not resolve to an entry in the filtered view."""

    def __init__(self, idx: int, size: int) -> None:
        super().__init__(f"index {idx} out of range for filtered view of {size}")
        self.idx = idx
        self.size = size


class PersistenceUnavailable(TodoError):
    """The durable store could not be opened, read, or written."""

    pass


class DeserializationFailure(TodoError):
    """A persisted entry collection could not be decoded."""

    pass
