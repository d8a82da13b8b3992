"""Shared test fixtures and factories."""

import logging
from pathlib import Path

import pytest

from todolist.storage import MemoryStore, PersistenceGateway
from todolist.todos import Entry, Filter, State, TodoApp

# =============================================================================
# Factories
# =============================================================================


def make_entries(*flags: bool) -> list[Entry]:
    """Build entries named A, B, C... with the given completed flags."""
    return [
        Entry(description=chr(ord("A") + i), completed=flag)
        for i, flag in enumerate(flags)
    ]


def descriptions(entries: list[Entry]) -> list[str]:
    return [entry.description for entry in entries]


# =============================================================================
# Storage Fixtures
# =============================================================================


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def gateway(memory_store: MemoryStore) -> PersistenceGateway:
    return PersistenceGateway(memory_store, key="test.todos")


@pytest.fixture
def todo_app(gateway: PersistenceGateway) -> TodoApp:
    return TodoApp(state=State(filter=Filter.ALL), gateway=gateway)


# =============================================================================
# CLI Fixtures
# =============================================================================


@pytest.fixture
def todolist_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point TODOLIST_HOME at a temporary directory."""
    home = tmp_path / "home"
    monkeypatch.setenv("TODOLIST_HOME", str(home))
    for var in ("TODOLIST_STORAGE_PATH", "TODOLIST_STORAGE_KEY", "TODOLIST_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    return home


@pytest.fixture
def cli_runner(todolist_home: Path):
    """Create a Typer CLI test runner with colors disabled."""
    from typer.testing import CliRunner

    return CliRunner(env={"NO_COLOR": "1", "COLUMNS": "120"})


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Undo configure_logging() calls made by CLI commands."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)
