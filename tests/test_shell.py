"""Tests for shell line parsing."""

import pytest

from todolist.cli.commands.shell import ShellError, parse_line
from todolist.todos import Filter
from todolist.todos.messages import (
    Add,
    ClearCompleted,
    Edit,
    Remove,
    SetFilter,
    Toggle,
    ToggleAll,
    ToggleEdit,
    Update,
    UpdateEdit,
)


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("add buy milk", [Update("buy milk"), Add()]),
        ("add", [Update(""), Add()]),
        ("toggle 2", [Toggle(2)]),
        ("remove 0", [Remove(0)]),
        ("edit 1 oat milk", [ToggleEdit(1), UpdateEdit("oat milk"), Edit(1)]),
        ("edit 1", [ToggleEdit(1), UpdateEdit(""), Edit(1)]),
        ("toggle-all", [ToggleAll()]),
        ("clear-completed", [ClearCompleted()]),
        ("filter Active", [SetFilter(Filter.ACTIVE)]),
        ("list", []),
        ("   ", []),
    ],
)
def test_parse_line(line, expected):
    assert parse_line(line) == expected


@pytest.mark.parametrize("line", ["toggle", "toggle one", "filter someday", "undo"])
def test_parse_line_rejects(line):
    with pytest.raises(ShellError):
        parse_line(line)
