"""Interactive todo shell.

Holds one TodoApp for the whole session so the view filter and input buffers
survive between gestures, the way a long-lived UI would.
"""

from __future__ import annotations

import typer

from todolist.cli.console import console, dim, error
from todolist.cli.runtime import open_app, render
from todolist.todos import Filter, TodoApp
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

HELP = """\
add TEXT          add a todo
toggle N          flip todo N between open and done
edit N TEXT       replace the text of todo N (empty TEXT removes it)
remove N          remove todo N
toggle-all        mark the whole view done, or open again
clear-completed   delete completed todos
filter VIEW       switch view: all, active, completed
list              show the current view
quit              leave the shell"""


class ShellError(Exception):
    """A shell line could not be understood."""


def parse_index(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ShellError(f"expected an index, got {raw!r}") from None


def parse_line(line: str) -> list[Message]:
    """Translate one shell line into the messages its gesture produces.

    Returns an empty list for lines that only display something.
    """
    command, _, rest = line.strip().partition(" ")
    rest = rest.strip()
    match command:
        case "add":
            return [Update(rest), Add()]
        case "toggle":
            return [Toggle(parse_index(rest))]
        case "remove":
            return [Remove(parse_index(rest))]
        case "edit":
            raw_idx, _, text = rest.partition(" ")
            idx = parse_index(raw_idx)
            return [ToggleEdit(idx), UpdateEdit(text), Edit(idx)]
        case "toggle-all":
            return [ToggleAll()]
        case "clear-completed":
            return [ClearCompleted()]
        case "filter":
            try:
                return [SetFilter(Filter(rest.lower()))]
            except ValueError:
                raise ShellError(f"unknown view {rest!r}") from None
        case "list" | "":
            return []
        case _:
            raise ShellError(f"unknown command {command!r}, try 'help'")


def run_line(todo_app: TodoApp, line: str) -> None:
    """Parse and apply one line, stopping at the first rejected message."""
    try:
        messages = parse_line(line)
    except ShellError as e:
        error(str(e))
        return
    for message in messages:
        if not todo_app.dispatch(message):
            error(f"No todo at index {getattr(message, 'idx', '?')}")
            return
    render(todo_app)


def register(app: typer.Typer) -> None:
    """Register the shell command."""

    @app.command()
    def shell(ctx: typer.Context) -> None:
        """Start an interactive todo session."""
        todo_app = open_app(ctx, use_rich=True)
        render(todo_app)
        dim("Type 'help' for commands, 'quit' to leave")
        while True:
            try:
                line = console.input("[bold cyan]todo>[/bold cyan] ").strip()
            except EOFError:
                break
            except KeyboardInterrupt:
                dim("Cancelled")
                continue
            if line.lower() in ("quit", "exit"):
                break
            if line == "help":
                console.print(HELP, markup=False, highlight=False)
                continue
            run_line(todo_app, line)
