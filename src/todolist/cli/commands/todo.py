"""One-shot todo commands.

Each command opens the store, dispatches the intents a user gesture would
produce, and renders the resulting view.
"""

from __future__ import annotations

from typing import Annotated

import typer

from todolist.cli.console import success
from todolist.cli.runtime import dispatch_or_exit, open_app, render
from todolist.todos import Filter
from todolist.todos.messages import (
    Add,
    ClearCompleted,
    Edit,
    Remove,
    Toggle,
    ToggleAll,
    ToggleEdit,
    Update,
    UpdateEdit,
)

FilterOption = Annotated[
    Filter,
    typer.Option("--filter", "-f", help="View the index refers to"),
]
IndexArgument = Annotated[
    int,
    typer.Argument(help="Position in the filtered view (0-based)"),
]


def register(app: typer.Typer) -> None:
    """Register the todo commands on the root app."""

    @app.command("list")
    def list_cmd(
        ctx: typer.Context,
        filter: FilterOption = Filter.ALL,
    ) -> None:
        """List todos in a view."""
        render(open_app(ctx, filter))

    @app.command("add")
    def add_cmd(
        ctx: typer.Context,
        text: Annotated[str, typer.Argument(help="Todo text")],
    ) -> None:
        """Add a new todo."""
        todo_app = open_app(ctx)
        before = todo_app.state.total()
        todo_app.dispatch(Update(text))
        todo_app.dispatch(Add())
        if todo_app.state.total() > before:
            success("Added todo")
        render(todo_app)

    @app.command("toggle")
    def toggle_cmd(
        ctx: typer.Context,
        idx: IndexArgument,
        filter: FilterOption = Filter.ALL,
    ) -> None:
        """Flip a todo between open and done."""
        todo_app = open_app(ctx, filter)
        dispatch_or_exit(todo_app, Toggle(idx))
        render(todo_app)

    @app.command("remove")
    def remove_cmd(
        ctx: typer.Context,
        idx: IndexArgument,
        filter: FilterOption = Filter.ALL,
    ) -> None:
        """Remove a todo."""
        todo_app = open_app(ctx, filter)
        dispatch_or_exit(todo_app, Remove(idx))
        success("Removed todo")
        render(todo_app)

    @app.command("edit")
    def edit_cmd(
        ctx: typer.Context,
        idx: IndexArgument,
        text: Annotated[str, typer.Argument(help="New text; empty removes the todo")],
        filter: FilterOption = Filter.ALL,
    ) -> None:
        """Replace a todo's text."""
        todo_app = open_app(ctx, filter)
        dispatch_or_exit(todo_app, ToggleEdit(idx))
        todo_app.dispatch(UpdateEdit(text))
        dispatch_or_exit(todo_app, Edit(idx))
        render(todo_app)

    @app.command("toggle-all")
    def toggle_all_cmd(
        ctx: typer.Context,
        filter: FilterOption = Filter.ALL,
    ) -> None:
        """Mark every todo in the view done, or open again."""
        todo_app = open_app(ctx, filter)
        todo_app.dispatch(ToggleAll())
        render(todo_app)

    @app.command("clear-completed")
    def clear_completed_cmd(ctx: typer.Context) -> None:
        """Delete every completed todo."""
        todo_app = open_app(ctx)
        cleared = todo_app.state.total_completed()
        todo_app.dispatch(ClearCompleted())
        success(f"Cleared {cleared} completed todo(s)")
        render(todo_app)
