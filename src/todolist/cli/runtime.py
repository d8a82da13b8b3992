"""CLI runtime helpers: opening the app and rendering its view."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer
from rich.markup import escape

from todolist.cli.console import console, create_table, dim, error
from todolist.todos import Filter, PersistenceUnavailable, TodoApp
from todolist.todos.messages import Message, SetFilter


@dataclass
class CliOptions:
    """Global options captured by the root callback."""

    config_path: Path | None = None
    verbose: bool = False


def get_options(ctx: typer.Context) -> CliOptions:
    options = ctx.find_root().obj
    if isinstance(options, CliOptions):
        return options
    return CliOptions()


def open_app(
    ctx: typer.Context,
    filter: Filter = Filter.ALL,
    use_rich: bool = False,
) -> TodoApp:
    """Load config, configure logging, and open the todo app.

    Exits with status 1 when the config is invalid or the store cannot be
    opened.
    """
    from todolist.config import ConfigError, load_config
    from todolist.logging import configure_logging
    from todolist.storage import create_gateway

    options = get_options(ctx)
    try:
        config = load_config(options.config_path)
    except (ConfigError, FileNotFoundError) as e:
        error(str(e))
        raise typer.Exit(1) from None

    configure_logging(
        level="DEBUG" if options.verbose else config.logging.level,
        use_rich=use_rich,
        log_to_file=config.logging.log_to_file,
    )

    try:
        app = TodoApp.open(create_gateway(config))
    except PersistenceUnavailable as e:
        error(f"Storage unavailable: {e}")
        raise typer.Exit(1) from None

    if filter != Filter.ALL:
        app.dispatch(SetFilter(filter))
    return app


def dispatch_or_exit(app: TodoApp, message: Message) -> None:
    """Dispatch a message; report a rejected index and exit 1."""
    if not app.dispatch(message):
        error(_rejected(app, message))
        raise typer.Exit(1)


def _rejected(app: TodoApp, message: Message) -> str:
    idx = getattr(message, "idx", None)
    return (
        f"No todo at index {idx} in the {app.state.filter.label.lower()} view"
    )


def render(app: TodoApp) -> None:
    """Print the filtered view, the filter bar, and the counters."""
    state = app.state
    if not state.entries:
        dim("Nothing to do")
        return

    visible = app.visible()
    if visible:
        table = create_table(
            f"Todos ({state.filter.label})",
            [
                ("#", "dim"),
                ("Status", ""),
                ("Task", ""),
            ],
        )
        for idx, entry in visible:
            if entry.editing:
                status = "[yellow]editing[/yellow]"
            elif entry.completed:
                status = "[green]done[/green]"
            else:
                status = "[cyan]open[/cyan]"
            table.add_row(str(idx), status, escape(entry.description))
        console.print(table)
    else:
        dim(f"No {state.filter.label.lower()} todos")

    filters = "  ".join(
        f"[bold]{f.label}[/bold]" if f == state.filter else f"[dim]{f.label}[/dim]"
        for f in Filter
    )
    console.print(filters)
    console.print(
        f"{state.total()} item(s) left | Clear completed ({state.total_completed()})"
    )
