"""Main CLI application."""

from pathlib import Path
from typing import Annotated

import typer

from todolist.cli.commands import config, shell, todo
from todolist.cli.runtime import CliOptions

app = typer.Typer(
    name="todolist",
    help="todolist - keep a todo list in your terminal",
    no_args_is_help=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Keep a todo list in your terminal."""
    ctx.obj = CliOptions(config_path=config_path, verbose=verbose)


todo.register(app)
shell.register(app)
config.register(app)


if __name__ == "__main__":
    app()
