"""Configuration commands."""

from pathlib import Path
from typing import Annotated

import click
import typer

from todolist.cli.console import console, create_table, dim, error, success
from todolist.cli.runtime import get_options


def register(app: typer.Typer) -> None:
    """Register the config command."""

    @app.command()
    def config(
        ctx: typer.Context,
        action: Annotated[
            str | None,
            typer.Argument(help="Action: show, validate"),
        ] = None,
        path: Annotated[
            Path | None,
            typer.Option(
                "--path",
                "-p",
                help="Config file (default: --config or $TODOLIST_HOME/config.toml)",
            ),
        ] = None,
    ) -> None:
        """Show or validate configuration."""
        if action is None:
            click.echo(ctx.get_help())
            raise typer.Exit(0)

        from todolist.config import ConfigError, load_config
        from todolist.config.paths import get_config_path

        if action not in ("show", "validate"):
            error(f"Unknown action: {action}")
            console.print("Valid actions: show, validate")
            raise typer.Exit(1)

        explicit = path or get_options(ctx).config_path
        expanded_path = explicit.expanduser() if explicit else get_config_path()
        if not expanded_path.exists() and (explicit or action == "validate"):
            error(f"Config file not found: {expanded_path}")
            raise typer.Exit(1)

        try:
            config_obj = load_config(expanded_path if expanded_path.exists() else None)
        except ConfigError as e:
            error(f"Configuration validation failed: {e}")
            raise typer.Exit(1) from None

        if action == "validate":
            success(f"Configuration is valid: {expanded_path}")
            return

        if expanded_path.exists():
            console.print(f"[bold]Config file: {expanded_path}[/bold]")
        else:
            dim(f"No config file at {expanded_path}, showing effective settings")

        table = create_table(
            "Configuration",
            [("Setting", "cyan"), ("Value", "green")],
        )
        table.add_row("Storage backend", config_obj.storage.backend)
        table.add_row("Storage path", str(config_obj.storage.path))
        table.add_row("Storage key", config_obj.storage.key)
        table.add_row("Log level", config_obj.logging.level)
        table.add_row("Log to file", str(config_obj.logging.log_to_file))
        console.print(table)
