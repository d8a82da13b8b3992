"""CLI command modules."""

from todolist.cli.commands import config, shell, todo

__all__ = [
    "config",
    "shell",
    "todo",
]
