"""CLI module."""

from todolist.cli.app import app

__all__ = ["app"]
