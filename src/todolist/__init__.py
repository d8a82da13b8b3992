"""todolist - a persistent todo list with filtered views."""

__version__ = "0.1.0"
