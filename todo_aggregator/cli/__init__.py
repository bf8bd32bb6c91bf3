# todo_aggregator/cli/__init__.py
"""
Main todo-aggregator CLI module.
"""

from todo_aggregator.cli.cli import app, main

__all__ = ["app", "main"]
