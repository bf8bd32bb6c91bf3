# todo_aggregator/cli/commands/__init__.py
"""CLI commands."""

from todo_aggregator.cli.commands import aggregate, config

__all__ = ["aggregate", "config"]
