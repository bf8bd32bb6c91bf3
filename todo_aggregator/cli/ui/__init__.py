# todo_aggregator/cli/ui/__init__.py
"""
CLI UI components.

Usage:
    from todo_aggregator.cli.ui import ui

    ui.success("Done!")
"""

from __future__ import annotations

from .console import console
from .output import OutputMixin


class UI(OutputMixin):
    """Unified Rich-backed UI helpers."""

    pass


ui = UI()

__all__ = ["UI", "ui", "console"]
