# todo_aggregator/notify.py
"""
Notification sink for aggregation reports.

Notifiers are fire-and-forget: the aggregator never depends on whether a
message was delivered.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Protocol, runtime_checkable

from todo_aggregator.logging.logger import get_logger
from todo_aggregator.logging.tags import AGGREGATE

if TYPE_CHECKING:
    from todo_aggregator.aggregate.executor import AggregateSummary

logger = get_logger(__name__)

BUSY_MESSAGE = "⏳ Aggregation already in progress"
NO_CHANGES_MESSAGE = "✅ No Changes Detected!\nYour todos are up-to-date!"


@runtime_checkable
class Notifier(Protocol):
    def notify(self, message: str) -> None:
        ...


class LoggingNotifier:
    """Sends reports to the log."""

    def notify(self, message: str) -> None:
        logger.info(f"{AGGREGATE} {message}")


class CallbackNotifier:
    """Sends reports to any callable, e.g. a console printer."""

    def __init__(self, callback: Callable[[str], None]) -> None:
        self._callback = callback

    def notify(self, message: str) -> None:
        self._callback(message)


def _plural(count: int, word: str) -> str:
    return f"{word}{'s' if count > 1 else ''}"


def format_report(summary: "AggregateSummary", target_path: str) -> str:
    """Render the user-facing message for one aggregation run."""
    if summary.skipped_busy:
        return BUSY_MESSAGE

    write = summary.write
    if write is None or not write.content_changed:
        return NO_CHANGES_MESSAGE

    message = "🎉 Todo Dashboard Updated\n\n"
    message += f"File: {target_path}\n"
    if write.added > 0:
        message += f"- ➕ Added: {write.added} new {_plural(write.added, 'todo')}\n"
    if write.removed > 0:
        message += f"- ➖ Removed: {write.removed} {_plural(write.removed, 'todo')}\n"
    return message


__all__ = [
    "BUSY_MESSAGE",
    "NO_CHANGES_MESSAGE",
    "Notifier",
    "LoggingNotifier",
    "CallbackNotifier",
    "format_report",
]
