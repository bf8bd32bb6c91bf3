# tests/test_notify.py
"""
Tests for todo_aggregator.notify.
"""

from todo_aggregator.aggregate.executor import AggregateSummary
from todo_aggregator.aggregate.writer import WriteResult
from todo_aggregator.notify import (
    BUSY_MESSAGE,
    NO_CHANGES_MESSAGE,
    CallbackNotifier,
    LoggingNotifier,
    Notifier,
    format_report,
)


class TestFormatReport:
    """Tests for format_report()."""

    def test_changed_with_plural_counts(self):
        summary = AggregateSummary(write=WriteResult(content_changed=True, added=2, removed=3))

        message = format_report(summary, "Todo Dashboard.md")

        assert message.startswith("🎉 Todo Dashboard Updated")
        assert "File: Todo Dashboard.md" in message
        assert "Added: 2 new todos" in message
        assert "Removed: 3 todos" in message

    def test_singular_counts_and_zero_lines_omitted(self):
        summary = AggregateSummary(write=WriteResult(content_changed=True, added=1, removed=0))

        message = format_report(summary, "Dash.md")

        assert "Added: 1 new todo\n" in message
        assert "Removed" not in message

    def test_unchanged(self):
        summary = AggregateSummary(write=WriteResult(content_changed=False))

        assert format_report(summary, "Dash.md") == NO_CHANGES_MESSAGE

    def test_busy(self):
        summary = AggregateSummary(skipped_busy=True)

        assert format_report(summary, "Dash.md") == BUSY_MESSAGE


def test_callback_notifier():
    received = []
    notifier = CallbackNotifier(received.append)

    notifier.notify("hello")

    assert received == ["hello"]
    assert isinstance(notifier, Notifier)


def test_logging_notifier(caplog):
    caplog.set_level("INFO")

    LoggingNotifier().notify("hello")

    assert "hello" in caplog.text
