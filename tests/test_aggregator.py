# tests/test_aggregator.py
"""
Tests for todo_aggregator.aggregate.executor.

Key tests verify that:
1. A second run without changes reports no changes (idempotence)
2. Unchanged documents are served from the cache, never re-extracted
3. Deleted documents leave no cache entry and no output items
4. Read failures are non-fatal and are not cached
5. Output failures propagate as OutputWriteError
6. Overlapping runs are refused
"""

from typing import List

import pytest

from todo_aggregator.aggregate.cache import ScanCache
from todo_aggregator.aggregate.executor import (
    AggregateSummary,
    TodoAggregator,
    run_aggregation,
)
from todo_aggregator.aggregate.extractor import extract_items
from todo_aggregator.config import AggregatorSettings
from todo_aggregator.core.exceptions import DocumentWriteError, OutputWriteError
from todo_aggregator.notify import BUSY_MESSAGE, NO_CHANGES_MESSAGE
from todo_aggregator.store import MemoryDocumentStore

TARGET = "Todo Dashboard.md"


class CountingExtractor:
    """Extractor wrapper that records which documents were extracted."""

    def __init__(self) -> None:
        self.calls: List[str] = []

    def __call__(self, content: str, source_path: str):
        self.calls.append(source_path)
        return extract_items(content, source_path)


class RecordingNotifier:
    def __init__(self) -> None:
        self.messages: List[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture
def store() -> MemoryDocumentStore:
    store = MemoryDocumentStore()
    store.put("Projects/alpha.md", "# Alpha\n- [ ] Draft plan\n- [x] Kickoff\n- [ ] Review budget\n")
    store.put("Inbox.md", "- [ ] Buy milk\n")
    store.put("Notes.md", "No todos here.\n")
    return store


@pytest.fixture
def settings() -> AggregatorSettings:
    return AggregatorSettings(target_path=TARGET)


class TestAggregateSummary:
    """Tests for AggregateSummary."""

    def test_str_format(self):
        summary = AggregateSummary(scanned=3, cache_hits=2, extracted=1, items=4)

        result = str(summary)
        assert "scanned 3" in result
        assert "cached 2" in result
        assert "extracted 1" in result
        assert "items 4" in result

    def test_duration(self):
        from datetime import datetime, timezone

        summary = AggregateSummary()
        summary.started_at = datetime(2024, 1, 1, 0, 0, 0, tzinfo=timezone.utc)
        summary.finished_at = datetime(2024, 1, 1, 0, 0, 10, tzinfo=timezone.utc)

        assert summary.duration_seconds == 10.0


class TestTodoAggregator:
    """Tests for TodoAggregator.aggregate()."""

    def test_first_run_creates_dashboard(self, store, settings):
        summary = TodoAggregator(store, settings).aggregate()

        assert summary.content_changed is True
        assert summary.write.added == 3
        assert summary.write.removed == 0
        assert summary.scanned == 3
        assert summary.extracted == 3
        assert store.content(TARGET) == (
            "## 📄 [[Projects/alpha.md]]\n"
            "- [ ] Draft plan\n"
            "- [ ] Review budget\n"
            "\n"
            "## 📄 [[Inbox.md]]\n"
            "- [ ] Buy milk\n"
        )

    def test_second_run_without_changes_is_a_no_op(self, store, settings):
        aggregator = TodoAggregator(store, settings)
        aggregator.aggregate()

        summary = aggregator.aggregate()

        assert summary.content_changed is False
        assert summary.write.added == 0
        assert summary.write.removed == 0
        assert store.modifies == []

    def test_unchanged_documents_are_not_re_extracted(self, store, settings):
        extractor = CountingExtractor()
        aggregator = TodoAggregator(store, settings, extractor=extractor)
        aggregator.aggregate()
        extractor.calls.clear()
        store.reads.clear()

        store.put("Inbox.md", "- [ ] Buy milk\n- [ ] Buy bread\n")
        summary = aggregator.aggregate()

        assert extractor.calls == ["Inbox.md"]
        assert dict(store.reads) == {"Inbox.md": 1, TARGET: 1}
        assert summary.cache_hits == 2
        assert summary.extracted == 1
        assert summary.write.added == 1

    def test_cached_output_matches_fresh_extraction(self, store, settings):
        cached = TodoAggregator(store, settings)
        cached.aggregate()
        store.put("Inbox.md", "- [ ] Changed\n")
        cached.aggregate()
        cached_body = store.content(TARGET)

        fresh_store = MemoryDocumentStore()
        for doc in store.list_documents():
            if doc.path != TARGET:
                fresh_store.put(doc.path, store.content(doc.path))
        TodoAggregator(fresh_store, settings).aggregate()

        assert fresh_store.content(TARGET) == cached_body

    def test_deleted_document_is_pruned(self, store, settings):
        aggregator = TodoAggregator(store, settings)
        aggregator.aggregate()
        assert "Inbox.md" in aggregator.cache

        store.delete("Inbox.md")
        summary = aggregator.aggregate()

        assert "Inbox.md" not in aggregator.cache
        assert summary.pruned == 1
        assert summary.write.removed == 1
        assert "Buy milk" not in store.content(TARGET)

    def test_cache_holds_one_entry_per_scanned_document(self, store, settings):
        aggregator = TodoAggregator(store, settings)
        aggregator.aggregate()
        aggregator.aggregate()

        assert sorted(aggregator.cache.paths()) == ["Inbox.md", "Notes.md", "Projects/alpha.md"]

    def test_excluded_prefix_contributes_nothing(self, store):
        store.put("archive/notes.md", "- [ ] Old task\n")
        settings = AggregatorSettings(target_path=TARGET, excluded_prefixes=["archive"])

        aggregator = TodoAggregator(store, settings)
        summary = aggregator.aggregate()

        assert summary.excluded == 1
        assert "Old task" not in store.content(TARGET)
        assert "archive/notes.md" not in aggregator.cache
        assert store.reads["archive/notes.md"] == 0

    def test_target_document_never_scans_itself(self, store, settings):
        store.put(TARGET, "- [ ] Looks like a todo\n")

        aggregator = TodoAggregator(store, settings)
        aggregator.aggregate()
        aggregator.aggregate()

        assert TARGET not in aggregator.cache
        assert "Looks like a todo" not in store.content(TARGET)

    def test_dot_relative_target_is_still_excluded(self, store):
        settings = AggregatorSettings(target_path=f"./{TARGET}")
        aggregator = TodoAggregator(store, settings)

        aggregator.aggregate()
        summary = aggregator.aggregate()

        assert summary.content_changed is False
        assert store.creates == [TARGET]
        assert store.modifies == []
        assert TARGET not in aggregator.cache
        assert f"[[{TARGET}]]" not in store.content(TARGET)

    def test_read_failure_is_non_fatal_and_not_cached(self, store, settings):
        store.fail_on("Inbox.md")
        aggregator = TodoAggregator(store, settings)

        summary = aggregator.aggregate()

        assert summary.read_errors == 1
        assert len(summary.error_details) == 1
        assert "Inbox.md" not in aggregator.cache
        assert "Buy milk" not in store.content(TARGET)
        assert "Draft plan" in store.content(TARGET)

        # Retried on the next run
        store.failing.clear()
        summary = aggregator.aggregate()
        assert summary.read_errors == 0
        assert "Buy milk" in store.content(TARGET)

    def test_output_failure_propagates_and_keeps_cache(self, store, settings):
        class FailingStore(MemoryDocumentStore):
            def create(self, path: str, text: str) -> None:
                raise DocumentWriteError("read-only vault")

        failing = FailingStore()
        failing.put("Inbox.md", "- [ ] Buy milk\n")
        aggregator = TodoAggregator(failing, settings)

        with pytest.raises(OutputWriteError):
            aggregator.aggregate()

        assert "Inbox.md" in aggregator.cache

    def test_grouping_is_contiguous_in_enumeration_order(self, settings):
        store = MemoryDocumentStore()
        store.put("z.md", "- [ ] z1\n- [ ] z2\n")
        store.put("a.md", "- [ ] a1\n")

        TodoAggregator(store, settings).aggregate()

        assert store.content(TARGET) == (
            "## 📄 [[z.md]]\n- [ ] z1\n- [ ] z2\n\n## 📄 [[a.md]]\n- [ ] a1\n"
        )

    def test_no_documents_writes_empty_dashboard(self, settings):
        store = MemoryDocumentStore()

        summary = TodoAggregator(store, settings).aggregate()

        assert summary.content_changed is True
        assert summary.write.added == 0
        assert store.content(TARGET) == "\n"

    def test_concurrent_run_is_refused(self, store, settings):
        notifier = RecordingNotifier()
        inner: List[AggregateSummary] = []

        def reentrant_extractor(content: str, source_path: str):
            if not inner:
                inner.append(aggregator.aggregate())
            return extract_items(content, source_path)

        aggregator = TodoAggregator(
            store, settings, extractor=reentrant_extractor, notifier=notifier
        )
        outer = aggregator.aggregate()

        assert inner[0].skipped_busy is True
        assert inner[0].write is None
        assert outer.skipped_busy is False
        assert outer.content_changed is True
        assert notifier.messages[0] == BUSY_MESSAGE

    def test_notifier_receives_report(self, store, settings):
        notifier = RecordingNotifier()
        aggregator = TodoAggregator(store, settings, notifier=notifier)

        aggregator.aggregate()
        aggregator.aggregate()

        assert "Added: 3 new todos" in notifier.messages[0]
        assert notifier.messages[1] == NO_CHANGES_MESSAGE

    def test_notifier_failure_does_not_fail_run(self, store, settings):
        class BrokenNotifier:
            def notify(self, message: str) -> None:
                raise RuntimeError("no display")

        summary = TodoAggregator(store, settings, notifier=BrokenNotifier()).aggregate()

        assert summary.content_changed is True


def test_run_aggregation_reuses_shared_cache(store, settings):
    cache = ScanCache()
    run_aggregation(store, settings, cache=cache)
    store.reads.clear()

    summary = run_aggregation(store, settings, cache=cache)

    assert summary.cache_hits == 3
    assert summary.extracted == 0
    assert dict(store.reads) == {TARGET: 1}
