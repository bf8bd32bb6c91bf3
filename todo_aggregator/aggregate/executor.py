# todo_aggregator/aggregate/executor.py
"""
Aggregation run orchestration.

One run:
1. Enumerate documents
2. Skip excluded paths
3. Reuse cached items for unchanged documents, read + extract the rest
4. Prune cache entries for documents that no longer exist
5. Write the dashboard (merge/diff)
6. Report the result through the notifier
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, List, Optional, Sequence, Set

from todo_aggregator.aggregate.cache import ScanCache
from todo_aggregator.aggregate.exclusion import ExclusionFilter
from todo_aggregator.aggregate.extractor import ChecklistItem, extract_items
from todo_aggregator.aggregate.writer import DashboardWriter, WriteResult
from todo_aggregator.config.schema import AggregatorSettings
from todo_aggregator.core.exceptions import DocumentReadError
from todo_aggregator.logging.logger import get_logger
from todo_aggregator.logging.tags import AGGREGATE, CACHE, EXTRACT
from todo_aggregator.notify import Notifier, format_report
from todo_aggregator.store.base import Document, DocumentStore

logger = get_logger(__name__)

Extractor = Callable[[str, str], Sequence[ChecklistItem]]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class AggregateSummary:
    """Summary of an aggregation run."""

    scanned: int = 0
    excluded: int = 0
    cache_hits: int = 0
    extracted: int = 0
    read_errors: int = 0
    pruned: int = 0
    items: int = 0
    write: Optional[WriteResult] = None
    skipped_busy: bool = False
    error_details: List[str] = field(default_factory=list)
    started_at: datetime = field(default_factory=_utcnow)
    finished_at: Optional[datetime] = None

    @property
    def content_changed(self) -> bool:
        return self.write is not None and self.write.content_changed

    @property
    def duration_seconds(self) -> float:
        if self.finished_at is None:
            return 0.0
        return (self.finished_at - self.started_at).total_seconds()

    def __str__(self) -> str:
        if self.skipped_busy:
            return "skipped: aggregation already in progress"
        base = (
            f"scanned {self.scanned}, excluded {self.excluded}, "
            f"cached {self.cache_hits}, extracted {self.extracted}, "
            f"errors {self.read_errors}, pruned {self.pruned}, items {self.items}"
        )
        if self.write is not None:
            if self.write.content_changed:
                base += f", added {self.write.added}, removed {self.write.removed}"
            else:
                base += ", no changes"
        return base


class TodoAggregator:
    """
    Aggregates unchecked checklist items from a document store into one
    dashboard document.

    The scan cache lives as long as the aggregator, so keep one instance
    around to benefit from it across runs.

    Usage:
        aggregator = TodoAggregator(store, settings, notifier=LoggingNotifier())
        summary = aggregator.aggregate()
        print(summary)  # "scanned 12, excluded 1, cached 9, extracted 2, ..."
    """

    def __init__(
        self,
        store: DocumentStore,
        settings: AggregatorSettings,
        *,
        cache: Optional[ScanCache] = None,
        extractor: Extractor = extract_items,
        notifier: Optional[Notifier] = None,
    ) -> None:
        self._store = store
        self._settings = settings
        self._cache = cache if cache is not None else ScanCache()
        self._extract = extractor
        self._notifier = notifier
        self._filter = ExclusionFilter.from_settings(settings)
        self._writer = DashboardWriter(store, settings.target_path)
        self._run_lock = threading.Lock()

    @property
    def cache(self) -> ScanCache:
        return self._cache

    @property
    def settings(self) -> AggregatorSettings:
        return self._settings

    def aggregate(self) -> AggregateSummary:
        """
        Run one aggregation.

        If another run is in flight on this aggregator, returns immediately
        with `skipped_busy=True` and does no I/O.

        Raises:
            OutputWriteError: If the dashboard cannot be read or written.
        """
        if not self._run_lock.acquire(blocking=False):
            logger.warning(f"{AGGREGATE} Aggregation already in progress, skipping")
            summary = AggregateSummary(skipped_busy=True, finished_at=_utcnow())
            self._report(summary)
            return summary

        try:
            summary = self._run()
        finally:
            self._run_lock.release()

        self._report(summary)
        return summary

    def _run(self) -> AggregateSummary:
        summary = AggregateSummary()
        all_items: List[ChecklistItem] = []
        current_paths: Set[str] = set()

        documents = self._store.list_documents()
        logger.info(f"{AGGREGATE} Scanning {len(documents)} documents...")

        for document in documents:
            if self._filter.is_excluded(document.path):
                summary.excluded += 1
                continue

            current_paths.add(document.path)
            summary.scanned += 1

            items = self._collect(document, summary)
            all_items.extend(items)

        summary.pruned = self._cache.prune(current_paths)
        summary.items = len(all_items)

        summary.write = self._writer.write(all_items)
        summary.finished_at = _utcnow()

        logger.info(f"{AGGREGATE} Aggregation complete: {summary}")
        return summary

    def _collect(self, document: Document, summary: AggregateSummary) -> Sequence[ChecklistItem]:
        cached = self._cache.lookup(document.path, document.mtime)
        if cached is not None:
            summary.cache_hits += 1
            logger.debug(f"{CACHE} Using cached items for {document.path}")
            return cached

        try:
            content = self._store.read(document.path)
        except DocumentReadError as exc:
            summary.read_errors += 1
            summary.error_details.append(f"Read error: {document.path}: {exc}")
            logger.warning(f"{AGGREGATE} Failed to read {document.path}: {exc}")
            return ()

        items = self._extract(content, document.path)
        self._cache.store(document.path, document.mtime, items)
        summary.extracted += 1
        logger.debug(f"{EXTRACT} Extracted {len(items)} items from {document.path}")
        return items

    def _report(self, summary: AggregateSummary) -> None:
        if self._notifier is None:
            return
        message = format_report(summary, self._settings.target_path)
        try:
            self._notifier.notify(message)
        except Exception as exc:
            logger.warning(f"{AGGREGATE} Notifier failed: {exc}")


def run_aggregation(
    store: DocumentStore,
    settings: AggregatorSettings,
    *,
    cache: Optional[ScanCache] = None,
    notifier: Optional[Notifier] = None,
) -> AggregateSummary:
    """
    Convenience function for a single aggregation run.

    Pass a long-lived `cache` to reuse scan results between calls.
    """
    aggregator = TodoAggregator(store, settings, cache=cache, notifier=notifier)
    return aggregator.aggregate()


__all__ = [
    "AggregateSummary",
    "TodoAggregator",
    "run_aggregation",
]
