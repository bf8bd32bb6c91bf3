# todo_aggregator/aggregate/__init__.py
"""
Incremental todo aggregation.

Key components:
- Extractor: finds unchecked checklist items in a document
- ExclusionFilter: decides which documents are never scanned
- ScanCache: per-document mtime cache that skips unchanged documents
- DashboardWriter: renders the dashboard and writes only real changes
- TodoAggregator: orchestrates one aggregation run

Usage:
    from todo_aggregator.aggregate import TodoAggregator
    from todo_aggregator.store import LocalFSDocumentStore

    aggregator = TodoAggregator(LocalFSDocumentStore("./notes"), settings)
    summary = aggregator.aggregate()
"""

from .cache import CacheEntry, ScanCache
from .exclusion import ExclusionFilter, normalize_prefixes
from .executor import AggregateSummary, TodoAggregator, run_aggregation
from .extractor import ChecklistItem, extract_items, is_item_line, match_item_text
from .writer import DashboardWriter, WriteResult, render_dashboard

__all__ = [
    # Extractor
    "ChecklistItem",
    "extract_items",
    "match_item_text",
    "is_item_line",
    # Exclusion
    "ExclusionFilter",
    "normalize_prefixes",
    # Cache
    "CacheEntry",
    "ScanCache",
    # Writer
    "WriteResult",
    "DashboardWriter",
    "render_dashboard",
    # Executor
    "AggregateSummary",
    "TodoAggregator",
    "run_aggregation",
]
