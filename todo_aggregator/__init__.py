# todo_aggregator/__init__.py
"""
todo-aggregator: collect unchecked checklist items from a tree of notes
into one dashboard document, re-reading only documents that changed.

Usage:
    from todo_aggregator import aggregate_vault

    summary = aggregate_vault("./notes")
    print(summary)
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from todo_aggregator.aggregate import (
    AggregateSummary,
    ChecklistItem,
    ScanCache,
    TodoAggregator,
    WriteResult,
    extract_items,
    run_aggregation,
)
from todo_aggregator.config import AggregatorSettings, load_settings, save_settings
from todo_aggregator.core.paths import AggregatorPaths
from todo_aggregator.notify import LoggingNotifier, Notifier
from todo_aggregator.store import LocalFSDocumentStore, MemoryDocumentStore

__version__ = "0.1.0"


def aggregate_vault(
    vault: str | Path,
    *,
    settings: Optional[AggregatorSettings] = None,
    notifier: Optional[Notifier] = None,
) -> AggregateSummary:
    """
    Run one aggregation over a vault directory.

    Settings default to the vault's stored settings
    ({vault}/.todo-aggregator/config.yaml).
    """
    if settings is None:
        settings = load_settings(AggregatorPaths.config(vault))
    return run_aggregation(LocalFSDocumentStore(vault), settings, notifier=notifier)


__all__ = [
    "__version__",
    "aggregate_vault",
    "AggregateSummary",
    "AggregatorSettings",
    "ChecklistItem",
    "LocalFSDocumentStore",
    "LoggingNotifier",
    "MemoryDocumentStore",
    "Notifier",
    "ScanCache",
    "TodoAggregator",
    "WriteResult",
    "extract_items",
    "load_settings",
    "run_aggregation",
    "save_settings",
]
