# todo_aggregator/aggregate/cache.py
"""
Per-document scan cache.

Maps document path -> (modification time, extracted items). An entry is
reused only while the stored mtime equals the document's current mtime, so
caching never changes results, it only skips reads.

Lifecycle within one aggregation run:
1. lookup() / store() once per visited document
2. prune() once, after every document has been visited
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Dict, Iterable, List, Optional, Tuple

from todo_aggregator.aggregate.extractor import ChecklistItem
from todo_aggregator.logging.logger import get_logger
from todo_aggregator.logging.tags import CACHE

logger = get_logger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    mtime: int
    items: Tuple[ChecklistItem, ...]


class ScanCache:
    """
    In-memory scan cache owned by one aggregator.

    Usage:
        cache = ScanCache()
        items = cache.lookup(doc.path, doc.mtime)
        if items is None:
            items = extract_items(store.read(doc.path), doc.path)
            cache.store(doc.path, doc.mtime, items)
        ...
        cache.prune(current_paths)
    """

    def __init__(self) -> None:
        self._entries: Dict[str, CacheEntry] = {}

    def lookup(self, path: str, current_mtime: int) -> Optional[Tuple[ChecklistItem, ...]]:
        """Return cached items if the entry is still valid, else None (miss)."""
        entry = self._entries.get(path)
        if entry is None or entry.mtime != current_mtime:
            return None
        return entry.items

    def store(self, path: str, mtime: int, items: Iterable[ChecklistItem]) -> None:
        """Insert or overwrite the entry for `path`."""
        self._entries[path] = CacheEntry(mtime=mtime, items=tuple(items))

    def prune(self, current_paths: AbstractSet[str]) -> int:
        """
        Drop entries whose path is not in `current_paths`.

        Must run after all documents of a run were visited.

        Returns:
            Number of evicted entries.
        """
        stale = [path for path in self._entries if path not in current_paths]
        for path in stale:
            del self._entries[path]

        if stale:
            logger.debug(f"{CACHE} Pruned {len(stale)} stale entries")
        return len(stale)

    def paths(self) -> List[str]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, path: object) -> bool:
        return path in self._entries


__all__ = ["CacheEntry", "ScanCache"]
