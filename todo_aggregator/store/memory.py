# todo_aggregator/store/memory.py
from __future__ import annotations

from collections import Counter
from typing import Dict, List, Optional, Set, Tuple

from todo_aggregator.core.exceptions import (
    DocumentExistsError,
    DocumentNotFoundError,
    DocumentReadError,
)
from todo_aggregator.store.base import Document


class MemoryDocumentStore:
    """
    In-memory document store.

    Keeps insertion order for listing. Every write bumps the document's
    mtime unless one is given explicitly. Call counters make it easy to
    check which documents were actually read.
    """

    def __init__(self) -> None:
        self._docs: Dict[str, Tuple[str, int]] = {}
        self._clock = 0
        self.failing: Set[str] = set()
        self.reads: Counter = Counter()
        self.creates: List[str] = []
        self.modifies: List[str] = []

    def _tick(self) -> int:
        self._clock += 1
        return self._clock

    def put(self, path: str, text: str, mtime: Optional[int] = None) -> Document:
        """Insert or replace a document directly (not counted as a write)."""
        stamp = self._tick() if mtime is None else mtime
        self._docs[path] = (text, stamp)
        return Document(path=path, mtime=stamp)

    def delete(self, path: str) -> None:
        self._docs.pop(path, None)

    def fail_on(self, path: str) -> None:
        """Make subsequent reads of `path` raise DocumentReadError."""
        self.failing.add(path)

    def content(self, path: str) -> str:
        return self._docs[path][0]

    def list_documents(self) -> List[Document]:
        return [Document(path=p, mtime=m) for p, (_, m) in self._docs.items()]

    def read(self, path: str) -> str:
        self.reads[path] += 1
        if path in self.failing:
            raise DocumentReadError(f"Read failed for {path}")
        if path not in self._docs:
            raise DocumentNotFoundError(f"Document not found: {path}")
        return self._docs[path][0]

    def exists(self, path: str) -> Optional[Document]:
        if path not in self._docs:
            return None
        return Document(path=path, mtime=self._docs[path][1])

    def create(self, path: str, text: str) -> None:
        if path in self._docs:
            raise DocumentExistsError(f"Document already exists: {path}")
        self._docs[path] = (text, self._tick())
        self.creates.append(path)

    def modify(self, path: str, text: str) -> None:
        if path not in self._docs:
            raise DocumentNotFoundError(f"Document not found: {path}")
        self._docs[path] = (text, self._tick())
        self.modifies.append(path)
