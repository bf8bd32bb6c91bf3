# todo_aggregator/store/base.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Protocol, runtime_checkable


@dataclass(frozen=True)
class Document:
    """
    A document as listed by a store.

    `mtime` is opaque: it only has to stay the same while the content is
    unchanged, and is compared for equality, never ordered.
    """

    path: str
    mtime: int


@runtime_checkable
class DocumentStore(Protocol):
    """Protocol for the collection of documents being aggregated."""

    def list_documents(self) -> List[Document]:
        """Enumerate all documents in a stable order."""
        ...

    def read(self, path: str) -> str:
        """Return document text. Raises DocumentReadError."""
        ...

    def create(self, path: str, text: str) -> None:
        """Create a new document. Raises DocumentExistsError / DocumentWriteError."""
        ...

    def modify(self, path: str, text: str) -> None:
        """Replace a document's text. Raises DocumentNotFoundError / DocumentWriteError."""
        ...

    def exists(self, path: str) -> Optional[Document]:
        """Return the document if present, else None."""
        ...
