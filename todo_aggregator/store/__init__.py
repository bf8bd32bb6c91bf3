# todo_aggregator/store/__init__.py
"""
Document stores.

The aggregator only talks to the DocumentStore protocol; concrete stores
decide where documents live.
"""

from .base import Document, DocumentStore
from .local_fs import DEFAULT_EXTENSIONS, LocalFSDocumentStore
from .memory import MemoryDocumentStore

__all__ = [
    "Document",
    "DocumentStore",
    "DEFAULT_EXTENSIONS",
    "LocalFSDocumentStore",
    "MemoryDocumentStore",
]
