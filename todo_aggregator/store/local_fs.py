# todo_aggregator/store/local_fs.py
"""
Filesystem-backed document store.

Documents are the text files under a vault directory, addressed by their
vault-relative POSIX path ("Projects/alpha.md").
"""

from __future__ import annotations

import contextlib
import os
import tempfile
from pathlib import Path, PurePosixPath
from typing import Iterable, List, Optional, Tuple

from todo_aggregator.core.exceptions import (
    DocumentExistsError,
    DocumentNotFoundError,
    DocumentReadError,
    DocumentStoreError,
    DocumentWriteError,
)
from todo_aggregator.core.paths import normalize_document_path
from todo_aggregator.logging.logger import get_logger
from todo_aggregator.logging.tags import STORE
from todo_aggregator.store.base import Document

logger = get_logger(__name__)

DEFAULT_EXTENSIONS: Tuple[str, ...] = (".md",)


class LocalFSDocumentStore:
    """
    Document store over a directory tree.

    Hidden directories and files (".git", ".obsidian", ".todo-aggregator")
    are never listed. Listing order is sorted and therefore stable.
    """

    def __init__(self, root: str | Path, extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> None:
        self.root = Path(root).resolve()
        self.extensions = tuple(ext.lower() for ext in extensions)

    def _resolve(self, path: str) -> Path:
        # Paths are vault-relative and always "/"-separated
        try:
            relative = normalize_document_path(path)
        except ValueError as exc:
            raise DocumentStoreError(str(exc)) from exc
        return self.root.joinpath(*PurePosixPath(relative).parts)

    def _relative(self, full: Path) -> str:
        return full.relative_to(self.root).as_posix()

    def list_documents(self) -> List[Document]:
        documents: List[Document] = []

        for dirpath, dirnames, filenames in os.walk(self.root):
            dirnames[:] = sorted(d for d in dirnames if not d.startswith("."))

            for name in sorted(filenames):
                if name.startswith("."):
                    continue
                if self.extensions and not name.lower().endswith(self.extensions):
                    continue

                full = Path(dirpath) / name
                try:
                    st = full.stat()
                except OSError as exc:
                    logger.warning(f"{STORE} Cannot stat {full}: {exc}")
                    continue

                documents.append(Document(path=self._relative(full), mtime=st.st_mtime_ns))

        logger.debug(f"{STORE} Listed {len(documents)} documents under {self.root}")
        return documents

    def read(self, path: str) -> str:
        full = self._resolve(path)
        try:
            return full.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise DocumentNotFoundError(f"Document not found: {path}") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentReadError(f"Failed to read {path}: {exc}") from exc

    def exists(self, path: str) -> Optional[Document]:
        full = self._resolve(path)
        try:
            st = full.stat()
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise DocumentReadError(f"Cannot stat {path}: {exc}") from exc

        if not full.is_file():
            return None
        return Document(path=path, mtime=st.st_mtime_ns)

    def create(self, path: str, text: str) -> None:
        full = self._resolve(path)
        if full.exists():
            raise DocumentExistsError(f"Document already exists: {path}")
        self._write(full, path, text)
        logger.debug(f"{STORE} Created {path}")

    def modify(self, path: str, text: str) -> None:
        full = self._resolve(path)
        if not full.is_file():
            raise DocumentNotFoundError(f"Document not found: {path}")
        self._write(full, path, text)
        logger.debug(f"{STORE} Modified {path}")

    def _write(self, full: Path, path: str, text: str) -> None:
        """Write via a temp file in the same directory, then replace."""
        tmp_path: Optional[Path] = None
        try:
            full.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=full.parent,
                prefix=".tmp-",
                delete=False,
            ) as tmp:
                tmp_path = Path(tmp.name)
                tmp.write(text)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp_path, full)
        except (OSError, UnicodeError) as exc:
            if tmp_path is not None:
                with contextlib.suppress(OSError):
                    tmp_path.unlink(missing_ok=True)
            raise DocumentWriteError(f"Failed to write {path}: {exc}") from exc
