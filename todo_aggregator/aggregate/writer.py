# todo_aggregator/aggregate/writer.py
"""
Dashboard rendering and the merge/diff write.

The dashboard body is regenerated wholesale on every run and compared with
the existing body:
- item lines are compared by exact text to count added/removed items
- the document is only written when the normalized bodies differ

Output format:

    ## 📄 [[Projects/alpha.md]]
    - [ ] First item
    - [ ] Second item

    ## 📄 [[Inbox.md]]
    - [ ] Another item
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List

from todo_aggregator.aggregate.extractor import ChecklistItem, is_item_line
from todo_aggregator.core.exceptions import DocumentStoreError, OutputWriteError
from todo_aggregator.logging.logger import get_logger
from todo_aggregator.logging.tags import WRITER
from todo_aggregator.store.base import DocumentStore

logger = get_logger(__name__)

GROUP_MARKER = "📄"


@dataclass
class WriteResult:
    """Outcome of one dashboard write."""

    content_changed: bool
    added: int = 0
    removed: int = 0


def normalize_body(text: str) -> str:
    """Strip surrounding whitespace and end with exactly one newline."""
    return text.strip() + "\n"


def group_by_source(items: Iterable[ChecklistItem]) -> Dict[str, List[str]]:
    """
    Group rendered item lines by source path.

    Groups keep first-seen order; items keep input order within a group.
    """
    groups: Dict[str, List[str]] = {}
    for item in items:
        groups.setdefault(item.source_path, []).append(item.rendered)
    return groups


def render_dashboard(items: Iterable[ChecklistItem]) -> str:
    """Render the full dashboard body for `items`."""
    parts: List[str] = []
    for path, lines in group_by_source(items).items():
        parts.append(f"## {GROUP_MARKER} [[{path}]]\n" + "\n".join(lines) + "\n\n")
    return normalize_body("".join(parts))


def item_lines(body: str) -> List[str]:
    return [line for line in body.split("\n") if is_item_line(line)]


class DashboardWriter:
    """
    Writes the dashboard document through a DocumentStore.

    Performs at most one create-or-modify per call.
    """

    def __init__(self, store: DocumentStore, target_path: str) -> None:
        self._store = store
        self._target = target_path

    def write(self, items: Iterable[ChecklistItem]) -> WriteResult:
        """
        Render `items` and reconcile them with the current dashboard.

        Raises:
            OutputWriteError: If the dashboard cannot be read or written.
        """
        new_body = render_dashboard(items)

        try:
            existing = self._store.exists(self._target)
        except DocumentStoreError as exc:
            raise OutputWriteError(f"Cannot stat output {self._target}: {exc}") from exc

        if existing is None:
            return self._create(new_body)

        try:
            old_body = normalize_body(self._store.read(self._target))
        except DocumentStoreError as exc:
            raise OutputWriteError(f"Cannot read output {self._target}: {exc}") from exc

        old_lines = item_lines(old_body)
        new_lines = item_lines(new_body)
        old_set = set(old_lines)
        new_set = set(new_lines)

        result = WriteResult(
            content_changed=False,
            added=sum(1 for line in new_lines if line not in old_set),
            removed=sum(1 for line in old_lines if line not in new_set),
        )

        if old_body == new_body:
            logger.info(f"{WRITER} {self._target} is up to date")
            return result

        try:
            self._store.modify(self._target, new_body)
        except DocumentStoreError as exc:
            raise OutputWriteError(f"Cannot modify output {self._target}: {exc}") from exc

        result.content_changed = True
        logger.info(
            f"{WRITER} Updated {self._target} (added={result.added}, removed={result.removed})"
        )
        return result

    def _create(self, body: str) -> WriteResult:
        try:
            self._store.create(self._target, body)
        except DocumentStoreError as exc:
            raise OutputWriteError(f"Cannot create output {self._target}: {exc}") from exc

        added = len(item_lines(body))
        logger.info(f"{WRITER} Created {self._target} with {added} items")
        return WriteResult(content_changed=True, added=added, removed=0)


__all__ = [
    "GROUP_MARKER",
    "WriteResult",
    "DashboardWriter",
    "normalize_body",
    "group_by_source",
    "render_dashboard",
    "item_lines",
]
