# todo_aggregator/aggregate/extractor.py
"""
Checklist item extraction.

A line is an unchecked item when it reads, in order:

    [whitespace] "-" [whitespace] "[" [whitespace] "]" whitespace <text>

The scanner walks each line once with a fixed rule; there is no regex and
no backtracking. Checked boxes ("[x]") and empty items never match.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

ITEM_MARKER = "- [ ] "
ITEM_LINE_PREFIX = "- [ ]"


@dataclass(frozen=True)
class ChecklistItem:
    """
    One unchecked checklist item.

    `source_path` travels alongside the text for grouping and is never part
    of the rendered line.
    """

    text: str
    source_path: str

    @property
    def rendered(self) -> str:
        return f"{ITEM_MARKER}{self.text}"


def _skip_whitespace(line: str, i: int) -> int:
    n = len(line)
    while i < n and line[i].isspace():
        i += 1
    return i


def match_item_text(line: str) -> Optional[str]:
    """
    Return the trimmed item text if `line` is an unchecked item, else None.

    Empty items ("- [ ]" with nothing after it) return None.
    """
    n = len(line)

    i = _skip_whitespace(line, 0)
    if i >= n or line[i] != "-":
        return None

    i = _skip_whitespace(line, i + 1)
    if i >= n or line[i] != "[":
        return None

    i = _skip_whitespace(line, i + 1)
    if i >= n or line[i] != "]":
        return None

    rest = line[i + 1:]
    if rest and not rest[0].isspace():
        return None

    text = rest.strip()
    return text or None


def extract_items(content: str, source_path: str) -> List[ChecklistItem]:
    """Extract unchecked items from `content` in line order."""
    items: List[ChecklistItem] = []

    for line in content.split("\n"):
        text = match_item_text(line)
        if text is not None:
            items.append(ChecklistItem(text=text, source_path=source_path))

    return items


def is_item_line(line: str) -> bool:
    """Whether a line of rendered output is an item line."""
    return line.startswith(ITEM_LINE_PREFIX)


__all__ = [
    "ITEM_MARKER",
    "ITEM_LINE_PREFIX",
    "ChecklistItem",
    "match_item_text",
    "extract_items",
    "is_item_line",
]
