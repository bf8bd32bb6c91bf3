# todo_aggregator/aggregate/exclusion.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Tuple

from todo_aggregator.config.schema import AggregatorSettings


def normalize_prefixes(prefixes: Iterable[str]) -> Tuple[str, ...]:
    """Trim prefixes, drop empty ones, and make each end with '/'."""
    normalized = []
    for prefix in prefixes:
        prefix = prefix.strip()
        if not prefix:
            continue
        normalized.append(prefix if prefix.endswith("/") else prefix + "/")
    return tuple(normalized)


@dataclass(frozen=True)
class ExclusionFilter:
    """
    Decides which document paths are never scanned.

    The target document is always excluded so the dashboard never scans its
    own items. Prefixes match whole folders: "archive" excludes
    "archive/notes.md" but not "archived.md".
    """

    target_path: str
    excluded_prefixes: Tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "excluded_prefixes", normalize_prefixes(self.excluded_prefixes))

    @classmethod
    def from_settings(cls, settings: AggregatorSettings) -> "ExclusionFilter":
        return cls(
            target_path=settings.target_path,
            excluded_prefixes=tuple(settings.excluded_prefixes),
        )

    def is_excluded(self, path: str) -> bool:
        if path == self.target_path:
            return True
        return any(path.startswith(prefix) for prefix in self.excluded_prefixes)


__all__ = ["ExclusionFilter", "normalize_prefixes"]
