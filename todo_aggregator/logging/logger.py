# todo_aggregator/logging/logger.py
"""
Logging for todo-aggregator.

The aggregation, cache, store and writer modules log through
get_logger(__name__) and prefix each message with a subsystem tag from
todo_aggregator.logging.tags, e.g. "[CACHE] Pruned 2 stale entries".

The `todo-aggregator` callback configures the root handler at WARNING, or
DEBUG with --verbose. Embedding code that calls aggregate_vault() keeps its
own logging setup.
"""

from __future__ import annotations

import logging
import sys

DEFAULT_FORMAT = "[%(levelname)s] %(name)s — %(message)s"


def configure_logging(
    level: int = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
    stream=sys.stderr,
) -> None:
    """
    Configure the root logging handler.

    Safe to call multiple times: a handler is only added once.
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)

    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Return a module logger. Configuration happens in configure_logging()."""
    return logging.getLogger(name)
