# todo_aggregator/core/exceptions.py
"""
Exception hierarchy for todo-aggregator.

All errors raised by the package inherit from TodoAggregatorError, so a
caller can catch everything with a single handler.

Ordinary outcomes (cache miss, excluded path, unchanged output, a run
already in progress) are plain return values, never exceptions.
"""

from __future__ import annotations


class TodoAggregatorError(Exception):
    """Base class for all todo-aggregator errors."""

    pass


class DocumentStoreError(TodoAggregatorError):
    """A document store operation failed."""

    pass


class DocumentReadError(DocumentStoreError):
    """
    A single document could not be read.

    Non-fatal during aggregation: the document contributes no items to the
    run and gets no cache entry, so it is retried on the next run.
    """

    pass


class DocumentNotFoundError(DocumentReadError):
    """The requested document does not exist."""

    pass


class DocumentExistsError(DocumentStoreError):
    """create() was called for a path that already exists."""

    pass


class DocumentWriteError(DocumentStoreError):
    """A document could not be created or modified."""

    pass


class OutputWriteError(TodoAggregatorError):
    """
    The output document could not be read, created or modified.

    Fatal to the run and propagated to the caller; never retried.
    """

    pass


class ConfigError(TodoAggregatorError):
    """The settings file is unreadable or malformed."""

    pass
