# todo_aggregator/core/__init__.py
from .exceptions import (
    ConfigError,
    DocumentExistsError,
    DocumentNotFoundError,
    DocumentReadError,
    DocumentStoreError,
    DocumentWriteError,
    OutputWriteError,
    TodoAggregatorError,
)
from .paths import AggregatorPaths, normalize_document_path

__all__ = [
    "AggregatorPaths",
    "normalize_document_path",
    "TodoAggregatorError",
    "DocumentStoreError",
    "DocumentReadError",
    "DocumentNotFoundError",
    "DocumentExistsError",
    "DocumentWriteError",
    "OutputWriteError",
    "ConfigError",
]
