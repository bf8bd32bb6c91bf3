# todo_aggregator/config/__init__.py
from .loader import load_settings, save_settings
from .schema import DEFAULT_TARGET_PATH, AggregatorSettings

__all__ = [
    "DEFAULT_TARGET_PATH",
    "AggregatorSettings",
    "load_settings",
    "save_settings",
]
