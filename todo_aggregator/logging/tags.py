# todo_aggregator/logging/tags.py
"""
Logging subsystem tags.

Prefixed onto log messages so output stays searchable per subsystem.
"""

AGGREGATE = "[AGGREGATE]"
CACHE = "[CACHE]"
EXTRACT = "[EXTRACT]"
WRITER = "[WRITER]"
STORE = "[STORE]"
CONFIG = "[CONFIG]"
CLI = "[CLI]"
