# todo_aggregator/config/loader.py
"""
Settings persistence.

Responsibilities:
- Load stored settings (YAML) and merge them over the defaults
- Save settings back to YAML
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from todo_aggregator.config.schema import AggregatorSettings
from todo_aggregator.core.exceptions import ConfigError
from todo_aggregator.logging.logger import get_logger
from todo_aggregator.logging.tags import CONFIG

logger = get_logger(__name__)


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read settings file {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Settings root must be a mapping, got: {type(data).__name__}")

    return data


def load_settings(path: str | Path) -> AggregatorSettings:
    """
    Load settings from `path`, merging stored values over the defaults.

    A missing file yields the defaults.

    Raises:
        ConfigError: If the file exists but is not a valid settings mapping.
    """
    path = Path(path)
    if not path.exists():
        logger.debug(f"{CONFIG} No settings at {path}, using defaults")
        return AggregatorSettings()

    logger.debug(f"{CONFIG} Loading settings from {path}")
    merged = {**AggregatorSettings().model_dump(), **_load_yaml(path)}

    try:
        return AggregatorSettings.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid settings in {path}: {exc}") from exc


def save_settings(settings: AggregatorSettings, path: str | Path) -> Path:
    """Persist settings as YAML and return the written path."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(settings.model_dump(), f, sort_keys=False, allow_unicode=True)
    except OSError as exc:
        raise ConfigError(f"Cannot write settings file {path}: {exc}") from exc

    logger.info(f"{CONFIG} Saved settings to {path}")
    return path
