# todo_aggregator/cli/commands/config.py
"""
Settings commands: show and update a vault's settings.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from todo_aggregator.cli.ui import ui
from todo_aggregator.config import load_settings, save_settings
from todo_aggregator.core.exceptions import ConfigError
from todo_aggregator.core.paths import AggregatorPaths


def _settings_path(vault: Path, config_path: Optional[Path]) -> Path:
    return config_path or AggregatorPaths.config(vault)


def show(vault: Path, config_path: Optional[Path] = None) -> None:
    """Print the resolved settings for a vault."""
    path = _settings_path(vault, config_path)
    try:
        settings = load_settings(path)
    except ConfigError as e:
        ui.error(str(e))
        raise typer.Exit(1)

    source = str(path) if path.exists() else f"{path} (defaults)"
    ui.key_values(
        "Settings",
        [
            ("config", source),
            ("target_path", settings.target_path),
            ("excluded_prefixes", ", ".join(settings.excluded_prefixes) or "(none)"),
        ],
    )


def set_values(
    vault: Path,
    config_path: Optional[Path] = None,
    target: Optional[str] = None,
    exclude: Optional[str] = None,
) -> None:
    """Update and persist settings. Unspecified values are kept."""
    if target is None and exclude is None:
        ui.warning("Nothing to update", detail="pass --target and/or --exclude")
        raise typer.Exit(1)

    path = _settings_path(vault, config_path)
    try:
        settings = load_settings(path).with_updates(
            target_path=target,
            excluded_prefixes=exclude,
        )
        save_settings(settings, path)
    except (ConfigError, ValidationError) as e:
        ui.error(str(e))
        raise typer.Exit(1)

    ui.success(f"Saved settings to {path}")
