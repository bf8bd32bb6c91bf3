# todo_aggregator/cli/commands/aggregate.py
"""
Aggregate command.

Both `todo-aggregator run` and `todo-aggregator aggregate` route here.
With --watch the process stays alive and re-runs on an interval, so the
scan cache is reused and unchanged documents are not re-read.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Optional

import typer

from todo_aggregator.aggregate import AggregateSummary, TodoAggregator
from todo_aggregator.cli.ui import ui
from todo_aggregator.config import AggregatorSettings, load_settings
from todo_aggregator.core.exceptions import ConfigError, OutputWriteError
from todo_aggregator.core.paths import AggregatorPaths
from todo_aggregator.logging.logger import get_logger
from todo_aggregator.logging.tags import CLI
from todo_aggregator.notify import CallbackNotifier
from todo_aggregator.store import LocalFSDocumentStore

logger = get_logger(__name__)


def _load_settings_or_exit(vault: Path, config_path: Optional[Path]) -> AggregatorSettings:
    path = config_path or AggregatorPaths.config(vault)
    try:
        return load_settings(path)
    except ConfigError as e:
        ui.error(str(e))
        raise typer.Exit(1)


def _show_report(message: str) -> None:
    style = "green" if message.startswith("🎉") else "blue"
    ui.summary_panel(message, title="Todo Aggregator", style=style)


def build_aggregator(vault: Path, settings: AggregatorSettings) -> TodoAggregator:
    """Aggregator over a vault directory that reports to the console."""
    return TodoAggregator(
        LocalFSDocumentStore(vault),
        settings,
        notifier=CallbackNotifier(_show_report),
    )


def _run_once(aggregator: TodoAggregator) -> AggregateSummary:
    try:
        summary = aggregator.aggregate()
    except OutputWriteError as e:
        logger.error(f"{CLI} Aggregation failed: {e}")
        ui.error(f"Could not write {aggregator.settings.target_path}: {e}")
        raise typer.Exit(1)

    for detail in summary.error_details:
        ui.warning(detail)
    ui.info(str(summary))
    return summary


def command(
    vault: Path,
    config_path: Optional[Path] = None,
    watch: bool = False,
    interval: float = 30.0,
    max_runs: int = 0,
) -> None:
    """
    Aggregate unchecked todos from a vault into its dashboard document.

    Args:
        vault: Vault root directory.
        config_path: Settings file (defaults to {vault}/.todo-aggregator/config.yaml).
        watch: Keep running and re-aggregate every `interval` seconds.
        interval: Seconds between runs in watch mode.
        max_runs: Stop watch mode after this many runs (0 = until interrupted).
    """
    if not vault.is_dir():
        ui.error(f"Vault directory not found: {vault}")
        raise typer.Exit(1)

    settings = _load_settings_or_exit(vault, config_path)
    aggregator = build_aggregator(vault, settings)
    logger.info(f"{CLI} Aggregating {vault} into '{settings.target_path}'")

    if not watch:
        _run_once(aggregator)
        return

    ui.info(f"Watching {vault} every {interval:g}s (Ctrl+C to stop)")
    runs = 0
    try:
        while True:
            _run_once(aggregator)
            runs += 1
            if max_runs and runs >= max_runs:
                break
            time.sleep(interval)
    except KeyboardInterrupt:
        ui.info("Stopped watching")
