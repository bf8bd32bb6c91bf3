# todo_aggregator/cli/cli.py
"""
todo-aggregator CLI.

Commands:
    todo-aggregator run [VAULT]          Aggregate todos once (or --watch)
    todo-aggregator aggregate [VAULT]    Same as run
    todo-aggregator config show [VAULT]  Show settings
    todo-aggregator config set [VAULT]   Update settings
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from todo_aggregator.cli.commands import aggregate as aggregate_cmd
from todo_aggregator.cli.commands import config as config_cmd
from todo_aggregator.logging.logger import configure_logging

app = typer.Typer(
    help="Collect unchecked todos from your notes into one dashboard.",
    no_args_is_help=True,
)
config_app = typer.Typer(help="Show or change vault settings.", no_args_is_help=True)
app.add_typer(config_app, name="config")

VAULT_ARG = typer.Argument(Path("."), help="Vault root directory.")
CONFIG_OPT = typer.Option(
    None,
    "--config",
    "-c",
    help="Settings file (default: VAULT/.todo-aggregator/config.yaml).",
)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    configure_logging(level=logging.DEBUG if verbose else logging.WARNING)


def _aggregate(
    vault: Path,
    config_path: Optional[Path],
    watch: bool,
    interval: float,
    max_runs: int,
) -> None:
    aggregate_cmd.command(
        vault=vault,
        config_path=config_path,
        watch=watch,
        interval=interval,
        max_runs=max_runs,
    )


@app.command("run")
def run(
    vault: Path = VAULT_ARG,
    config_path: Optional[Path] = CONFIG_OPT,
    watch: bool = typer.Option(False, "--watch", "-w", help="Re-run on an interval."),
    interval: float = typer.Option(30.0, "--interval", "-i", min=0.0, help="Seconds between runs."),
    max_runs: int = typer.Option(0, "--max-runs", min=0, help="Stop after N runs in watch mode."),
) -> None:
    """Aggregate todos into the dashboard document."""
    _aggregate(vault, config_path, watch, interval, max_runs)


@app.command("aggregate")
def aggregate(
    vault: Path = VAULT_ARG,
    config_path: Optional[Path] = CONFIG_OPT,
    watch: bool = typer.Option(False, "--watch", "-w", help="Re-run on an interval."),
    interval: float = typer.Option(30.0, "--interval", "-i", min=0.0, help="Seconds between runs."),
    max_runs: int = typer.Option(0, "--max-runs", min=0, help="Stop after N runs in watch mode."),
) -> None:
    """Aggregate todos into the dashboard document (alias of run)."""
    _aggregate(vault, config_path, watch, interval, max_runs)


@config_app.command("show")
def config_show(
    vault: Path = VAULT_ARG,
    config_path: Optional[Path] = CONFIG_OPT,
) -> None:
    """Show resolved settings."""
    config_cmd.show(vault, config_path)


@config_app.command("set")
def config_set(
    vault: Path = VAULT_ARG,
    config_path: Optional[Path] = CONFIG_OPT,
    target: Optional[str] = typer.Option(None, "--target", "-t", help="Dashboard document path."),
    exclude: Optional[str] = typer.Option(
        None,
        "--exclude",
        "-e",
        help='Comma-separated folders to exclude (e.g. "templates,archive").',
    ),
) -> None:
    """Update settings."""
    config_cmd.set_values(vault, config_path, target=target, exclude=exclude)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
