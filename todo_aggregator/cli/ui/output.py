# todo_aggregator/cli/ui/output.py
"""
Output methods for CLI display.
"""

from __future__ import annotations

from rich.markup import escape

from .console import CHECK, CROSS, WARN, Panel, Table, console


class OutputMixin:
    """Mixin providing output methods for the UI class."""

    def success(self, msg: str) -> None:
        console.print(f"[green]{CHECK}[/green] {escape(msg)}")

    def error(self, msg: str) -> None:
        console.print(f"[red]{CROSS}[/red] {escape(msg)}")

    def warning(self, msg: str, detail: str = "") -> None:
        detail_str = f" [dim]({escape(detail)})[/dim]" if detail else ""
        console.print(f"[yellow]{WARN}[/yellow] {escape(msg)}{detail_str}")

    def info(self, msg: str) -> None:
        console.print(f"[dim]{escape(msg)}[/dim]")

    def summary_panel(self, content: str, title: str = "", style: str = "green") -> None:
        """Print a summary panel, typically at the end of a command."""
        console.print(Panel(escape(content.rstrip("\n")), title=title or None, border_style=style))

    def key_values(self, title: str, rows: list[tuple[str, str]]) -> None:
        table = Table(title=title, show_header=False)
        table.add_column("Key", style="cyan")
        table.add_column("Value")
        for key, value in rows:
            table.add_row(escape(key), escape(value))
        console.print(table)
