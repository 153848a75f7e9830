"""Console output helpers for psetup.

Progress and results go to ``console`` (stdout); warnings and errors go to
``err_console`` (stderr) so they survive ``psetup ... > log``.  Both are Rich
consoles, which resolve the underlying stream on every write.
"""

from __future__ import annotations

from collections.abc import Mapping

from rich.console import Console
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


def print_options_table(rows: Mapping[str, str], title: str = "Options") -> None:
    """Print one row per option: its name and a rendered value."""
    table = Table(title=title, header_style="bold cyan")
    table.add_column("Option", style="bold", no_wrap=True)
    table.add_column("Value")
    for option, value in rows.items():
        table.add_row(option, value)
    console.print(table)


def print_success(message: str) -> None:
    console.print(f"[bold green]{message}[/bold green]")


def print_warning(message: str) -> None:
    err_console.print(f"[yellow]warning:[/yellow] {message}")


def print_error(message: str) -> None:
    err_console.print(f"[bold red]error:[/bold red] {message}")
