# markledger/cli/ui.py
"""
Shared UI helpers for CLI commands.

Usage:
    from markledger.cli.ui import ui, console

    ui.header("markledger scan")
    ui.success("Done!")
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table

console = Console()


class UI:
    """Rich-backed output helpers with consistent styling across commands."""

    # -------------------------------------------------------------------------
    # Output Methods
    # -------------------------------------------------------------------------

    def header(self, title: str, subtitle: str = "") -> None:
        """
        Print a command header.

        Args:
            title: Main header title
            subtitle: Optional subtitle (dim text below title)
        """
        if subtitle:
            content = f"[bold]{title}[/bold]\n[dim]{subtitle}[/dim]"
        else:
            content = f"[bold]{title}[/bold]"
        console.print(Panel.fit(content, border_style="blue"))

    def success(self, msg: str) -> None:
        """Print a success message."""
        console.print(f"[green]✓[/green] {msg}")

    def error(self, msg: str) -> None:
        """Print an error message."""
        console.print(f"[red]✗[/red] {msg}")

    def warning(self, msg: str, detail: str = "") -> None:
        """Print a warning message."""
        detail_str = f" [dim]({detail})[/dim]" if detail else ""
        console.print(f"[yellow]⚠[/yellow] {msg}{detail_str}")

    def info(self, msg: str) -> None:
        """Print an info/dim message."""
        console.print(f"[dim]{msg}[/dim]")

    def summary_panel(self, content: str, title: str = "", style: str = "green") -> None:
        """Print a summary panel (typically at end of command)."""
        console.print(Panel(content, title=title, border_style=style))

    def table(self, title: str, columns: list[str], rows: list[list[str]]) -> None:
        """Print a simple table."""
        table = Table(title=title, show_lines=False)
        for column in columns:
            table.add_column(column)
        for row in rows:
            table.add_row(*row)
        console.print(table)

    def progress(self) -> Progress:
        """Progress bar used for workspace scans."""
        return Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            TimeElapsedColumn(),
            console=console,
            transient=True,
        )


ui = UI()


__all__ = ["ui", "UI", "console"]
