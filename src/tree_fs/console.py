"""Console output for the tree-fs CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from tree_fs.models import TreeConfig


class TreeConsole:
    """Rich-based output helpers (non-interactive)."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize console.

        Args:
            console: Rich console to print to. A new one is created if omitted.
        """
        self.console = console or Console()

    def show_entries(self, config: TreeConfig) -> None:
        """Display the entries of a configuration as a table.

        Args:
            config: Configuration to display.
        """
        if not config.entries:
            self.console.print("[yellow]No entries declared[/yellow]")
            return

        table = Table(title=f"Entries under {config.root}")
        table.add_column("#", justify="right")
        table.add_column("Path", style="cyan")
        table.add_column("Type")
        table.add_column("Read-only")

        for index, entry in enumerate(config.entries):
            table.add_row(
                str(index),
                entry.path or "[red]<empty>[/red]",
                entry.type,
                "yes" if entry.readonly else "",
            )

        self.console.print(table)

    def show_success(self, message: str) -> None:
        """Show success message.

        Args:
            message: Success message.
        """
        self.console.print(f"[green]✓[/green] {message}")

    def show_error(self, message: str) -> None:
        """Show error message.

        Args:
            message: Error message.
        """
        self.console.print(f"[red]✗[/red] {message}")

    def show_warning(self, message: str) -> None:
        """Show warning message.

        Args:
            message: Warning message.
        """
        self.console.print(f"[yellow]![/yellow] {message}")

    def show_info(self, message: str) -> None:
        """Show info message.

        Args:
            message: Info message.
        """
        self.console.print(f"[blue]i[/blue] {message}")
