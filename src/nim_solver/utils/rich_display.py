"""
Rich-based console output for the Nim game.

Provides clean, formatted output with:
- Board table with one row per pile
- Colored info/success/warning/error lines
"""

import logging
from typing import Optional, Sequence

from rich.console import Console
from rich.table import Table

console = Console()


class GameDisplay:
    """
    Rich-based display for an interactive game.

    Shows:
    - Game header
    - Current piles
    - Move announcements and the final result
    """

    def __init__(self, output: Optional[Console] = None):
        """
        Initialize game display.

        Args:
            output: Console to print to (default: module console on stdout)
        """
        self.console = output if output is not None else console

    def log_info(self, message: str):
        """Log info message."""
        self.console.print(f"[blue]ℹ[/blue] {message}")

    def log_warning(self, message: str):
        """Log warning message."""
        self.console.print(f"[yellow]⚠[/yellow]  {message}")

    def log_error(self, message: str):
        """Log error message."""
        self.console.print(f"[red]✗[/red] {message}")

    def show_header(self, title: str):
        """Show game header."""
        self.console.rule(f"[bold blue]{title}[/bold blue]")
        self.console.print()

    def board_table(self, piles: Sequence[int]) -> Table:
        """Create board table, piles numbered from 1."""
        table = Table(title="Current piles", show_header=True, box=None, padding=(0, 1))
        table.add_column("Pile", style="cyan", justify="right")
        table.add_column("Left", style="white", justify="right")
        table.add_column("", style="yellow")

        for i, size in enumerate(piles):
            table.add_row(str(i + 1), str(size), "●" * size)

        return table

    def show_board(self, piles: Sequence[int]):
        """Print the current piles."""
        self.console.print()
        self.console.print(self.board_table(piles))

    def show_ai_move(self, pile_index: int, amount: int):
        """Announce the AI's move (1-based pile number)."""
        self.console.print(
            f"[magenta]AI removes {amount} from pile {pile_index + 1}[/magenta]"
        )

    def show_winner(self, winner_name: str):
        """Announce the end of the game."""
        self.console.print()
        self.console.rule(f"[bold green]Game over. Winner is {winner_name}![/bold green]")


def setup_rich_logging(level: str = "INFO"):
    """Configure logging to work nicely with rich console."""
    from rich.logging import RichHandler

    # Remove existing handlers
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Add rich handler
    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s"))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        handlers=[rich_handler],
        format="%(message)s",
    )
