"""
Rich-based board display for the command line.

Provides:
- Board tables (opponent row on top, stores at the ends)
- Move outcome lines
- Consistent info/success/warning/error markers
"""

import logging
from typing import Iterable, Optional

from rich.console import Console
from rich.table import Table

from ..core import Board, ExtraTurn, Finished, GameOutcome, TurnEnded

console = Console()
logger = logging.getLogger(__name__)


class BoardDisplay:
    """
    Rich display for boards and moves.

    Shows:
    - Game header
    - Board table
    - Outcome of each move
    """

    def __init__(self, out: Optional[Console] = None):
        """
        Initialize board display.

        Args:
            out: Console to print to (defaults to the shared module console)
        """
        self.console = out or console

    def log(self, message: str, style: str = ""):
        """Log a message using rich console."""
        self.console.print(message, style=style)

    def log_info(self, message: str):
        """Log info message."""
        self.console.print(f"[blue]ℹ[/blue] {message}")

    def log_success(self, message: str):
        """Log success message."""
        self.console.print(f"[green]✓[/green] {message}")

    def log_warning(self, message: str):
        """Log warning message."""
        self.console.print(f"[yellow]⚠[/yellow]  {message}")

    def log_error(self, message: str):
        """Log error message."""
        self.console.print(f"[red]✗[/red] {message}")

    def show_header(self, title: str, game_id: Optional[int] = None):
        """Show a rule with the game title."""
        suffix = f" #{game_id}" if game_id is not None else ""
        self.console.rule(f"[bold blue]{title}{suffix}[/bold blue]")

    def board_table(self, board: Board) -> Table:
        """Create board table: P2 row reversed on top, P1 row below."""
        cfg = board.config
        table = Table(show_header=False, box=None, padding=(0, 1))
        for _ in range(cfg.pits_per_side + 2):
            table.add_column(justify="right")

        p2_row = [str(board.stones(p)) for p in reversed(cfg.row(2))]
        p1_row = [str(board.stones(p)) for p in cfg.row(1)]
        table.add_row("", *p2_row, "")
        table.add_row(
            f"[magenta]{board.stones(cfg.p2_store)}[/magenta]",
            *([""] * cfg.pits_per_side),
            f"[cyan]{board.stones(cfg.p1_store)}[/cyan]",
        )
        table.add_row("", *p1_row, "")
        return table

    def show_board(self, board: Board, moves: Iterable[int] = ()):
        """Print the board followed by whose turn it is."""
        self.console.print(self.board_table(board))
        if board.winner is not None:
            self.log_success(f"Player {board.winner.value} wins")
            return
        moves = list(moves)
        moves_str = ", ".join(str(m) for m in moves) if moves else "none"
        self.log_info(f"Player {board.turn.value} to move (legal pits: {moves_str})")

    def show_outcome(self, pit_id: int, outcome: GameOutcome, laps: int):
        """Print a single line describing a move's outcome."""
        if isinstance(outcome, Finished):
            color = "green"
        elif isinstance(outcome, ExtraTurn):
            color = "cyan"
        elif isinstance(outcome, TurnEnded):
            color = "white"
        else:
            color = "red"
        self.console.print(f"Pit {pit_id}: [{color}]{outcome}[/{color}] [dim]({laps} lap(s))[/dim]")


def setup_rich_logging(level: str = "INFO"):
    """Configure logging to work nicely with rich console."""
    from rich.logging import RichHandler

    # Remove existing handlers
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

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
