"""Abstract base class for game storage backends."""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ..core import Board, BoardConfig, Turn


class StorageError(Exception):
    """Base class for storage failures."""


class GameNotFound(StorageError):
    """No game is stored under the requested id."""

    def __init__(self, game_id: int):
        self.game_id = game_id
        super().__init__(f"Game {game_id} does not exist")


@dataclass
class GameRow:
    """
    Flat representation of a stored game.
    """

    pits_per_side: int
    stones_per_pit: int
    pits: str  # JSON array of stone counts, pit 1 first
    turn: str  # Turn name
    winner: Optional[str] = None  # Turn name once finished


def board_to_row(board: Board) -> GameRow:
    """Flatten a board for storage."""
    return GameRow(
        pits_per_side=board.config.pits_per_side,
        stones_per_pit=board.config.stones_per_pit,
        pits=json.dumps(list(board.pits)),
        turn=board.turn.name,
        winner=board.winner.name if board.winner is not None else None,
    )


def row_to_board(row: GameRow) -> Board:
    """Rebuild a board from its stored form."""
    config = BoardConfig(pits_per_side=row.pits_per_side, stones_per_pit=row.stones_per_pit)
    return Board(
        pits=tuple(json.loads(row.pits)),
        turn=Turn[row.turn],
        winner=Turn[row.winner] if row.winner else None,
        config=config,
    )


class GameStorage(ABC):
    """Abstract interface for game storage."""

    @abstractmethod
    def create(self, board: Board) -> int:
        """
        Store a new game.

        Args:
            board: Starting board

        Returns:
            New game id
        """
        pass

    @abstractmethod
    def load(self, game_id: int) -> Board:
        """
        Retrieve the current board of a game.

        Args:
            game_id: Game id

        Returns:
            Stored board

        Raises:
            GameNotFound: unknown game id
        """
        pass

    @abstractmethod
    def save(self, game_id: int, board: Board) -> None:
        """
        Replace the stored board (pits, turn and winner) of a game.

        Args:
            game_id: Game id
            board: Board after an accepted move

        Raises:
            GameNotFound: unknown game id
        """
        pass

    @abstractmethod
    def count_games(self) -> int:
        """Number of stored games."""
        pass

    @abstractmethod
    def flush(self) -> None:
        """Ensure all pending writes are persisted."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Cleanup and close connection."""
        pass

    def __enter__(self):
        """Context manager support."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager cleanup."""
        self.close()
