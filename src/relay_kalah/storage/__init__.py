"""Storage backends for game boards."""

from .base import GameStorage, GameRow, StorageError, GameNotFound, board_to_row, row_to_board
from .sqlite import SQLiteGameStorage
from .postgresql import PostgreSQLGameStorage

__all__ = [
    "GameStorage",
    "GameRow",
    "StorageError",
    "GameNotFound",
    "board_to_row",
    "row_to_board",
    "SQLiteGameStorage",
    "PostgreSQLGameStorage",
]
