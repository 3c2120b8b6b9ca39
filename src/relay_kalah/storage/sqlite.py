"""SQLite game storage for local play."""

import sqlite3
import logging
import threading
from .base import GameStorage, GameNotFound, GameRow, board_to_row, row_to_board
from ..core import Board

logger = logging.getLogger(__name__)


class SQLiteGameStorage(GameStorage):
    """
    SQLite storage implementation.

    One row per game; every accepted move overwrites the row.
    """

    def __init__(self, db_path: str = ":memory:", cache_size_mb: int = 16):
        """
        Initialize SQLite storage.

        Args:
            db_path: Path to database file (use ":memory:" for in-memory)
            cache_size_mb: SQLite page cache size
        """
        self.db_path = db_path
        self.cache_size_mb = cache_size_mb
        # One connection shared across threads; every statement+commit pair runs under _lock
        self._lock = threading.Lock()
        self.conn = sqlite3.connect(db_path, check_same_thread=False, timeout=30.0)
        self.conn.row_factory = sqlite3.Row  # Enable dict-like access
        self._create_schema()
        self._optimize()

    def _create_schema(self) -> None:
        """Create database schema."""
        self.conn.executescript(
            """
            CREATE TABLE IF NOT EXISTS games (
                game_id INTEGER PRIMARY KEY AUTOINCREMENT,
                pits_per_side INTEGER NOT NULL,
                stones_per_pit INTEGER NOT NULL,
                pits TEXT NOT NULL,                -- JSON array, pit 1 first
                turn TEXT NOT NULL,                -- P1 / P2
                winner TEXT,                       -- NULL until finished
                updated_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
            );
        """
        )
        self.conn.commit()

    def _optimize(self) -> None:
        """Apply SQLite pragmas."""
        cache_size_kb = -int(self.cache_size_mb * 1024)
        if self.db_path == ":memory:":
            self.conn.execute(f"PRAGMA cache_size = {cache_size_kb}")
            return

        self.conn.executescript(
            f"""
            PRAGMA journal_mode = WAL;           -- Write-Ahead Logging
            PRAGMA synchronous = NORMAL;         -- Balanced durability
            PRAGMA cache_size = {cache_size_kb};
            PRAGMA temp_store = MEMORY;
        """
        )
        logger.debug(f"SQLite optimizations: cache={self.cache_size_mb}MB, journal=WAL")

    def create(self, board: Board) -> int:
        """Insert a new game row."""
        row = board_to_row(board)
        with self._lock:
            cursor = self.conn.execute(
                """
                INSERT INTO games (pits_per_side, stones_per_pit, pits, turn, winner)
                VALUES (?, ?, ?, ?, ?)
            """,
                (row.pits_per_side, row.stones_per_pit, row.pits, row.turn, row.winner),
            )
            self.conn.commit()
            game_id = cursor.lastrowid
        logger.debug(f"Stored new game {game_id}")
        return game_id

    def load(self, game_id: int) -> Board:
        """Retrieve a game's board."""
        with self._lock:
            cursor = self.conn.execute("SELECT * FROM games WHERE game_id = ?", (game_id,))
            row = cursor.fetchone()
        if row is None:
            raise GameNotFound(game_id)
        return row_to_board(
            GameRow(
                pits_per_side=row["pits_per_side"],
                stones_per_pit=row["stones_per_pit"],
                pits=row["pits"],
                turn=row["turn"],
                winner=row["winner"],
            )
        )

    def save(self, game_id: int, board: Board) -> None:
        """Overwrite a game's board."""
        row = board_to_row(board)
        with self._lock:
            cursor = self.conn.execute(
                """
                UPDATE games
                SET pits = ?, turn = ?, winner = ?, updated_at = CURRENT_TIMESTAMP
                WHERE game_id = ?
            """,
                (row.pits, row.turn, row.winner, game_id),
            )
            if cursor.rowcount == 0:
                self.conn.rollback()
                raise GameNotFound(game_id)
            self.conn.commit()

    def count_games(self) -> int:
        """Count stored games."""
        with self._lock:
            cursor = self.conn.execute("SELECT COUNT(*) FROM games")
            return cursor.fetchone()[0]

    def flush(self) -> None:
        """Commit pending transactions."""
        with self._lock:
            self.conn.commit()

    def close(self) -> None:
        """Close database connection."""
        with self._lock:
            self.conn.commit()
            self.conn.close()
