"""PostgreSQL game storage for shared deployments."""

import logging

import psycopg2
import psycopg2.extras

from .base import GameStorage, GameNotFound, GameRow, board_to_row, row_to_board
from ..core import Board

logger = logging.getLogger(__name__)


class PostgreSQLGameStorage(GameStorage):
    """
    PostgreSQL storage implementation.

    Same single-table layout as the SQLite backend. The connection is not
    shared between threads; give each service its own backend.
    """

    def __init__(
        self,
        host: str = "localhost",
        port: int = 5432,
        database: str = "kalah",
        user: str = "postgres",
        password: str = "",
    ):
        """
        Initialize PostgreSQL storage.

        Args:
            host: Database host
            port: Database port
            database: Database name
            user: Database user
            password: Database password
        """
        self.host = host
        self.port = port
        self.database = database
        self.user = user

        self.conn = psycopg2.connect(
            host=host,
            port=port,
            database=database,
            user=user,
            password=password,
        )
        self.conn.autocommit = False  # Manual transaction control
        self._create_schema()

    def _create_schema(self) -> None:
        """Create database schema."""
        with self.conn.cursor() as cursor:
            cursor.execute(
                """
                CREATE TABLE IF NOT EXISTS games (
                    game_id SERIAL PRIMARY KEY,
                    pits_per_side SMALLINT NOT NULL,
                    stones_per_pit SMALLINT NOT NULL,
                    pits TEXT NOT NULL,                       -- JSON array, pit 1 first
                    turn VARCHAR(2) NOT NULL,                 -- P1 / P2
                    winner VARCHAR(2),                        -- NULL until finished
                    updated_at TIMESTAMP NOT NULL DEFAULT NOW()
                );
            """
            )
            self.conn.commit()
        logger.info(f"PostgreSQL storage ready ({self.user}@{self.host}:{self.port}/{self.database})")

    def create(self, board: Board) -> int:
        """Insert a new game row."""
        row = board_to_row(board)
        with self.conn.cursor() as cursor:
            cursor.execute(
                """
                INSERT INTO games (pits_per_side, stones_per_pit, pits, turn, winner)
                VALUES (%s, %s, %s, %s, %s)
                RETURNING game_id
            """,
                (row.pits_per_side, row.stones_per_pit, row.pits, row.turn, row.winner),
            )
            game_id = cursor.fetchone()[0]
        self.conn.commit()
        return game_id

    def load(self, game_id: int) -> Board:
        """Retrieve a game's board."""
        with self.conn.cursor(cursor_factory=psycopg2.extras.RealDictCursor) as cursor:
            cursor.execute("SELECT * FROM games WHERE game_id = %s", (game_id,))
            row = cursor.fetchone()
        self.conn.commit()  # end the read transaction
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
        with self.conn.cursor() as cursor:
            cursor.execute(
                """
                UPDATE games
                SET pits = %s, turn = %s, winner = %s, updated_at = NOW()
                WHERE game_id = %s
            """,
                (row.pits, row.turn, row.winner, game_id),
            )
            updated = cursor.rowcount
        if updated == 0:
            self.conn.rollback()
            raise GameNotFound(game_id)
        self.conn.commit()

    def count_games(self) -> int:
        """Count stored games."""
        with self.conn.cursor() as cursor:
            cursor.execute("SELECT COUNT(*) FROM games")
            return cursor.fetchone()[0]

    def flush(self) -> None:
        """Commit pending transactions."""
        self.conn.commit()

    def close(self) -> None:
        """Close database connection."""
        self.conn.commit()
        self.conn.close()
