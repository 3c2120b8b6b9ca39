"""
Game service: create games, look up their status and play moves.

Moves on one game are serialized with a lock per game id, so the
load -> apply_move -> save sequence never interleaves for the same game.
Different games do not block each other.
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..core import (
    Board,
    BoardConfig,
    DEFAULT_CONFIG,
    GameOutcome,
    MoveError,
    Turn,
    apply_move,
    legal_moves,
    new_game,
)
from ..storage import GameStorage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameStatus:
    """Current state of a stored game."""

    game_id: int
    board: Board
    legal_moves: List[int] = field(default_factory=list)

    @property
    def turn(self) -> Turn:
        return self.board.turn

    @property
    def winner(self) -> Optional[Turn]:
        return self.board.winner


@dataclass(frozen=True)
class MoveReport:
    """Result of an accepted move."""

    status: GameStatus
    outcome: GameOutcome
    laps: int


class GameService:
    """Thin layer between a storage backend and the move engine."""

    def __init__(self, storage: GameStorage, config: BoardConfig = DEFAULT_CONFIG):
        self.storage = storage
        self.config = config
        self._locks: Dict[int, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def _lock_for(self, game_id: int) -> threading.Lock:
        with self._locks_guard:
            return self._locks.setdefault(game_id, threading.Lock())

    def _status(self, game_id: int, board: Board) -> GameStatus:
        return GameStatus(game_id=game_id, board=board, legal_moves=legal_moves(board, board.turn))

    def create(self) -> GameStatus:
        """Create and store a new game."""
        board = new_game(self.config)
        game_id = self.storage.create(board)
        logger.info(f"Created game {game_id} ({self.config.pits_per_side} pits, {self.config.stones_per_pit} stones)")
        return self._status(game_id, board)

    def get_status(self, game_id: int) -> GameStatus:
        """
        Current board, mover, winner and legal moves of a game.

        Raises:
            GameNotFound: unknown game id
        """
        return self._status(game_id, self.storage.load(game_id))

    def play(self, game_id: int, pit_id: int) -> MoveReport:
        """
        Play pit_id for the player to move in game_id.

        Args:
            game_id: Stored game
            pit_id: 1-based pit to start the move from

        Returns:
            MoveReport with the saved status and the move outcome

        Raises:
            GameNotFound: unknown game id
            MoveError: move rejected by the engine (nothing is saved)
        """
        with self._lock_for(game_id):
            board = self.storage.load(game_id)
            try:
                result = apply_move(board, board.turn, pit_id)
            except MoveError as e:
                logger.warning(f"Game {game_id}: rejected move {pit_id}: {e}")
                raise
            self.storage.save(game_id, result.board)

        return MoveReport(
            status=self._status(game_id, result.board),
            outcome=result.outcome,
            laps=result.laps,
        )
