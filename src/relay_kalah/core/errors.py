"""Errors raised when a move is rejected."""

from typing import Optional

from .board import Turn


class MoveError(Exception):
    """A move was rejected; the board is unchanged."""


class InvalidStartPit(MoveError):
    """The chosen pit is outside the mover's row or holds no stones."""

    def __init__(self, pit_id: int, reason: str):
        self.pit_id = pit_id
        self.reason = reason
        super().__init__(f"Invalid start pit {pit_id}: {reason}")


class GameAlreadyFinished(MoveError):
    """The game already has a winner."""

    def __init__(self, winner: Optional[Turn] = None):
        self.winner = winner
        if winner is not None:
            super().__init__(f"Game already finished, player {winner.value} won")
        else:
            super().__init__("Game already finished")
