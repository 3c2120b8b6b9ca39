"""Move outcomes and per-lap results."""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .board import Board, Turn


class LapResult(Enum):
    """How a single sowing lap ended."""

    CONTINUE = "continue"  # relay: sow again from the landing pit
    STOPPED_AT_OWN_STORE = "stopped_at_own_store"
    TURN_ENDED = "turn_ended"  # last stone dropped into an empty pit
    FINISHED = "finished"  # a store passed the win threshold


@dataclass(frozen=True)
class TurnEnded:
    next_turn: Turn

    def __str__(self) -> str:
        return f"Turn ended, player {self.next_turn.value} to move"


@dataclass(frozen=True)
class ExtraTurn:
    turn: Turn

    def __str__(self) -> str:
        return f"Extra turn for player {self.turn.value}"


@dataclass(frozen=True)
class Finished:
    winner: Turn

    def __str__(self) -> str:
        return f"Game finished, player {self.winner.value} wins"


GameOutcome = Union[TurnEnded, ExtraTurn, Finished]


@dataclass(frozen=True)
class MoveResult:
    """Board after a move, the move's outcome and how many laps were sown."""

    board: Board
    outcome: GameOutcome
    laps: int = 1
