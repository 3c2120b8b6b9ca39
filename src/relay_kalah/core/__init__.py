"""Core board representation and relay sowing rules."""

from .config import BoardConfig, DEFAULT_CONFIG
from .board import Board, Turn, new_game
from .errors import MoveError, InvalidStartPit, GameAlreadyFinished
from .outcome import (
    LapResult,
    TurnEnded,
    ExtraTurn,
    Finished,
    GameOutcome,
    MoveResult,
)
from .validator import validate_start, validate_landing_continuation, legal_moves
from .win import win_threshold, evaluate_winner
from .engine import apply_move, sow_lap

__all__ = [
    "BoardConfig",
    "DEFAULT_CONFIG",
    "Board",
    "Turn",
    "new_game",
    "MoveError",
    "InvalidStartPit",
    "GameAlreadyFinished",
    "LapResult",
    "TurnEnded",
    "ExtraTurn",
    "Finished",
    "GameOutcome",
    "MoveResult",
    "validate_start",
    "validate_landing_continuation",
    "legal_moves",
    "win_threshold",
    "evaluate_winner",
    "apply_move",
    "sow_lap",
]
