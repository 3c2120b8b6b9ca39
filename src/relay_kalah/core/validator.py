"""
Move validation.

- validate_start: the starting pit must be in the mover's row and hold stones
- validate_landing_continuation: a relay lap may not start from the mover's own store
"""

from typing import List

from .board import Board, Turn
from .errors import InvalidStartPit
from .outcome import LapResult


def validate_start(board: Board, turn: Turn, pit_id: int) -> None:
    """
    Check that a move may start from pit_id.

    Args:
        board: Current board
        turn: Player making the move
        pit_id: 1-based pit the move starts from

    Raises:
        InvalidStartPit: pit is outside the mover's row or empty
    """
    if pit_id not in turn.row(board.config):
        raise InvalidStartPit(pit_id, f"not in player {turn.value}'s row")
    if board.stones(pit_id) == 0:
        raise InvalidStartPit(pit_id, "pit is empty")


def validate_landing_continuation(board: Board, turn: Turn, pit_id: int) -> LapResult:
    """Report STOPPED_AT_OWN_STORE when the next lap would start from the mover's store."""
    if pit_id == turn.store(board.config):
        return LapResult.STOPPED_AT_OWN_STORE
    return LapResult.CONTINUE


def legal_moves(board: Board, turn: Turn) -> List[int]:
    """Pits in the mover's row that hold stones, ascending."""
    if board.is_finished:
        return []
    return [pit for pit in turn.row(board.config) if board.stones(pit) > 0]
