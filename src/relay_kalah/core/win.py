"""
Win detection.

A player wins as soon as their store holds more than half of the stones the
game started with and the two stores differ. Equal stores never decide the game.
"""

from typing import Optional

from .board import Board, Turn
from .config import BoardConfig


def win_threshold(config: BoardConfig) -> float:
    """Half of the initial stones (36 for six pits of six)."""
    return config.initial_stones / 2


def evaluate_winner(board: Board) -> Optional[Turn]:
    """
    Return the player whose store exceeds the threshold, if any.

    Args:
        board: Board to inspect

    Returns:
        Winning Turn, or None when nobody has won yet
    """
    p1_store = board.store_of(Turn.P1)
    p2_store = board.store_of(Turn.P2)
    if p1_store == p2_store:
        return None

    # Integer form of store > initial_stones / 2
    initial = board.config.initial_stones
    if 2 * p1_store > initial:
        return Turn.P1
    if 2 * p2_store > initial:
        return Turn.P2
    return None
