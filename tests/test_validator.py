"""Tests for move validation."""

import pytest
from relay_kalah.core import (
    Board,
    InvalidStartPit,
    LapResult,
    Turn,
    legal_moves,
    new_game,
    validate_landing_continuation,
    validate_start,
)


def test_valid_start_pits():
    board = new_game()

    for pit in range(1, 7):
        validate_start(board, Turn.P1, pit)
    for pit in range(8, 14):
        validate_start(board, Turn.P2, pit)


@pytest.mark.parametrize("pit", [0, 7, 8, 13, 14, 15, -1])
def test_start_outside_own_row_rejected(pit):
    with pytest.raises(InvalidStartPit) as exc_info:
        validate_start(new_game(), Turn.P1, pit)

    assert exc_info.value.pit_id == pit


def test_player_two_cannot_start_in_player_one_row():
    with pytest.raises(InvalidStartPit):
        validate_start(new_game(), Turn.P2, 3)


def test_empty_start_pit_rejected():
    board = Board.from_counts([0, 6, 6, 6, 6, 6, 0, 6, 6, 6, 6, 6, 6, 0])

    with pytest.raises(InvalidStartPit) as exc_info:
        validate_start(board, Turn.P1, 1)

    assert exc_info.value.reason == "pit is empty"


def test_landing_continuation():
    """Only the mover's own store stops a new lap."""
    board = new_game()

    assert validate_landing_continuation(board, Turn.P1, 7) is LapResult.STOPPED_AT_OWN_STORE
    assert validate_landing_continuation(board, Turn.P2, 14) is LapResult.STOPPED_AT_OWN_STORE
    assert validate_landing_continuation(board, Turn.P1, 14) is LapResult.CONTINUE
    assert validate_landing_continuation(board, Turn.P2, 7) is LapResult.CONTINUE
    assert validate_landing_continuation(board, Turn.P1, 3) is LapResult.CONTINUE
    assert validate_landing_continuation(board, Turn.P1, 10) is LapResult.CONTINUE


def test_legal_moves():
    """Test legal move listing."""
    board = Board.from_counts([0, 6, 0, 6, 6, 6, 0, 6, 6, 0, 6, 6, 6, 0])

    assert legal_moves(board, Turn.P1) == [2, 4, 5, 6]
    assert legal_moves(board, Turn.P2) == [8, 9, 11, 12, 13]


def test_no_legal_moves_when_finished():
    board = Board.from_counts([1] * 6 + [40] + [1] * 6 + [20], winner=Turn.P1)

    assert legal_moves(board, Turn.P1) == []
