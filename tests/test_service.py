"""Tests for the game service."""

import threading

import pytest
from relay_kalah.core import (
    Board,
    BoardConfig,
    ExtraTurn,
    GameAlreadyFinished,
    InvalidStartPit,
    Turn,
    TurnEnded,
    new_game,
)
from relay_kalah.service import GameService
from relay_kalah.storage import GameNotFound, SQLiteGameStorage


@pytest.fixture
def service():
    storage = SQLiteGameStorage(":memory:")
    yield GameService(storage)
    storage.close()


def test_create(service):
    status = service.create()

    assert status.game_id == 1
    assert status.board == new_game()
    assert status.turn == Turn.P1
    assert status.winner is None
    assert status.legal_moves == [1, 2, 3, 4, 5, 6]


def test_create_with_config():
    config = BoardConfig(pits_per_side=4, stones_per_pit=3)
    with SQLiteGameStorage(":memory:") as storage:
        status = GameService(storage, config).create()

        assert storage.load(status.game_id).config == config
        assert status.legal_moves == [1, 2, 3, 4]


def test_play_extra_turn_is_saved(service):
    game_id = service.create().game_id

    report = service.play(game_id, 1)

    assert report.outcome == ExtraTurn(Turn.P1)
    assert report.laps == 1
    assert report.status.turn == Turn.P1
    assert report.status.legal_moves == [2, 3, 4, 5, 6]
    assert service.get_status(game_id).board == report.status.board


def test_play_hands_turn_over(service):
    game_id = service.create().game_id

    report = service.play(game_id, 2)

    assert report.outcome == TurnEnded(Turn.P2)
    assert service.get_status(game_id).turn == Turn.P2
    assert service.get_status(game_id).legal_moves == [9, 10, 11, 12, 13]


def test_rejected_move_is_not_saved(service):
    game_id = service.create().game_id

    with pytest.raises(InvalidStartPit):
        service.play(game_id, 8)

    assert service.get_status(game_id).board == new_game()


def test_finished_game(service):
    game_id = service.create().game_id
    finished = Board.from_counts([1] * 6 + [40] + [1] * 6 + [20], winner=Turn.P1)
    service.storage.save(game_id, finished)

    with pytest.raises(GameAlreadyFinished):
        service.play(game_id, 1)

    status = service.get_status(game_id)
    assert status.winner == Turn.P1
    assert status.legal_moves == []


def test_unknown_game(service):
    with pytest.raises(GameNotFound):
        service.get_status(99)
    with pytest.raises(GameNotFound):
        service.play(99, 1)


def test_lock_per_game(service):
    assert service._lock_for(1) is service._lock_for(1)
    assert service._lock_for(1) is not service._lock_for(2)


def test_concurrent_moves_on_one_game(service):
    """Two simultaneous opening moves: exactly one sees the fresh board."""
    game_id = service.create().game_id
    outcomes = []
    errors = []

    def play():
        try:
            outcomes.append(service.play(game_id, 1).outcome)
        except InvalidStartPit as e:
            errors.append(e)

    threads = [threading.Thread(target=play) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    # Pit 1 is empty after the first move, so the second is rejected
    assert outcomes == [ExtraTurn(Turn.P1)]
    assert len(errors) == 1
    assert service.get_status(game_id).board.total_stones == 72


def test_concurrent_moves_on_different_games(service):
    game_ids = [service.create().game_id for _ in range(4)]
    results = {}

    def play(game_id):
        results[game_id] = service.play(game_id, 1).outcome

    threads = [threading.Thread(target=play, args=(g,)) for g in game_ids]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert results == {g: ExtraTurn(Turn.P1) for g in game_ids}
