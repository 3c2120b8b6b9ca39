"""
Relay sowing move engine.

A move is a sequence of laps. Each lap picks up every stone in a pit and sows
them one by one into the following pits, skipping the opponent's store. Where
the last stone lands decides what happens next:

1. Mover's own store: the move ends and the mover plays again
2. A pit that was empty: the move ends and the opponent plays
3. A pit that already held stones: relay, a new lap starts from that pit

The win condition is checked before every pickup and again after the move, so
a move stops sowing as soon as a store passes the threshold. There is no
capture rule.
"""

import logging
from typing import Optional, Tuple

from .board import Board, Turn
from .errors import GameAlreadyFinished
from .outcome import ExtraTurn, Finished, GameOutcome, LapResult, MoveResult, TurnEnded
from .validator import validate_landing_continuation, validate_start
from .win import evaluate_winner

logger = logging.getLogger(__name__)


def sow_lap(board: Board, turn: Turn, pit_id: int) -> Tuple[LapResult, Board, int]:
    """
    Run one lap starting from pit_id.

    Args:
        board: Board before the lap
        turn: Player making the move
        pit_id: Pit the lap picks up from

    Returns:
        (lap result, board after the lap, landing pit). When the lap stops before
        pickup the board is returned unchanged and the landing pit is pit_id.
    """
    if validate_landing_continuation(board, turn, pit_id) is LapResult.STOPPED_AT_OWN_STORE:
        return LapResult.STOPPED_AT_OWN_STORE, board, pit_id

    if evaluate_winner(board) is not None:
        return LapResult.FINISHED, board, pit_id

    config = board.config
    opponent_store = turn.other.store(config)
    own_store = turn.store(config)

    # Pick up stones
    pits = list(board.pits)
    carry = pits[pit_id - 1]
    pits[pit_id - 1] = 0
    current = config.next_pit(pit_id)

    # Sow stones
    while carry > 0:
        if current == opponent_store:
            current = config.next_pit(current)
            continue

        pits[current - 1] += 1
        carry -= 1
        if carry > 0:
            current = config.next_pit(current)

    after = board.with_pits(pits, turn=board.turn)

    if current == own_store:
        # Next lap's continuation check turns this into an extra turn
        return LapResult.CONTINUE, after, current
    if pits[current - 1] == 1:
        return LapResult.TURN_ENDED, after, current
    return LapResult.CONTINUE, after, current


def apply_move(board: Board, turn: Turn, pit_id: int) -> MoveResult:
    """
    Apply a full move, relay laps included, and return the resulting board.

    Args:
        board: Board before the move (not modified)
        turn: Player making the move
        pit_id: 1-based pit the move starts from

    Returns:
        MoveResult with the new board (turn set to the next mover, winner set
        when finished), the outcome and the number of laps sown

    Raises:
        GameAlreadyFinished: board already records a winner
        InvalidStartPit: pit_id is not a legal start for turn
    """
    if board.is_finished:
        raise GameAlreadyFinished(board.winner)
    validate_start(board, turn, pit_id)

    start_pit = pit_id
    current = board
    laps = 0

    while True:
        lap_result, current, pit_id = sow_lap(current, turn, pit_id)
        if lap_result is LapResult.CONTINUE:
            laps += 1
            logger.debug(f"Lap {laps} landed on pit {pit_id} ({current.stones(pit_id)} stones), relaying")
            continue
        if lap_result is LapResult.TURN_ENDED:
            laps += 1
        break

    winner: Optional[Turn] = evaluate_winner(current)
    outcome: GameOutcome
    if winner is not None:
        outcome = Finished(winner)
        next_turn = turn
    elif lap_result is LapResult.STOPPED_AT_OWN_STORE:
        outcome = ExtraTurn(turn)
        next_turn = turn
    else:
        outcome = TurnEnded(turn.other)
        next_turn = turn.other

    logger.info(f"Player {turn.value} pit {start_pit}: {outcome} after {laps} lap(s)")
    return MoveResult(
        board=current.with_pits(current.pits, turn=next_turn, winner=winner),
        outcome=outcome,
        laps=laps,
    )
