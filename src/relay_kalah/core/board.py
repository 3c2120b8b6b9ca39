"""
Board representation for relay Kalah.

A board is an immutable snapshot:
- Stone counts for every pit and store (1-based pit ids)
- The player to move next
- The recorded winner, once the game has finished
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from .config import BoardConfig, DEFAULT_CONFIG


class Turn(Enum):
    """Player identity; also names whose row and store a move uses."""

    P1 = 1
    P2 = 2

    @property
    def other(self) -> "Turn":
        return Turn.P2 if self is Turn.P1 else Turn.P1

    def store(self, config: BoardConfig) -> int:
        """Store pit id owned by this player."""
        return config.p1_store if self is Turn.P1 else config.p2_store

    def row(self, config: BoardConfig) -> List[int]:
        """Pit ids this player may start a move from."""
        return config.row(self.value)


@dataclass(frozen=True)
class Board:
    """Immutable board state. Index pits with stones(pit_id), not pits[...]."""

    pits: Tuple[int, ...]  # pits[0] holds pit 1
    turn: Turn = Turn.P1
    winner: Optional[Turn] = None
    config: BoardConfig = DEFAULT_CONFIG

    def __post_init__(self) -> None:
        """Validate board invariants."""
        if len(self.pits) != self.config.pit_count:
            raise ValueError(
                f"Board size {len(self.pits)} doesn't match expected {self.config.pit_count}"
            )
        if any(stones < 0 for stones in self.pits):
            raise ValueError("Negative stone count not allowed")

    @classmethod
    def from_counts(
        cls,
        counts: Sequence[int],
        turn: Turn = Turn.P1,
        winner: Optional[Turn] = None,
        config: BoardConfig = DEFAULT_CONFIG,
    ) -> "Board":
        return cls(pits=tuple(counts), turn=turn, winner=winner, config=config)

    def stones(self, pit_id: int) -> int:
        """Stone count of a pit by its 1-based id."""
        if not 1 <= pit_id <= self.config.pit_count:
            raise IndexError(f"Pit {pit_id} is not on the board")
        return self.pits[pit_id - 1]

    def store_of(self, turn: Turn) -> int:
        """Stones in a player's store."""
        return self.stones(turn.store(self.config))

    @property
    def total_stones(self) -> int:
        return sum(self.pits)

    @property
    def is_finished(self) -> bool:
        return self.winner is not None

    def with_pits(self, pits: Sequence[int], turn: Turn, winner: Optional[Turn] = None) -> "Board":
        """Copy of this board with new counts, mover and winner."""
        return replace(self, pits=tuple(pits), turn=turn, winner=winner)

    def __str__(self) -> str:
        """Human-readable board representation."""
        cfg = self.config
        p2_pits = [self.stones(p) for p in reversed(cfg.row(2))]
        p1_pits = [self.stones(p) for p in cfg.row(1)]
        p1_store = self.stones(cfg.p1_store)
        p2_store = self.stones(cfg.p2_store)

        pit_width = 3
        p2_str = " ".join(f"{s:>{pit_width}}" for s in p2_pits)
        p1_str = " ".join(f"{s:>{pit_width}}" for s in p1_pits)
        store_width = len(p2_str)

        if self.winner is not None:
            footer = f"Player {self.winner.value} wins"
        else:
            footer = f"Player {self.turn.value}'s turn"

        return f"""
      {p2_str}
[{p2_store:>2}] {' ' * store_width} [{p1_store:>2}]
      {p1_str}

{footer}
"""


def new_game(config: BoardConfig = DEFAULT_CONFIG) -> Board:
    """
    Create the starting board.

    Args:
        config: Board dimensions

    Returns:
        Board with every row pit at stones_per_pit, empty stores, P1 to move
    """
    pits = [config.stones_per_pit] * config.pits_per_side  # P1 row
    pits.append(0)  # P1 store
    pits.extend([config.stones_per_pit] * config.pits_per_side)  # P2 row
    pits.append(0)  # P2 store

    return Board(pits=tuple(pits), turn=Turn.P1, config=config)
