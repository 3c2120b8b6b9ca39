"""Board configuration: pit counts and stones per pit."""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class BoardConfig:
    """
    Static board dimensions.

    Pit ids are 1-based. For pits_per_side=6:

          P2 Pits (13-8)
       [13][12][11][10][9][8]
    [14]                    [7]  <- Stores
       [1] [2] [3] [4] [5] [6]
          P1 Pits (1-6)

    Everything else (store ids, rows, win threshold) derives from these two values.
    """

    pits_per_side: int = 6
    stones_per_pit: int = 6

    def __post_init__(self) -> None:
        if self.pits_per_side < 1:
            raise ValueError(f"pits_per_side must be positive, got {self.pits_per_side}")
        if self.stones_per_pit < 1:
            raise ValueError(f"stones_per_pit must be positive, got {self.stones_per_pit}")

    @property
    def pit_count(self) -> int:
        """Total positions on the board, stores included."""
        return 2 * self.pits_per_side + 2

    @property
    def p1_store(self) -> int:
        return self.pits_per_side + 1

    @property
    def p2_store(self) -> int:
        return self.pit_count

    @property
    def initial_stones(self) -> int:
        """Stones on the board at game start (all in non-store pits)."""
        return 2 * self.pits_per_side * self.stones_per_pit

    def row(self, player_number: int) -> List[int]:
        """Pit ids of a player's row (player_number is 1 or 2)."""
        if player_number == 1:
            return list(range(1, self.p1_store))
        return list(range(self.p1_store + 1, self.p2_store))

    def next_pit(self, pit_id: int) -> int:
        """Following pit in sowing order, wrapping from the last pit to 1."""
        return 1 if pit_id >= self.pit_count else pit_id + 1


DEFAULT_CONFIG = BoardConfig()
