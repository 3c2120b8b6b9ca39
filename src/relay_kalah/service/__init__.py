"""Game service built on storage and the move engine."""

from .game_service import GameService, GameStatus, MoveReport

__all__ = ["GameService", "GameStatus", "MoveReport"]
