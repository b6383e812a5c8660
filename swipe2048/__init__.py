"""Rules engine for a 2048-style sliding tile puzzle."""

from swipe2048.config import GameConfig, InputConfig
from swipe2048.core import Board, Direction, MoveResult, Tile
from swipe2048.envs import GameSession, ResetReason, SessionStatus

__all__ = [
    "Board",
    "Direction",
    "GameConfig",
    "GameSession",
    "InputConfig",
    "MoveResult",
    "ResetReason",
    "SessionStatus",
    "Tile",
]
