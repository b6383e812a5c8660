# -*- coding: utf-8 -*-
"""
This module provides the rules of a 2048-like game as pure functions over immutable tile boards.

It includes the tile and direction types, the line collapse and whole-board move, the board queries used
for win and terminal detection, and random tile spawning.
"""

from .gameboard import (
    contains_target_tile,
    from_grid,
    get_empty_positions,
    has_available_moves,
    max_tile,
    to_grid,
    validate_board,
)
from .gamemove import LineResult, MoveResult, can_move, collapse_line, legal_directions, move_tiles
from .identifier import IdentifierAllocator
from .spawner import NumpyRandomSource, RandomSource, initial_tiles, spawn_tile
from .tile import Board, Direction, Position, Tile

__all__ = [
    "Board",
    "Direction",
    "IdentifierAllocator",
    "LineResult",
    "MoveResult",
    "NumpyRandomSource",
    "Position",
    "RandomSource",
    "Tile",
    "can_move",
    "collapse_line",
    "contains_target_tile",
    "from_grid",
    "get_empty_positions",
    "has_available_moves",
    "initial_tiles",
    "legal_directions",
    "max_tile",
    "move_tiles",
    "spawn_tile",
    "to_grid",
    "validate_board",
]
