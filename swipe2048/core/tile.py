"""
Value types of the 2048 board: tiles, directions and the board alias.
"""

from dataclasses import dataclass
from enum import Enum


class Direction(str, Enum):
    """
    Swipe direction.

    Integer action codes follow the usual 2048 convention (0: left, 1: up, 2: right, 3: down).
    """

    LEFT = 'left'
    UP = 'up'
    RIGHT = 'right'
    DOWN = 'down'

    @property
    def horizontal(self) -> bool:
        """True when the move collapses rows, False when it collapses columns."""
        return self in (Direction.LEFT, Direction.RIGHT)

    @property
    def toward_low(self) -> bool:
        """True when tiles travel toward index 0 (left or up)."""
        return self in (Direction.LEFT, Direction.UP)

    @property
    def action(self) -> int:
        """Integer action code of the direction."""
        return _ACTIONS.index(self)

    @classmethod
    def from_action(cls, action: int) -> 'Direction':
        """
        Get the direction for an integer action code.

        Parameters
        ----------
        action : int
            The action code (0: left, 1: up, 2: right, 3: down).

        Returns
        -------
        Direction
            The matching direction.

        Raises
        ------
        ValueError
            If the code is not in [0, 3].
        """
        if not 0 <= action < len(_ACTIONS):
            raise ValueError(f'action must be in [0, {len(_ACTIONS) - 1}], got {action}')
        return _ACTIONS[action]


_ACTIONS = (Direction.LEFT, Direction.UP, Direction.RIGHT, Direction.DOWN)


@dataclass(frozen=True)
class Tile:
    """
    A placed value on the board.

    Attributes
    ----------
    id : int
        Identifier, stable across moves until the tile is consumed by a merge.
    value : int
        Power of two, at least 2.
    row : int
        Row index in [0, board_size).
    col : int
        Column index in [0, board_size).
    is_new : bool
        Set only on the board produced by the spawn that created the tile.
    just_merged : bool
        Set only on the board produced by the merge that created the value.
    """

    id: int
    value: int
    row: int
    col: int
    is_new: bool = False
    just_merged: bool = False

    @property
    def position(self) -> tuple[int, int]:
        """The (row, col) pair of the tile."""
        return self.row, self.col


# ##: A board is an ordered, immutable collection of tiles with unique positions.
Board = tuple[Tile, ...]
Position = tuple[int, int]
