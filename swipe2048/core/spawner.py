"""
Random tile placement: the spawn after every accepted move and the seeding of a fresh board.
"""

from typing import Protocol

from numpy.random import PCG64DXSM, Generator, default_rng

from swipe2048.config import BOARD_SIZE, INITIAL_TILES, SPAWN_PROBABILITY, SPAWN_VALUES
from swipe2048.core.gameboard import get_empty_positions
from swipe2048.core.identifier import IdentifierAllocator
from swipe2048.core.tile import Board, Tile


class RandomSource(Protocol):
    """Source of the two random draws a spawn needs."""

    def pick(self, count: int) -> int:
        """Return an index drawn uniformly from [0, count)."""

    def chance(self, probability: float) -> bool:
        """Return True with the given probability."""


class NumpyRandomSource:
    """
    Random source backed by a numpy generator.

    Parameters
    ----------
    seed : int, optional
        Seed for reproducible games. A fresh PCG64DXSM stream is used when omitted.
    """

    def __init__(self, seed: int | None = None):
        self._generator: Generator = default_rng(seed) if seed is not None else default_rng(PCG64DXSM())

    def pick(self, count: int) -> int:
        return int(self._generator.integers(count))

    def chance(self, probability: float) -> bool:
        return bool(self._generator.random() < probability)


def spawn_tile(
    board: Board,
    allocator: IdentifierAllocator,
    random_source: RandomSource,
    size: int = BOARD_SIZE,
    values: tuple[int, int] = SPAWN_VALUES,
    probability: float = SPAWN_PROBABILITY,
) -> Board:
    """
    Add one tile to a random empty cell.

    Parameters
    ----------
    board : Board
        The current tiles, returned untouched in the result.
    allocator : IdentifierAllocator
        Source of the new tile identifier.
    random_source : RandomSource
        Source of the cell and value draws.
    size : int, optional
        The size of the square grid (default is 4).
    values : tuple[int, int], optional
        The common and the rare spawn value (default is (2, 4)).
    probability : float, optional
        Probability of the common value (default is 0.9).

    Returns
    -------
    Board
        The input tiles followed by the new tile, or the input board if it is full.

    Notes
    -----
    The cell is drawn first, then the value.
    """
    empty_positions = get_empty_positions(board, size)
    if not empty_positions:
        return board

    row, col = empty_positions[random_source.pick(len(empty_positions))]
    value = values[0] if random_source.chance(probability) else values[1]
    return (*board, Tile(id=allocator.next_id(), value=value, row=row, col=col, is_new=True))


def initial_tiles(
    allocator: IdentifierAllocator,
    random_source: RandomSource,
    size: int = BOARD_SIZE,
    count: int = INITIAL_TILES,
    values: tuple[int, int] = SPAWN_VALUES,
    probability: float = SPAWN_PROBABILITY,
) -> Board:
    """Seed an empty board with ``count`` spawned tiles."""
    board: Board = ()
    for _ in range(count):
        board = spawn_tile(board, allocator, random_source, size, values, probability)
    return board
