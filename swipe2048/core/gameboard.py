"""
Board queries for the 2048 game: empty cells, terminal detection, win detection and the
conversion between tile boards and numpy grids.
"""

from numpy import any as np_any
from numpy import argwhere, int64, ndarray, zeros

from swipe2048.config import BOARD_SIZE
from swipe2048.core.identifier import IdentifierAllocator
from swipe2048.core.tile import Board, Position, Tile


def to_grid(board: Board, size: int = BOARD_SIZE) -> ndarray:
    """
    Lay the tiles of a board out on a dense grid.

    Parameters
    ----------
    board : Board
        The tiles to place.
    size : int, optional
        The size of the square grid (default is 4).

    Returns
    -------
    ndarray
        A (size, size) int64 array holding tile values, 0 for empty cells.
    """
    grid = zeros((size, size), dtype=int64)
    for tile in board:
        grid[tile.row, tile.col] = tile.value
    return grid


def from_grid(grid: ndarray, allocator: IdentifierAllocator) -> Board:
    """
    Build a board from a dense grid.

    Parameters
    ----------
    grid : ndarray
        A square array of tile values, 0 for empty cells.
    allocator : IdentifierAllocator
        Source of identifiers, consumed in row-major order.

    Returns
    -------
    Board
        One tile per non-zero cell, in row-major order.
    """
    return tuple(
        Tile(id=allocator.next_id(), value=int(grid[row, col]), row=int(row), col=int(col))
        for row, col in argwhere(grid != 0)
    )


def get_empty_positions(board: Board, size: int = BOARD_SIZE) -> list[Position]:
    """
    List the unoccupied cells of a board.

    Parameters
    ----------
    board : Board
        The current tiles.
    size : int, optional
        The size of the square grid (default is 4).

    Returns
    -------
    list[Position]
        The empty (row, col) pairs in row-major order.
    """
    occupied = zeros((size, size), dtype=bool)
    for tile in board:
        occupied[tile.row, tile.col] = True
    return [(int(row), int(col)) for row, col in argwhere(~occupied)]


def has_available_moves(board: Board, size: int = BOARD_SIZE) -> bool:
    """
    Check whether the player still has a move.

    Parameters
    ----------
    board : Board
        The current tiles.
    size : int, optional
        The size of the square grid (default is 4).

    Returns
    -------
    bool
        True if the board has an empty cell or two orthogonal neighbours of equal value.

    Notes
    -----
    - A board that is not full is assumed to have a move.
    - On a full board every adjacent pair is compared once, from its left (or upper) member, which
      covers all orthogonal neighbourhoods.
    """
    if len(board) < size * size:
        return True

    grid = to_grid(board, size)
    # ##>: Right neighbours, then down neighbours.
    return bool(np_any(grid[:, :-1] == grid[:, 1:]) or np_any(grid[:-1, :] == grid[1:, :]))


def contains_target_tile(board: Board, target: int) -> bool:
    """True if some tile has reached ``target`` or more."""
    return any(tile.value >= target for tile in board)


def max_tile(board: Board) -> int:
    """Highest tile value on the board, 0 for an empty board."""
    return max((tile.value for tile in board), default=0)


def validate_board(board: Board, size: int = BOARD_SIZE) -> None:
    """
    Check the structural invariants of a board.

    Parameters
    ----------
    board : Board
        The tiles to check.
    size : int, optional
        The size of the square grid (default is 4).

    Raises
    ------
    ValueError
        If a tile lies outside the grid, shares its cell or identifier with another tile, or
        holds a value that is not a power of two of at least 2.
    """
    positions: set[Position] = set()
    identifiers: set[int] = set()
    for tile in board:
        if not (0 <= tile.row < size and 0 <= tile.col < size):
            raise ValueError(f'tile {tile.id} at {tile.position} is outside a {size}x{size} board')
        if tile.position in positions:
            raise ValueError(f'tile {tile.id} overlaps another tile at {tile.position}')
        if tile.id in identifiers:
            raise ValueError(f'tile identifier {tile.id} is used twice')
        if tile.value < 2 or tile.value & (tile.value - 1):
            raise ValueError(f'tile {tile.id} has invalid value {tile.value}')
        positions.add(tile.position)
        identifiers.add(tile.id)
