"""
Move resolution for the 2048 game: collapse of a single line and assembly of a whole-board move.
"""

from dataclasses import replace
from typing import NamedTuple, Sequence

from swipe2048.config import BOARD_SIZE
from swipe2048.core.tile import Board, Direction, Tile


class LineResult(NamedTuple):
    """Outcome of collapsing one row or column."""

    tiles: list[Tile]
    moved: bool
    score: int


class MoveResult(NamedTuple):
    """
    Outcome of a whole-board move.

    Attributes
    ----------
    tiles : Board
        The board after sliding and merging, before any spawn.
    moved : bool
        Whether any tile changed position or value.
    score : int
        Sum of the values produced by merges.
    """

    tiles: Board
    moved: bool
    score: int


def collapse_line(tiles: Sequence[Tile], line: int, direction: Direction, size: int = BOARD_SIZE) -> LineResult:
    """
    Slide and merge the tiles of one line.

    Parameters
    ----------
    tiles : Sequence[Tile]
        The tiles currently on the line, in any order.
    line : int
        Index of the row (horizontal move) or column (vertical move).
    direction : Direction
        Direction of the move.
    size : int, optional
        The size of the square grid (default is 4).

    Returns
    -------
    LineResult
        The new tiles of the line in processing order, whether the line changed, and the merge score.

    Notes
    -----
    - Input tiles are never mutated; every output tile is a new record.
    - Merge and spawn annotations of the input are cleared.
    - Only adjacent original pairs merge: ``[2, 2, 2, 2]`` becomes ``[4, 4]``, never ``[8]``.
    - A merged tile keeps the identifier of the tile nearest to the destination edge.
    """

    def along(tile: Tile) -> int:
        return tile.col if direction.horizontal else tile.row

    ordered = sorted(tiles, key=along, reverse=not direction.toward_low)

    result = []
    moved = False
    score = 0
    target = 0

    # ##: Walk from the destination edge, consuming at most one partner per tile.
    i = 0
    while i < len(ordered):
        tile = ordered[i]
        value = tile.value
        merged = i + 1 < len(ordered) and ordered[i + 1].value == value
        if merged:
            value *= 2
            score += value
            moved = True
            i += 1

        slot = target if direction.toward_low else size - 1 - target
        row, col = (line, slot) if direction.horizontal else (slot, line)
        if (tile.row, tile.col) != (row, col):
            moved = True

        result.append(replace(tile, value=value, row=row, col=col, is_new=False, just_merged=merged))
        target += 1
        i += 1

    return LineResult(tiles=result, moved=moved, score=score)


def move_tiles(board: Board, direction: Direction, size: int = BOARD_SIZE) -> MoveResult:
    """
    Apply a move to every line of the board.

    Parameters
    ----------
    board : Board
        The current tiles. Positions must be unique and inside the grid.
    direction : Direction
        Direction of the move.
    size : int, optional
        The size of the square grid (default is 4).

    Returns
    -------
    MoveResult
        On a move, the new tiles sorted by row, column then identifier. On a no-op, the input tiles
        in their original order with annotations cleared, ``moved=False`` and a zero score.
    """
    direction = Direction(direction)

    # ##: Partition the tiles by the line they currently sit on.
    lines: list[list[Tile]] = [[] for _ in range(size)]
    for tile in board:
        lines[tile.row if direction.horizontal else tile.col].append(tile)

    moved = False
    score = 0
    updated: list[Tile] = []
    for index, line_tiles in enumerate(lines):
        if not line_tiles:
            continue
        result = collapse_line(line_tiles, index, direction, size)
        moved = moved or result.moved
        score += result.score
        updated.extend(result.tiles)

    if not moved:
        return MoveResult(
            tiles=tuple(replace(tile, is_new=False, just_merged=False) for tile in board), moved=False, score=0
        )

    updated.sort(key=lambda tile: (tile.row, tile.col, tile.id))
    return MoveResult(tiles=tuple(updated), moved=True, score=score)


def can_move(board: Board, direction: Direction, size: int = BOARD_SIZE) -> bool:
    """Check whether ``direction`` would change the board."""
    return move_tiles(board, direction, size).moved


def legal_directions(board: Board, size: int = BOARD_SIZE) -> list[Direction]:
    """
    Determine the directions that change the board.

    Parameters
    ----------
    board : Board
        The current tiles.
    size : int, optional
        The size of the square grid (default is 4).

    Returns
    -------
    list[Direction]
        The legal directions, in action-code order (left, up, right, down).
    """
    return [direction for direction in Direction if can_move(board, direction, size)]
