"""
Configuration for the 2048 rules engine and its input collaborators.

Defaults follow the reference game: a 4x4 board seeded with two tiles, a win at 2048 and
spawned tiles that are 2 nine times out of ten.
"""

from dataclasses import dataclass

# ##>: Board defaults.
BOARD_SIZE = 4
INITIAL_TILES = 2
TARGET_TILE = 2048

# ##>: Spawn defaults (90% for 2, 10% for 4).
SPAWN_VALUES = (2, 4)
SPAWN_PROBABILITY = 0.9

# ##>: Recent-run history length kept by a session.
HISTORY_LIMIT = 5

# ##>: Input defaults.
SHAKE_THRESHOLD = 1.8
SHAKE_DEBOUNCE_MS = 2200
DRAG_THRESHOLD = 12


@dataclass(frozen=True)
class GameConfig:
    """
    Rules configuration of a game session.

    Attributes
    ----------
    board_size : int
        Number of rows and columns of the square board.
    initial_tiles : int
        Number of tiles placed on a fresh board.
    target_tile : int
        Tile value that sets the sticky win flag.
    spawn_values : tuple[int, int]
        The common and the rare value of a spawned tile.
    spawn_probability : float
        Probability of spawning the common value.
    history_limit : int
        Maximum number of recent runs kept, oldest dropped first.
    """

    board_size: int = BOARD_SIZE
    initial_tiles: int = INITIAL_TILES
    target_tile: int = TARGET_TILE
    spawn_values: tuple[int, int] = SPAWN_VALUES
    spawn_probability: float = SPAWN_PROBABILITY
    history_limit: int = HISTORY_LIMIT

    def __post_init__(self):
        if self.board_size < 2:
            raise ValueError(f'board_size must be >= 2, got {self.board_size}')
        if not 0 <= self.initial_tiles <= self.board_size**2:
            raise ValueError(f'initial_tiles must be in [0, {self.board_size**2}], got {self.initial_tiles}')
        if self.target_tile < 2:
            raise ValueError(f'target_tile must be >= 2, got {self.target_tile}')
        if not 0.0 <= self.spawn_probability <= 1.0:
            raise ValueError(f'spawn_probability must be in [0, 1], got {self.spawn_probability}')
        if self.history_limit < 1:
            raise ValueError(f'history_limit must be >= 1, got {self.history_limit}')

    @property
    def cell_count(self) -> int:
        """Total number of cells on the board."""
        return self.board_size * self.board_size


@dataclass(frozen=True)
class InputConfig:
    """
    Thresholds used to turn raw input events into game commands.

    Attributes
    ----------
    shake_threshold : float
        Acceleration magnitude above which a reading counts as a shake.
    shake_debounce_ms : int
        Minimum interval between two accepted shakes.
    drag_threshold : float
        Minimum drag distance, on either axis, for a swipe to count.
    """

    shake_threshold: float = SHAKE_THRESHOLD
    shake_debounce_ms: int = SHAKE_DEBOUNCE_MS
    drag_threshold: float = DRAG_THRESHOLD

    def __post_init__(self):
        if self.shake_threshold <= 0:
            raise ValueError(f'shake_threshold must be > 0, got {self.shake_threshold}')
        if self.shake_debounce_ms < 0:
            raise ValueError(f'shake_debounce_ms must be >= 0, got {self.shake_debounce_ms}')
        if self.drag_threshold <= 0:
            raise ValueError(f'drag_threshold must be > 0, got {self.drag_threshold}')
