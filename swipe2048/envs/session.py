"""2048 game session: the state a renderer shows and the transitions driven by player input."""

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable

from swipe2048.config import GameConfig
from swipe2048.core.gameboard import contains_target_tile, has_available_moves, validate_board
from swipe2048.core.gamemove import MoveResult, move_tiles
from swipe2048.core.identifier import IdentifierAllocator
from swipe2048.core.spawner import NumpyRandomSource, RandomSource, initial_tiles, spawn_tile
from swipe2048.core.tile import Board, Direction
from swipe2048.envs.history import RecentRun, ResetReason, RunHistory, utc_now
from swipe2048.inputs.shake import ShakeChannel

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class SessionStatus(str, Enum):
    """
    Coarse state of a session.

    WON does not block input; GAME_OVER ignores moves until the next new game.
    """

    PLAYING = 'playing'
    WON = 'won'
    GAME_OVER = 'game_over'


@dataclass(frozen=True)
class SessionSnapshot:
    """Everything a renderer needs to draw one frame."""

    tiles: Board
    score: int
    best_score: int
    has_won: bool
    game_over: bool
    status: SessionStatus
    history: tuple[RecentRun, ...]


class GameSession:
    """
    2048 game session.

    This class holds the current board, the score, the best score across rounds, the win and game over
    flags and the recent-run history, and applies one complete transition per input.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        random_source: RandomSource | None = None,
        clock: Callable[[], datetime] = utc_now,
        tiles: Board | None = None,
        score: int = 0,
    ):
        """
        Initialize the session with a fresh board, or on a given one.

        Parameters
        ----------
        config : GameConfig, optional
            Rules configuration (default is the standard 4x4 game).
        random_source : RandomSource, optional
            Source of spawn draws (default is an unseeded numpy generator).
        clock : Callable[[], datetime], optional
            Source of history timestamps (default is the current UTC time).
        tiles : Board, optional
            Starting tiles. A fresh board is dealt when omitted.
        score : int, optional
            Starting score, used with ``tiles`` (default is 0).

        Raises
        ------
        ValueError
            If ``tiles`` breaks a board invariant or ``score`` is negative.
        """
        self.config = config or GameConfig()
        self._random = random_source or NumpyRandomSource()
        self._allocator = IdentifierAllocator()
        self._history = RunHistory(limit=self.config.history_limit, clock=clock)

        self._tiles: Board = ()
        self._score = 0
        self._best_score = 0
        self._has_won = False
        self._game_over = False

        if tiles is None:
            self._start()
        else:
            self._load(tuple(tiles), score)

    @property
    def tiles(self) -> Board:
        return self._tiles

    @property
    def score(self) -> int:
        return self._score

    @property
    def best_score(self) -> int:
        return self._best_score

    @property
    def has_won(self) -> bool:
        return self._has_won

    @property
    def game_over(self) -> bool:
        return self._game_over

    @property
    def history(self) -> tuple[RecentRun, ...]:
        """Recent runs, most recent first."""
        return self._history.runs

    @property
    def status(self) -> SessionStatus:
        if self._game_over:
            return SessionStatus.GAME_OVER
        if self._has_won:
            return SessionStatus.WON
        return SessionStatus.PLAYING

    def snapshot(self) -> SessionSnapshot:
        """Capture the current state for rendering."""
        return SessionSnapshot(
            tiles=self._tiles,
            score=self._score,
            best_score=self._best_score,
            has_won=self._has_won,
            game_over=self._game_over,
            status=self.status,
            history=self.history,
        )

    def new_game(self, reason: ResetReason = ResetReason.MANUAL) -> Board:
        """
        Archive the current run and start over.

        Parameters
        ----------
        reason : ResetReason, optional
            What triggered the reset (default is manual).

        Returns
        -------
        Board
            The fresh board.

        Notes
        -----
        - A run is archived only if its score is positive.
        - The best score survives the reset.
        """
        reason = ResetReason(reason)
        archived = self._history.record(self._score, reason)
        _logger.info(
            'New game (%s), archived score: %s', reason.value, archived.score if archived is not None else 'none'
        )
        return self._start()

    def move(self, direction: Direction) -> MoveResult:
        """
        Apply a swipe.

        Parameters
        ----------
        direction : Direction
            Direction of the swipe.

        Returns
        -------
        MoveResult
            The collapse outcome, before the spawn. When the game is over or the board does not change,
            ``moved`` is False and the session is left untouched.
        """
        direction = Direction(direction)
        if self._game_over:
            _logger.debug('Ignoring %s: game over', direction.value)
            return MoveResult(tiles=self._tiles, moved=False, score=0)

        result = move_tiles(self._tiles, direction, self.config.board_size)
        if not result.moved:
            _logger.debug('Ignoring %s: board unchanged', direction.value)
            return result

        self._tiles = spawn_tile(
            result.tiles,
            self._allocator,
            self._random,
            self.config.board_size,
            self.config.spawn_values,
            self.config.spawn_probability,
        )
        self._score += result.score
        self._best_score = max(self._best_score, self._score)
        _logger.debug('Moved %s, gained %d, score %d', direction.value, result.score, self._score)

        if not self._has_won and contains_target_tile(self._tiles, self.config.target_tile):
            self._has_won = True
            _logger.info('Reached %d with score %d', self.config.target_tile, self._score)

        self._game_over = not has_available_moves(self._tiles, self.config.board_size)
        if self._game_over:
            _logger.info('Game over with score %d', self._score)
        return result

    def bind_shake(self, channel: ShakeChannel) -> None:
        """Start a new game on every shake published by ``channel``."""
        channel.subscribe(lambda: self.new_game(ResetReason.SENSOR))

    def _start(self) -> Board:
        self._allocator.reset()
        self._tiles = initial_tiles(
            self._allocator,
            self._random,
            self.config.board_size,
            self.config.initial_tiles,
            self.config.spawn_values,
            self.config.spawn_probability,
        )
        self._score = 0
        self._has_won = False
        self._game_over = False
        return self._tiles

    def _load(self, tiles: Board, score: int) -> None:
        validate_board(tiles, self.config.board_size)
        if score < 0:
            raise ValueError(f'score must be >= 0, got {score}')

        self._allocator.advance_to(max((tile.id for tile in tiles), default=0))
        self._tiles = tiles
        self._score = score
        self._best_score = score
        self._has_won = contains_target_tile(tiles, self.config.target_tile)
        self._game_over = not has_available_moves(tiles, self.config.board_size)
