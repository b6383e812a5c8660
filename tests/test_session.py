"""
Tests for the game session state machine.

These tests drive complete transitions (collapse, spawn and flag updates) with scripted random draws.
"""

import logging
from datetime import datetime, timezone

import numpy as np
import pytest

from swipe2048.config import GameConfig
from swipe2048.core import Direction, IdentifierAllocator, NumpyRandomSource, Tile, from_grid, validate_board
from swipe2048.envs import GameSession, RecentRun, ResetReason, SessionStatus
from swipe2048.inputs import SensorVector, ShakeChannel, ShakeDetector

FIXED_TIME = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def fixed_clock():
    return FIXED_TIME


@pytest.fixture
def merge_session(scripted):
    """A session with two 2s side by side on the top row."""
    tiles = (Tile(id=1, value=2, row=0, col=0), Tile(id=2, value=2, row=0, col=1))
    return GameSession(random_source=scripted(picks=[0], chances=[True]), clock=fixed_clock, tiles=tiles)


class TestNewSession:
    """Tests for the initial state."""

    def test_fresh_board(self, scripted):
        session = GameSession(random_source=scripted(picks=[0, 0], chances=[True, True]))
        assert session.tiles == (
            Tile(id=1, value=2, row=0, col=0, is_new=True),
            Tile(id=2, value=2, row=0, col=1, is_new=True),
        )
        assert session.score == 0
        assert session.best_score == 0
        assert session.status is SessionStatus.PLAYING
        assert session.history == ()

    def test_seeded_board(self):
        session = GameSession(random_source=NumpyRandomSource(seed=3))
        assert len(session.tiles) == 2
        validate_board(session.tiles)

    def test_invalid_tiles(self):
        with pytest.raises(ValueError):
            GameSession(tiles=(Tile(id=1, value=2, row=0, col=0), Tile(id=2, value=2, row=0, col=0)))

    def test_negative_score(self):
        with pytest.raises(ValueError):
            GameSession(tiles=(), score=-1)

    def test_locked_board_is_over(self):
        grid = np.array([[2, 4, 8, 16], [32, 64, 128, 256], [512, 1024, 2048, 4096], [8192, 16384, 32768, 65536]])
        session = GameSession(tiles=from_grid(grid, IdentifierAllocator()), score=10)
        assert session.game_over
        assert session.has_won
        assert session.status is SessionStatus.GAME_OVER
        assert session.best_score == 10


class TestMove:
    """Tests for GameSession.move."""

    def test_merge_and_spawn(self, merge_session):
        result = merge_session.move(Direction.LEFT)
        assert result.moved
        assert result.score == 4
        assert merge_session.tiles == (
            Tile(id=1, value=4, row=0, col=0, just_merged=True),
            Tile(id=3, value=2, row=0, col=1, is_new=True),
        )
        assert merge_session.score == 4
        assert merge_session.best_score == 4

    def test_no_op_leaves_session_untouched(self, scripted):
        source = scripted(picks=[0], chances=[True])
        tiles = (Tile(id=1, value=2, row=0, col=3, is_new=True),)
        session = GameSession(random_source=source, tiles=tiles, score=8)
        before = session.snapshot()

        result = session.move(Direction.RIGHT)

        assert not result.moved
        assert session.snapshot() == before
        assert session.tiles is before.tiles
        assert list(source.picks) == [0]

    def test_string_direction(self, merge_session):
        assert merge_session.move('left').moved

    def test_unknown_direction(self, merge_session):
        with pytest.raises(ValueError):
            merge_session.move('diagonal')

    def test_move_ends_game(self, scripted):
        tiles = (
            Tile(id=1, value=16, row=0, col=0),
            Tile(id=2, value=4, row=1, col=0),
            Tile(id=3, value=8, row=1, col=1),
        )
        session = GameSession(
            config=GameConfig(board_size=2), random_source=scripted(picks=[0], chances=[True]), tiles=tiles
        )
        assert session.move(Direction.RIGHT).moved
        assert session.tiles == (
            Tile(id=1, value=16, row=0, col=1),
            Tile(id=2, value=4, row=1, col=0),
            Tile(id=3, value=8, row=1, col=1),
            Tile(id=4, value=2, row=0, col=0, is_new=True),
        )
        assert session.game_over
        assert session.status is SessionStatus.GAME_OVER

    def test_game_over_ignores_moves(self, scripted):
        tiles = (
            Tile(id=1, value=2, row=0, col=0),
            Tile(id=2, value=16, row=0, col=1),
            Tile(id=3, value=4, row=1, col=0),
            Tile(id=4, value=8, row=1, col=1),
        )
        session = GameSession(config=GameConfig(board_size=2), random_source=scripted(), tiles=tiles)
        assert session.game_over
        for direction in Direction:
            result = session.move(direction)
            assert not result.moved
            assert result.score == 0
            assert session.tiles is tiles

    def test_win_is_sticky_and_does_not_block(self, scripted):
        tiles = (Tile(id=1, value=1024, row=0, col=0), Tile(id=2, value=1024, row=0, col=1))
        session = GameSession(random_source=scripted(picks=[0, 0], chances=[True, True]), tiles=tiles)

        session.move(Direction.LEFT)
        assert session.has_won
        assert session.status is SessionStatus.WON
        assert session.score == 2048

        assert session.move(Direction.DOWN).moved
        assert session.has_won

    def test_game_over_log(self, scripted, caplog):
        tiles = (
            Tile(id=1, value=16, row=0, col=0),
            Tile(id=2, value=4, row=1, col=0),
            Tile(id=3, value=8, row=1, col=1),
        )
        session = GameSession(
            config=GameConfig(board_size=2), random_source=scripted(picks=[0], chances=[True]), tiles=tiles
        )
        with caplog.at_level(logging.INFO, logger='swipe2048.envs.session'):
            session.move(Direction.RIGHT)
        assert 'Game over' in caplog.text

    def test_random_play_keeps_invariants(self):
        session = GameSession(random_source=NumpyRandomSource(seed=2048))
        directions = list(Direction)
        for step in range(400):
            if session.game_over:
                session.new_game()
            score, best = session.score, session.best_score
            before = sum(tile.value for tile in session.tiles)

            result = session.move(directions[step % 4])

            validate_board(session.tiles)
            assert session.score >= score
            assert session.best_score >= max(best, session.score)
            if result.moved:
                assert sum(tile.value for tile in result.tiles) == before
                assert len(session.tiles) == len(result.tiles) + 1
            else:
                assert session.score == score


class TestNewGame:
    """Tests for GameSession.new_game."""

    def test_archives_previous_score(self, scripted):
        tiles = (Tile(id=5, value=8, row=2, col=2),)
        session = GameSession(random_source=scripted(), clock=fixed_clock, tiles=tiles, score=120)

        session.new_game(ResetReason.SENSOR)

        assert session.history == (
            RecentRun(id=1, score=120, timestamp=FIXED_TIME, triggered_by=ResetReason.SENSOR),
        )
        assert session.score == 0
        assert session.best_score == 120
        assert [tile.id for tile in session.tiles] == [1, 2]
        assert session.status is SessionStatus.PLAYING

    def test_zero_score_is_not_archived(self, scripted):
        session = GameSession(random_source=scripted())
        session.new_game(ResetReason.MENU)
        assert session.history == ()

    def test_most_recent_first(self, merge_session):
        merge_session.move(Direction.LEFT)
        merge_session.new_game('manual')
        merge_session.move(Direction.LEFT)
        merge_session.new_game(ResetReason.MENU)

        reasons = [run.triggered_by for run in merge_session.history]
        assert reasons == [ResetReason.MENU, ResetReason.MANUAL]
        assert merge_session.history[1].score == 4

    def test_clears_game_over(self, scripted):
        tiles = (
            Tile(id=1, value=2, row=0, col=0),
            Tile(id=2, value=16, row=0, col=1),
            Tile(id=3, value=4, row=1, col=0),
            Tile(id=4, value=8, row=1, col=1),
        )
        session = GameSession(config=GameConfig(board_size=2), random_source=scripted(), tiles=tiles, score=30)
        session.new_game()
        assert not session.game_over
        assert not session.has_won
        assert len(session.tiles) == 2
        assert session.history[0].score == 30

    def test_unknown_reason(self, scripted):
        session = GameSession(random_source=scripted())
        with pytest.raises(ValueError):
            session.new_game('timeout')


class TestShakeBinding:
    """Tests for shake triggered resets."""

    def test_shake_starts_new_game(self, scripted):
        session = GameSession(random_source=scripted(), clock=fixed_clock, tiles=(), score=64)
        channel = ShakeChannel()
        session.bind_shake(channel)
        detector = ShakeDetector(channel)

        assert detector.feed(SensorVector(2.0, 0.5, 0.5), now_ms=1000)

        assert session.history[0].triggered_by is ResetReason.SENSOR
        assert session.history[0].score == 64
        assert session.score == 0

    def test_snapshot(self, merge_session):
        merge_session.move(Direction.LEFT)
        snapshot = merge_session.snapshot()
        assert snapshot.tiles == merge_session.tiles
        assert snapshot.score == 4
        assert snapshot.best_score == 4
        assert snapshot.status is SessionStatus.PLAYING
        assert snapshot.history == ()
