from datetime import datetime, timedelta, timezone
from unittest import TestCase, main

from swipe2048.config import GameConfig, InputConfig
from swipe2048.envs import ResetReason, RunHistory


class TestRunHistory(TestCase):
    def setUp(self):
        self.now = datetime(2026, 1, 1, tzinfo=timezone.utc)
        self.history = RunHistory(limit=3, clock=self.tick)

    def tick(self):
        self.now += timedelta(minutes=1)
        return self.now

    def test_most_recent_first(self):
        """
        New records are inserted at the front.
        """
        self.history.record(10, ResetReason.MANUAL)
        self.history.record(20, ResetReason.SENSOR)
        self.assertEqual([run.score for run in self.history], [20, 10])
        self.assertEqual([run.id for run in self.history.runs], [2, 1])
        self.assertGreater(self.history.runs[0].timestamp, self.history.runs[1].timestamp)

    def test_oldest_is_evicted(self):
        """
        The history keeps the latest entries only.
        """
        for score in (1, 2, 3, 4, 5):
            self.history.record(score, ResetReason.MENU)
        self.assertEqual(len(self.history), 3)
        self.assertEqual([run.score for run in self.history], [5, 4, 3])
        self.assertEqual(self.history.limit, 3)

    def test_non_positive_score_is_skipped(self):
        self.assertIsNone(self.history.record(0, ResetReason.MANUAL))
        self.assertEqual(self.history.runs, ())

    def test_reason_from_string(self):
        run = self.history.record(16, 'sensor')
        self.assertIs(run.triggered_by, ResetReason.SENSOR)

    def test_labels(self):
        self.assertEqual(ResetReason.MANUAL.label, 'Manual')
        self.assertEqual(ResetReason.SENSOR.label, 'Shake reset')
        self.assertEqual(ResetReason.MENU.label, 'Menu action')

    def test_invalid_limit(self):
        with self.assertRaises(ValueError):
            RunHistory(limit=0)


class TestConfig(TestCase):
    def test_defaults(self):
        config = GameConfig()
        self.assertEqual(config.board_size, 4)
        self.assertEqual(config.cell_count, 16)
        self.assertEqual(config.target_tile, 2048)
        self.assertEqual(config.spawn_values, (2, 4))
        self.assertEqual(InputConfig().shake_debounce_ms, 2200)

    def test_invalid_game_config(self):
        for kwargs in ({'board_size': 1}, {'initial_tiles': 17}, {'spawn_probability': 1.5}, {'history_limit': 0}):
            with self.assertRaises(ValueError):
                GameConfig(**kwargs)

    def test_invalid_input_config(self):
        for kwargs in ({'shake_threshold': 0}, {'shake_debounce_ms': -1}, {'drag_threshold': 0}):
            with self.assertRaises(ValueError):
                InputConfig(**kwargs)


if __name__ == '__main__':
    main()
