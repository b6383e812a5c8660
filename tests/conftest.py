"""Shared fixtures for the rules engine tests."""

from collections import deque

import pytest


class ScriptedRandom:
    """Random source replaying scripted draws; exhausted scripts pick cell 0 and the common value."""

    def __init__(self, picks=(), chances=()):
        self.picks = deque(picks)
        self.chances = deque(chances)

    def pick(self, count: int) -> int:
        index = self.picks.popleft() if self.picks else 0
        assert 0 <= index < count
        return index

    def chance(self, probability: float) -> bool:
        return self.chances.popleft() if self.chances else True


@pytest.fixture
def scripted():
    """Factory for deterministic random sources."""
    return ScriptedRandom
