"""Bounded log of finished runs, most recent first."""

from collections import deque
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Iterator

from swipe2048.config import HISTORY_LIMIT


class ResetReason(str, Enum):
    """What triggered a new game."""

    MANUAL = 'manual'
    SENSOR = 'sensor'
    MENU = 'menu'

    @property
    def label(self) -> str:
        """Human readable description of the trigger."""
        return _LABELS[self]


_LABELS = {ResetReason.MANUAL: 'Manual', ResetReason.SENSOR: 'Shake reset', ResetReason.MENU: 'Menu action'}


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class RecentRun:
    """
    A finished run.

    Attributes
    ----------
    id : int
        Increasing record number within the history.
    score : int
        Score of the run when it was abandoned.
    timestamp : datetime
        When the run was archived.
    triggered_by : ResetReason
        What started the next game.
    """

    id: int
    score: int
    timestamp: datetime
    triggered_by: ResetReason


class RunHistory:
    """
    Recent runs, capped to ``limit`` entries.

    Parameters
    ----------
    limit : int, optional
        Maximum number of kept runs (default is 5). The oldest run is dropped first.
    clock : Callable[[], datetime], optional
        Source of record timestamps (default is the current UTC time).
    """

    def __init__(self, limit: int = HISTORY_LIMIT, clock: Callable[[], datetime] = utc_now):
        if limit < 1:
            raise ValueError(f'limit must be >= 1, got {limit}')
        self._runs: deque[RecentRun] = deque(maxlen=limit)
        self._clock = clock
        self._sequence = 0

    @property
    def limit(self) -> int:
        return self._runs.maxlen

    @property
    def runs(self) -> tuple[RecentRun, ...]:
        """The kept runs, most recent first."""
        return tuple(self._runs)

    def record(self, score: int, reason: ResetReason) -> RecentRun | None:
        """
        Archive the score of an abandoned run.

        Parameters
        ----------
        score : int
            Score of the run.
        reason : ResetReason
            What triggered the reset.

        Returns
        -------
        RecentRun or None
            The new record, or None when the score is not positive and nothing was stored.
        """
        if score <= 0:
            return None

        self._sequence += 1
        run = RecentRun(id=self._sequence, score=score, timestamp=self._clock(), triggered_by=ResetReason(reason))
        self._runs.appendleft(run)
        return run

    def __len__(self) -> int:
        return len(self._runs)

    def __iter__(self) -> Iterator[RecentRun]:
        return iter(self._runs)
