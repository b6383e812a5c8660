"""
Shake detection on a 3-axis accelerometer feed.

The detector turns raw readings into debounced shake events and publishes them on a single channel
that a game session subscribes to.
"""

import logging
from typing import Callable, NamedTuple

from numpy import array
from numpy.linalg import norm

from swipe2048.config import SHAKE_DEBOUNCE_MS, SHAKE_THRESHOLD, InputConfig

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class SensorVector(NamedTuple):
    """One accelerometer reading, in g."""

    x: float
    y: float
    z: float

    @property
    def magnitude(self) -> float:
        """Euclidean norm of the reading."""
        return float(norm(array(self, dtype=float)))


class ShakeChannel:
    """
    Delivers shake events to one subscriber.

    Subscribing again replaces the previous subscriber.
    """

    def __init__(self):
        self._subscriber: Callable[[], object] | None = None

    @property
    def subscribed(self) -> bool:
        return self._subscriber is not None

    def subscribe(self, handler: Callable[[], object]) -> None:
        self._subscriber = handler

    def unsubscribe(self) -> None:
        self._subscriber = None

    def publish(self) -> bool:
        """
        Deliver one shake.

        Returns
        -------
        bool
            True if a subscriber received the event.
        """
        if self._subscriber is None:
            return False
        self._subscriber()
        return True


class ShakeDetector:
    """
    Debounced shake detector.

    Parameters
    ----------
    channel : ShakeChannel
        Channel receiving accepted shakes.
    threshold : float, optional
        Magnitude a reading must exceed to count as a shake (default is 1.8).
    debounce_ms : int, optional
        Minimum interval between two accepted shakes (default is 2200).
    """

    def __init__(self, channel: ShakeChannel, threshold: float = SHAKE_THRESHOLD, debounce_ms: int = SHAKE_DEBOUNCE_MS):
        self.channel = channel
        self.threshold = threshold
        self.debounce_ms = debounce_ms
        self._last_shake_ms: float | None = None
        self._last_reading = SensorVector(0.0, 0.0, 0.0)

    @classmethod
    def from_config(cls, channel: ShakeChannel, config: InputConfig) -> 'ShakeDetector':
        """Build a detector with the shake settings of ``config``."""
        return cls(channel, threshold=config.shake_threshold, debounce_ms=config.shake_debounce_ms)

    @property
    def last_reading(self) -> SensorVector:
        """The latest reading fed to the detector."""
        return self._last_reading

    def feed(self, vector: SensorVector, now_ms: float) -> bool:
        """
        Process one reading.

        Parameters
        ----------
        vector : SensorVector
            The accelerometer reading.
        now_ms : float
            Timestamp of the reading, in milliseconds.

        Returns
        -------
        bool
            True if the reading was accepted as a shake and published.
        """
        self._last_reading = SensorVector(*vector)
        if self._last_reading.magnitude <= self.threshold:
            return False
        if self._last_shake_ms is not None and now_ms - self._last_shake_ms <= self.debounce_ms:
            return False

        self._last_shake_ms = now_ms
        _logger.debug('Shake accepted at %.0f ms (magnitude %.2f)', now_ms, self._last_reading.magnitude)
        self.channel.publish()
        return True
