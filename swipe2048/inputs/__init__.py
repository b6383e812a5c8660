# -*- coding: utf-8 -*-
"""
Input collaborators: keyboard and drag mapping to swipe directions, and shake detection for new games.
"""

from .controls import KEY_BINDINGS, direction_from_drag, direction_from_key
from .shake import SensorVector, ShakeChannel, ShakeDetector

__all__ = [
    "KEY_BINDINGS",
    "SensorVector",
    "ShakeChannel",
    "ShakeDetector",
    "direction_from_drag",
    "direction_from_key",
]
