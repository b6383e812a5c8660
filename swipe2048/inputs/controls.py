"""Mapping of keyboard and drag input to swipe directions."""

from swipe2048.config import DRAG_THRESHOLD
from swipe2048.core.tile import Direction

# ##: Browser arrow keys and plain names.
KEY_BINDINGS = {
    'ArrowUp': Direction.UP,
    'ArrowDown': Direction.DOWN,
    'ArrowLeft': Direction.LEFT,
    'ArrowRight': Direction.RIGHT,
    'up': Direction.UP,
    'down': Direction.DOWN,
    'left': Direction.LEFT,
    'right': Direction.RIGHT,
}


def direction_from_key(key: str) -> Direction | None:
    """Direction bound to ``key``, None for unbound keys."""
    return KEY_BINDINGS.get(key)


def direction_from_drag(dx: float, dy: float, threshold: float = DRAG_THRESHOLD) -> Direction | None:
    """
    Direction of a released drag.

    Parameters
    ----------
    dx : float
        Horizontal displacement, positive to the right.
    dy : float
        Vertical displacement, positive downward.
    threshold : float, optional
        Displacement both axes must stay under for the drag to be ignored (default is 12).

    Returns
    -------
    Direction or None
        The direction of the dominant axis, or None for a drag too short to count.
    """
    if abs(dx) < threshold and abs(dy) < threshold:
        return None

    if abs(dx) > abs(dy):
        return Direction.RIGHT if dx > 0 else Direction.LEFT
    return Direction.DOWN if dy > 0 else Direction.UP
