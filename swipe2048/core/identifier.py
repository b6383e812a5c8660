"""Tile identifier allocation for one game session."""


class IdentifierAllocator:
    """
    Issues increasing tile identifiers, starting at 1.

    A session owns one allocator and resets it when a new game starts; identifiers are never
    reused between two resets.
    """

    def __init__(self, start: int = 0):
        self._counter = start

    @property
    def counter(self) -> int:
        """The last identifier handed out, 0 if none."""
        return self._counter

    def next_id(self) -> int:
        """Allocate the next identifier."""
        self._counter += 1
        return self._counter

    def reset(self) -> None:
        """Restart numbering for a new game."""
        self._counter = 0

    def advance_to(self, identifier: int) -> None:
        """Make sure later identifiers are greater than ``identifier``."""
        self._counter = max(self._counter, identifier)
