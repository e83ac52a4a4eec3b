"""Cursor and selection positions on the terminal grid."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class TermPos:
    """A column/row position.

    Positions are ordered row first, then column, which is reading order.
    """

    x: int = 0
    y: int = 0

    def set_to(self, x: int, y: int) -> None:
        """Move the position to column ``x`` and row ``y``."""
        self.x = x
        self.y = y

    def _key(self) -> tuple[int, int]:
        return (self.y, self.x)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TermPos):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, TermPos):
            return NotImplemented
        return self._key() != other._key()

    def __le__(self, other: TermPos) -> bool:
        if not isinstance(other, TermPos):
            return NotImplemented
        return self._key() <= other._key()

    def __ge__(self, other: TermPos) -> bool:
        if not isinstance(other, TermPos):
            return NotImplemented
        return self._key() >= other._key()

    def __lt__(self, other: TermPos) -> bool:
        if not isinstance(other, TermPos):
            return NotImplemented
        return self._key() < other._key()

    def __gt__(self, other: TermPos) -> bool:
        if not isinstance(other, TermPos):
            return NotImplemented
        return self._key() > other._key()

    __hash__ = None  # mutable