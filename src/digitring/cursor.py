"""Bidirectional mutating cursor over a DigitRing.

The cursor sits between two elements: `next()` returns the element after it
and `previous()` the element before it. Every mutation is delegated to the
ring's index-based primitives, so the cursor never touches nodes itself.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from digitring.errors import IllegalState

if TYPE_CHECKING:
    from digitring.ring import DigitRing


class DigitCursor:
    """List-iterator style cursor.

    Only mutations made through this cursor keep its position consistent.
    Changing the ring by any other route while the cursor is live is
    undefined behaviour and is not detected.

    Attributes:
        ring: The ring being traversed.
    """

    def __init__(self, ring: DigitRing, index: int = 0) -> None:
        self.ring = ring
        self._cursor = index
        self._last_returned = -1

    def __iter__(self) -> DigitCursor:
        return self

    def __next__(self) -> int:
        return self.next()

    def has_next(self) -> bool:
        return self._cursor < self.ring.size()

    def next(self) -> int:
        """Return the element after the cursor and move past it."""
        if not self.has_next():
            raise StopIteration
        self._last_returned = self._cursor
        self._cursor += 1
        return self.ring.get(self._last_returned)

    def has_previous(self) -> bool:
        return self._cursor > 0

    def previous(self) -> int:
        """Return the element before the cursor and move back over it."""
        if not self.has_previous():
            raise StopIteration
        self._cursor -= 1
        self._last_returned = self._cursor
        return self.ring.get(self._cursor)

    def next_index(self) -> int:
        return self._cursor

    def previous_index(self) -> int:
        return self._cursor - 1

    def _require_last_returned(self) -> int:
        if self._last_returned < 0:
            msg = "No current element: call next() or previous() first"
            raise IllegalState(msg)
        return self._last_returned

    def remove(self) -> None:
        """Remove the element last returned by `next` or `previous`."""
        index = self._require_last_returned()
        self.ring.remove_at(index)
        if index < self._cursor:
            self._cursor -= 1
        self._last_returned = -1

    def set(self, value: int) -> None:
        """Replace the element last returned by `next` or `previous`."""
        self.ring.set(self._require_last_returned(), value)

    def add(self, value: int) -> None:
        """Insert `value` at the cursor and step past it."""
        self.ring.insert(self._cursor, value)
        self._cursor += 1
        self._last_returned = -1


__all__ = ["DigitCursor"]
