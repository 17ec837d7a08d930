"""DigitRing: a circular singly linked list of positional digits.

Logical index 0 is the head node; index ``i`` is reached by following
``next`` ``i`` times from the head, and the last node always links back to
the head. No tail pointer is kept, so every operation that needs the tail
(appending, inserting or removing at index 0, `shift_right`) walks the chain.

The numeric methods (`to_int`, `change_scale`, `additional_operation`) only
use the public `size()`/`get()` contract through `digitring.codec`.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSequence
from typing import TYPE_CHECKING, overload

from digitring.codec import (
    DigitSource,
    from_digits,
    parse_decimal,
    to_decimal_string,
    to_digits,
)
from digitring.errors import DivisionByZero, IndexOutOfRange, InvalidDigit

if TYPE_CHECKING:
    from digitring.cursor import DigitCursor

DEFAULT_BASE = 3
SCALE_BASE = 8


def _is_digit_type(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class _Node:
    """One digit and the link to the logically-next node."""

    __slots__ = ("next", "value")

    def __init__(self, value: int) -> None:
        self.value = value
        self.next: _Node = self


class DigitRing(MutableSequence[int]):
    """Ordered sequence of digits in ``[0, base)`` stored as a ring.

    Not thread-safe; callers must serialize access.
    """

    def __init__(self, base: int = DEFAULT_BASE) -> None:
        if not _is_digit_type(base) or base < 2:
            msg = f"Base must be an integer >= 2, got {base!r}"
            raise ValueError(msg)
        self.base = base
        self._head: _Node | None = None
        self._size = 0

    # ------------------------------------------------------------------ #
    # construction
    # ------------------------------------------------------------------ #

    @classmethod
    def from_decimal(cls, text: str, base: int = DEFAULT_BASE) -> DigitRing:
        """Seed a ring from a decimal numeral (optional leading ``+``).

        Empty or whitespace-only text yields an empty ring.
        """
        value = parse_decimal(text)
        if value is None:
            return cls(base)
        return cls.from_value(value, base)

    @classmethod
    def from_value(cls, value: int, base: int = DEFAULT_BASE) -> DigitRing:
        """Seed a ring with the base-`base` digits of a non-negative int."""
        return cls.from_digits(to_digits(value, base), base)

    @classmethod
    def from_digits(cls, digits: Iterable[int], base: int = DEFAULT_BASE) -> DigitRing:
        """Build a ring holding `digits` in order.

        Nodes are linked in one pass rather than through `add`, which would
        walk to the tail for every digit.
        """
        ring = cls(base)
        tail = None
        for value in digits:
            node = _Node(ring._check_digit(value))
            if tail is None:
                ring._head = node
            else:
                tail.next = node
                node.next = ring._head  # type: ignore[assignment]
            tail = node
            ring._size += 1
        return ring

    # ------------------------------------------------------------------ #
    # internals
    # ------------------------------------------------------------------ #

    def _check_digit(self, value: object) -> int:
        if not _is_digit_type(value) or not 0 <= value < self.base:  # type: ignore[operator]
            msg = f"Digit {value!r} out of range for base {self.base}"
            raise InvalidDigit(msg)
        return value

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._size:
            msg = f"Index {index} out of range for size {self._size}"
            raise IndexOutOfRange(msg)

    def _node_at(self, index: int) -> _Node:
        assert self._head is not None
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def _tail(self) -> _Node:
        return self._node_at(self._size - 1)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        for _ in range(self._size):
            assert node is not None
            yield node
            node = node.next

    # ------------------------------------------------------------------ #
    # accessors
    # ------------------------------------------------------------------ #

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def get(self, index: int) -> int:
        """Return the digit at `index` (``0 <= index < size``)."""
        self._check_index(index)
        return self._node_at(index).value

    @overload
    def __getitem__(self, index: int) -> int: ...

    @overload
    def __getitem__(self, index: slice) -> DigitRing: ...

    def __getitem__(self, index: int | slice) -> int | DigitRing:
        if isinstance(index, slice):
            start, stop, step = index.indices(self._size)
            if step != 1:
                msg = "DigitRing slices do not support a step"
                raise ValueError(msg)
            return self.sub_list(start, max(start, stop))
        return self.get(index)

    def contains(self, value: object) -> bool:
        return self.index_of(value) >= 0

    def __contains__(self, value: object) -> bool:
        return self.contains(value)

    def contains_all(self, values: Iterable[object]) -> bool:
        return all(self.contains(v) for v in values)

    def index_of(self, value: object) -> int:
        """Index of the first occurrence of `value`, or -1."""
        if not _is_digit_type(value):
            return -1
        for i, node in enumerate(self._nodes()):
            if node.value == value:
                return i
        return -1

    def last_index_of(self, value: object) -> int:
        """Index of the last occurrence of `value`, or -1."""
        if not _is_digit_type(value):
            return -1
        result = -1
        for i, node in enumerate(self._nodes()):
            if node.value == value:
                result = i
        return result

    def to_list(self) -> list[int]:
        return [node.value for node in self._nodes()]

    def sub_list(self, from_index: int, to_index: int) -> DigitRing:
        """Copy ``[from_index, to_index)`` into a new ring of the same base."""
        if from_index < 0 or to_index > self._size or from_index > to_index:
            msg = (
                f"Invalid range [{from_index}, {to_index}) for size {self._size}"
            )
            raise IndexOutOfRange(msg)
        sub = DigitRing(self.base)
        for i in range(from_index, to_index):
            sub.add(self.get(i))
        return sub

    # ------------------------------------------------------------------ #
    # mutation
    # ------------------------------------------------------------------ #

    def add(self, value: int) -> bool:
        """Append `value` at the tail. Walks the whole chain to find it."""
        node = _Node(self._check_digit(value))
        if self._head is None:
            self._head = node
        else:
            tail = self._tail()
            tail.next = node
            node.next = self._head
        self._size += 1
        return True

    def insert(self, index: int, value: int) -> None:
        """Insert `value` before logical `index` (``0 <= index <= size``)."""
        digit = self._check_digit(value)
        if not 0 <= index <= self._size:
            msg = f"Index {index} out of range for insertion into size {self._size}"
            raise IndexOutOfRange(msg)

        if self._head is None or index == self._size:
            self.add(digit)
            return

        node = _Node(digit)
        if index == 0:
            # the tail must keep pointing at whatever is index 0
            tail = self._tail()
            node.next = self._head
            self._head = node
            tail.next = node
        else:
            prev = self._node_at(index - 1)
            node.next = prev.next
            prev.next = node
        self._size += 1

    def set(self, index: int, value: int) -> int:
        """Replace the digit at `index`; return the previous digit."""
        digit = self._check_digit(value)
        self._check_index(index)
        node = self._node_at(index)
        old = node.value
        node.value = digit
        return old

    @overload
    def __setitem__(self, index: int, value: int) -> None: ...

    @overload
    def __setitem__(self, index: slice, value: Iterable[int]) -> None: ...

    def __setitem__(self, index: int | slice, value: int | Iterable[int]) -> None:
        if isinstance(index, slice):
            msg = "DigitRing does not support slice assignment"
            raise TypeError(msg)
        self.set(index, value)  # type: ignore[arg-type]

    def remove_at(self, index: int) -> int:
        """Unlink the node at `index` and return its digit."""
        self._check_index(index)
        assert self._head is not None
        head = self._head

        if self._size == 1:
            self._head = None
            self._size = 0
            return head.value

        if index == 0:
            tail = self._tail()
            self._head = head.next
            tail.next = self._head
            removed = head
        else:
            prev = self._node_at(index - 1)
            removed = prev.next
            prev.next = removed.next
        self._size -= 1
        return removed.value

    @overload
    def __delitem__(self, index: int) -> None: ...

    @overload
    def __delitem__(self, index: slice) -> None: ...

    def __delitem__(self, index: int | slice) -> None:
        if isinstance(index, slice):
            for i in sorted(range(*index.indices(self._size)), reverse=True):
                self.remove_at(i)
            return
        self.remove_at(index)

    def pop(self, index: int = -1) -> int:
        """Remove and return the digit at `index` (default: the last one)."""
        if index == -1:
            index = self._size - 1
        return self.remove_at(index)

    def remove(self, value: object) -> bool:  # type: ignore[override]
        """Remove the first occurrence of `value`; return whether one existed."""
        index = self.index_of(value)
        if index < 0:
            return False
        self.remove_at(index)
        return True

    def swap(self, index1: int, index2: int) -> bool:
        """Exchange the digits at two indices; nodes stay where they are."""
        self._check_index(index1)
        self._check_index(index2)
        if index1 == index2:
            return True
        node1 = self._node_at(index1)
        node2 = self._node_at(index2)
        node1.value, node2.value = node2.value, node1.value
        return True

    def clear(self) -> None:
        self._head = None
        self._size = 0

    def add_all(self, values: Iterable[int]) -> bool:
        changed = False
        for value in values:
            changed = self.add(value) or changed
        return changed

    def add_all_at(self, index: int, values: Iterable[int]) -> bool:
        """Insert `values` contiguously starting at `index`, in source order."""
        if not 0 <= index <= self._size:
            msg = f"Index {index} out of range for insertion into size {self._size}"
            raise IndexOutOfRange(msg)
        changed = False
        for pos, value in enumerate(values, start=index):
            self.insert(pos, value)
            changed = True
        return changed

    def remove_all(self, values: Iterable[object]) -> bool:
        """Remove every digit that appears in `values`."""
        targets = {v for v in values if _is_digit_type(v)}
        changed = False
        i = 0
        while i < self._size:
            if self.get(i) in targets:
                self.remove_at(i)
                changed = True
            else:
                i += 1
        return changed

    def retain_all(self, values: Iterable[object]) -> bool:
        """Remove every digit that does not appear in `values`."""
        keep = {v for v in values if _is_digit_type(v)}
        changed = False
        i = 0
        while i < self._size:
            if self.get(i) not in keep:
                self.remove_at(i)
                changed = True
            else:
                i += 1
        return changed

    # ------------------------------------------------------------------ #
    # ordering
    # ------------------------------------------------------------------ #

    def _bubble(self, *, descending: bool) -> None:
        if self._size <= 1:
            return
        assert self._head is not None
        swapped = True
        while swapped:
            swapped = False
            node = self._head
            # size - 1 comparisons: never across the tail -> head seam
            for _ in range(self._size - 1):
                nxt = node.next
                if descending:
                    out_of_order = node.value < nxt.value
                else:
                    out_of_order = node.value > nxt.value
                if out_of_order:
                    node.value, nxt.value = nxt.value, node.value
                    swapped = True
                node = nxt

    def sort_ascending(self) -> None:
        self._bubble(descending=False)

    def sort_descending(self) -> None:
        self._bubble(descending=True)

    def shift_left(self) -> None:
        """Rotate so index 0 becomes the last index. O(1)."""
        if self._size <= 1:
            return
        assert self._head is not None
        self._head = self._head.next

    def shift_right(self) -> None:
        """Rotate so the last index becomes index 0. O(size)."""
        if self._size <= 1:
            return
        self._head = self._tail()

    # ------------------------------------------------------------------ #
    # iteration
    # ------------------------------------------------------------------ #

    def __iter__(self) -> Iterator[int]:
        for node in self._nodes():
            yield node.value

    def __reversed__(self) -> Iterator[int]:
        for i in range(self._size - 1, -1, -1):
            yield self.get(i)

    def list_iterator(self, index: int = 0) -> DigitCursor:
        """Return a bidirectional cursor positioned before `index`.

        Mutating the ring other than through this cursor while it is in use
        leaves the cursor in an undefined state.
        """
        from digitring.cursor import DigitCursor

        if not 0 <= index <= self._size:
            msg = f"Cursor index {index} out of range for size {self._size}"
            raise IndexOutOfRange(msg)
        return DigitCursor(self, index)

    # ------------------------------------------------------------------ #
    # equality / rendering
    # ------------------------------------------------------------------ #

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, DigitSource):
            return NotImplemented
        if other.size() != self._size:
            return False
        return all(
            node.value == other.get(i) for i, node in enumerate(self._nodes())
        )

    def __repr__(self) -> str:
        return f"DigitRing({self.to_list()!r}, base={self.base})"

    def __str__(self) -> str:
        if self._size == 0:
            return "[]"
        return f"{self.to_list()} base={self.base}"

    # ------------------------------------------------------------------ #
    # numeric view
    # ------------------------------------------------------------------ #

    def to_int(self) -> int:
        """Value of the ring as a base-`base` number (0 when empty)."""
        return from_digits(self, self.base)

    def to_decimal_string(self) -> str:
        return to_decimal_string(self.to_int())

    def change_scale(self, target_base: int = SCALE_BASE) -> DigitRing:
        """Return the same number expressed in `target_base`.

        The ring itself is left untouched.
        """
        return DigitRing.from_value(self.to_int(), target_base)

    def additional_operation(self, other: DigitSource) -> DigitRing:
        """Return ``self mod other``, encoded in this ring's base.

        Note the asymmetry: a `DigitRing` argument is read in its own base,
        but any other digit source is read as base-10 digits.

        Raises:
            DivisionByZero: If `other` evaluates to zero.
        """
        if isinstance(other, DigitRing):
            divisor = other.to_int()
        else:
            divisor = from_digits(other, 10)
        if divisor == 0:
            msg = "Division by zero in additional_operation"
            raise DivisionByZero(msg)
        return DigitRing.from_value(self.to_int() % divisor, self.base)

    mod = additional_operation


__all__ = ["DEFAULT_BASE", "SCALE_BASE", "DigitRing"]
