"""Numeric codec: conversions between digit sequences and integers.

Python's `int` is the arbitrary-precision collaborator. Digit sequences are
always most-significant digit first, and are read only through the
`DigitSource` protocol (`size()` and `get()`), never through node internals.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from digitring.errors import InvalidFormat

DECIMAL_DIGITS = frozenset("0123456789")

# int <-> str conversions are capped by sys.get_int_max_str_digits(), so long
# numerals are converted in pieces well below that limit
_CHUNK_DIGITS = 1000
_CHUNK_RADIX = 10**_CHUNK_DIGITS


@runtime_checkable
class DigitSource(Protocol):
    """Minimal indexed API a digit sequence must expose."""

    def size(self) -> int: ...

    def get(self, index: int) -> int: ...


def parse_decimal(text: str) -> int | None:
    """Parse a decimal numeral.

    Args:
        text: Decimal digits with an optional leading ``+``. Surrounding
            whitespace is ignored.

    Returns:
        The parsed value, or None when the input is empty or whitespace-only.

    Raises:
        InvalidFormat: If any other character is present.
    """
    stripped = text.strip()
    if not stripped:
        return None

    digits = stripped[1:] if stripped.startswith("+") else stripped
    # str.isdigit() accepts non-ASCII digits, so check against a fixed set
    if not digits or not set(digits) <= DECIMAL_DIGITS:
        msg = f"Invalid decimal string: {stripped!r}"
        raise InvalidFormat(msg)
    value = 0
    for start in range(0, len(digits), _CHUNK_DIGITS):
        chunk = digits[start : start + _CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def to_digits(value: int, base: int) -> list[int]:
    """Decompose a non-negative integer into base-`base` digits.

    Args:
        value: Non-negative integer to encode.
        base: Radix, at least 2.

    Returns:
        Digits most-significant first; zero encodes as ``[0]``.
    """
    if base < 2:
        msg = f"Base must be >= 2, got {base}"
        raise ValueError(msg)
    if value < 0:
        msg = f"Cannot encode negative value {value}"
        raise ValueError(msg)
    if value == 0:
        return [0]

    digits = []
    while value > 0:
        value, digit = divmod(value, base)
        digits.append(digit)
    digits.reverse()
    return digits


def from_digits(source: DigitSource, base: int) -> int:
    """Evaluate a digit source as a base-`base` positional number.

    An empty source evaluates to 0. Sources that are also iterable (such as
    `DigitRing`) are walked once instead of indexed digit by digit.
    """
    if isinstance(source, Iterable):
        digits: Iterable[int] = source
    else:
        digits = (source.get(i) for i in range(source.size()))
    value = 0
    for digit in digits:
        value = value * base + digit
    return value


def to_decimal_string(value: int) -> str:
    """Render a non-negative integer as a canonical decimal string."""
    if value < 0:
        msg = f"Cannot render negative value {value}"
        raise ValueError(msg)

    chunks = []
    while value >= _CHUNK_RADIX:
        value, low = divmod(value, _CHUNK_RADIX)
        chunks.append(str(low).zfill(_CHUNK_DIGITS))
    chunks.append(str(value))
    chunks.reverse()
    return "".join(chunks)


__all__ = [
    "DigitSource",
    "from_digits",
    "parse_decimal",
    "to_decimal_string",
    "to_digits",
]
