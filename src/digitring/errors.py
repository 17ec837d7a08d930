"""Error kinds raised by digitring.

Every error derives from `DigitRingError` and from the closest builtin
exception, so callers can catch either the library-wide base class or the
familiar builtin (e.g. `IndexError` for out-of-range access).
"""

from __future__ import annotations


class DigitRingError(Exception):
    """Base class for all digitring errors."""


class InvalidFormat(DigitRingError, ValueError):
    """A seed string contains a character that is not a decimal digit."""


class InvalidDigit(DigitRingError, ValueError):
    """A digit value lies outside ``[0, base)``."""


class IndexOutOfRange(DigitRingError, IndexError):
    """An index lies outside the valid bound for the operation."""


class IllegalState(DigitRingError, RuntimeError):
    """A cursor mutation was attempted with no element to act on."""


class DivisionByZero(DigitRingError, ZeroDivisionError):
    """The divisor of a residue operation evaluates to zero."""


class StorageError(DigitRingError, OSError):
    """Reading or writing a persisted number failed."""


__all__ = [
    "DigitRingError",
    "DivisionByZero",
    "IllegalState",
    "IndexOutOfRange",
    "InvalidDigit",
    "InvalidFormat",
    "StorageError",
]
