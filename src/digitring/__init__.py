"""digitring: digits stored in a circular singly linked list.

This package provides:
- `DigitRing`, a mutable sequence of digits in ``[0, base)`` kept as a ring
- `DigitCursor`, a bidirectional cursor that can edit the ring as it moves
- Conversions between rings, decimal strings and Python integers
"""

from __future__ import annotations

from digitring.codec import DigitSource, from_digits, parse_decimal, to_digits
from digitring.config import DEFAULT_CONFIG, RingConfig, load_config
from digitring.cursor import DigitCursor
from digitring.errors import (
    DigitRingError,
    DivisionByZero,
    IllegalState,
    IndexOutOfRange,
    InvalidDigit,
    InvalidFormat,
    StorageError,
)
from digitring.ring import DEFAULT_BASE, SCALE_BASE, DigitRing
from digitring.storage import load_ring, read_seed, save_ring

__all__ = [
    "DEFAULT_BASE",
    "DEFAULT_CONFIG",
    "SCALE_BASE",
    "DigitCursor",
    "DigitRing",
    "DigitRingError",
    "DigitSource",
    "DivisionByZero",
    "IllegalState",
    "IndexOutOfRange",
    "InvalidDigit",
    "InvalidFormat",
    "RingConfig",
    "StorageError",
    "from_digits",
    "load_config",
    "load_ring",
    "parse_decimal",
    "read_seed",
    "save_ring",
    "to_digits",
]
