"""Reading seed numbers from files and persisting rings back to them."""

from __future__ import annotations

import logging
from pathlib import Path

from digitring.errors import StorageError
from digitring.ring import DEFAULT_BASE, DigitRing

logger = logging.getLogger(__name__)


def read_seed(path: Path | str) -> str:
    """Read a decimal seed from a file.

    Each line is stripped and the lines are concatenated, so a number may be
    wrapped over several lines.

    Args:
        path: File holding the decimal number.

    Returns:
        The concatenated seed string (possibly empty).

    Raises:
        StorageError: If the file cannot be read.
    """
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as f:
            seed = "".join(line.strip() for line in f)
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Cannot read file {path}: {e}"
        raise StorageError(msg) from e
    logger.debug("Read %d-character seed from %s", len(seed), path)
    return seed


def load_ring(path: Path | str, base: int = DEFAULT_BASE) -> DigitRing:
    """Build a ring from the decimal number stored in `path`."""
    return DigitRing.from_decimal(read_seed(path), base)


def save_ring(ring: DigitRing, path: Path | str) -> None:
    """Write the ring's value as a decimal string, replacing the file.

    Raises:
        StorageError: If the file cannot be written.
    """
    path = Path(path)
    text = ring.to_decimal_string()
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        msg = f"Cannot write to file {path}: {e}"
        raise StorageError(msg) from e
    logger.debug("Saved %d decimal digits to %s", len(text), path)
