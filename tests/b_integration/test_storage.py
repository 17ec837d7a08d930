"""Integration tests for digitring.storage module."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from digitring.errors import InvalidFormat, StorageError
from digitring.ring import DigitRing
from digitring.storage import load_ring, read_seed, save_ring


class TestReadSeed:
    """Tests for reading seed files."""

    def test_lines_are_trimmed_and_joined(self, tmp_path: Path) -> None:
        path = tmp_path / "number.txt"
        path.write_text("  12\n34  \n\n56\n")
        assert read_seed(path) == "123456"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(StorageError) as exc_info:
            read_seed(tmp_path / "missing.txt")
        assert isinstance(exc_info.value, OSError)
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "number.txt"
        path.write_bytes(b"12\xff3")
        with pytest.raises(StorageError, match="Cannot read file") as exc_info:
            read_seed(path)
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


class TestLoadRing:
    """Tests for load_ring function."""

    def test_load(self, tmp_path: Path) -> None:
        path = tmp_path / "number.txt"
        path.write_text("+4\n2\n")

        ring = load_ring(path)

        assert ring.to_list() == [1, 1, 2, 0]
        assert ring.base == 3

    def test_load_other_base(self, tmp_path: Path) -> None:
        path = tmp_path / "number.txt"
        path.write_text("42")
        assert load_ring(path, base=8).to_list() == [5, 2]

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "number.txt"
        path.write_text("  \n\n")
        assert load_ring(path).is_empty()

    def test_long_number_over_many_lines(self, tmp_path: Path) -> None:
        path = tmp_path / "number.txt"
        path.write_text("1234567890\n" * 500)

        ring = load_ring(path)

        assert ring.to_decimal_string() == "1234567890" * 500
        assert ring.get(0) != 0

    def test_invalid_content(self, tmp_path: Path) -> None:
        path = tmp_path / "number.txt"
        path.write_text("12\nab\n")
        with pytest.raises(InvalidFormat):
            load_ring(path)


class TestSaveRing:
    """Tests for save_ring function."""

    def test_save(self, tmp_path: Path) -> None:
        path = tmp_path / "out.txt"
        save_ring(DigitRing.from_decimal("+00042"), path)
        assert path.read_text() == "42"

    def test_save_replaces_contents(self, tmp_path: Path) -> None:
        path = tmp_path / "out.txt"
        path.write_text("999999\n")
        save_ring(DigitRing.from_decimal("0"), path)
        assert path.read_text() == "0"

    def test_save_empty_ring(self, tmp_path: Path) -> None:
        path = tmp_path / "out.txt"
        save_ring(DigitRing(), path)
        assert path.read_text() == "0"

    def test_save_then_load(self, tmp_path: Path) -> None:
        path = tmp_path / "out.txt"
        ring = DigitRing.from_decimal("98765432109876543210")
        save_ring(ring, path)
        assert load_ring(path) == ring

    def test_save_long_number(self, tmp_path: Path) -> None:
        path = tmp_path / "out.txt"
        text = "31415926535" * 500
        save_ring(DigitRing.from_decimal(text), path)
        assert path.read_text() == text

    def test_save_to_directory_fails(self, tmp_path: Path) -> None:
        with pytest.raises(StorageError, match="Cannot write"):
            save_ring(DigitRing.from_decimal("1"), tmp_path)

    def test_save_logs(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="digitring.storage"):
            save_ring(DigitRing.from_decimal("10"), tmp_path / "out.txt")
        assert "Saved 2 decimal digits" in caplog.text
