"""Unit tests for digitring.codec module."""

from __future__ import annotations

import pytest

from digitring.codec import (
    DigitSource,
    from_digits,
    parse_decimal,
    to_decimal_string,
    to_digits,
)
from digitring.errors import InvalidFormat


class ListSource:
    """Plain digit source backed by a Python list."""

    def __init__(self, digits: list[int]) -> None:
        self.digits = digits

    def size(self) -> int:
        return len(self.digits)

    def get(self, index: int) -> int:
        return self.digits[index]


class TestParseDecimal:
    """Tests for parse_decimal function."""

    def test_plain_digits(self) -> None:
        assert parse_decimal("12345") == 12345

    def test_leading_plus(self) -> None:
        assert parse_decimal("+42") == 42

    def test_surrounding_whitespace(self) -> None:
        assert parse_decimal("  7\n") == 7

    def test_leading_zeros(self) -> None:
        assert parse_decimal("0007") == 7

    def test_empty_is_none(self) -> None:
        """Empty and whitespace-only input mean an empty ring."""
        assert parse_decimal("") is None
        assert parse_decimal("   ") is None

    def test_large_value(self) -> None:
        text = "9" * 200
        assert parse_decimal(text) == 10**200 - 1

    @pytest.mark.parametrize("text", ["-1", "+", "1a", "1 2", "++1", "1.0", "١٢"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(InvalidFormat):
            parse_decimal(text)

    def test_invalid_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="Invalid decimal string"):
            parse_decimal("x")


class TestToDigits:
    """Tests for to_digits function."""

    def test_zero(self) -> None:
        assert to_digits(0, 3) == [0]

    def test_base_3(self) -> None:
        assert to_digits(10, 3) == [1, 0, 1]
        assert to_digits(42, 3) == [1, 1, 2, 0]

    def test_base_8(self) -> None:
        assert to_digits(42, 8) == [5, 2]

    def test_most_significant_first(self) -> None:
        assert to_digits(8, 2) == [1, 0, 0, 0]

    def test_negative_value(self) -> None:
        with pytest.raises(ValueError):
            to_digits(-1, 3)

    def test_invalid_base(self) -> None:
        with pytest.raises(ValueError):
            to_digits(5, 1)


class TestFromDigits:
    """Tests for from_digits function."""

    def test_empty_source(self) -> None:
        assert from_digits(ListSource([]), 3) == 0

    def test_base_10(self) -> None:
        assert from_digits(ListSource([1, 2, 3]), 10) == 123

    def test_base_3(self) -> None:
        assert from_digits(ListSource([1, 0, 1]), 3) == 10

    @pytest.mark.parametrize("base", [2, 3, 8, 16])
    def test_round_trip(self, base: int) -> None:
        """Decoding the encoding of a value reproduces it."""
        for value in (0, 1, base - 1, base, 12345, 3**40 + 7):
            assert from_digits(ListSource(to_digits(value, base)), base) == value

    def test_list_source_is_digit_source(self) -> None:
        assert isinstance(ListSource([1]), DigitSource)
        assert not isinstance([1], DigitSource)


def test_to_decimal_string() -> None:
    assert to_decimal_string(0) == "0"
    assert to_decimal_string(10**30) == "1" + "0" * 30


class TestLongNumerals:
    """Tests for numerals longer than the int/str conversion limit."""

    @pytest.mark.parametrize(
        "text", ["7" * 5000, "1" + "0" * 4999, "9" * 1000 + "0" * 1000 + "1" * 3000]
    )
    def test_round_trip(self, text: str) -> None:
        value = parse_decimal(text)
        assert value is not None
        assert value % 10 == int(text[-1])
        assert to_decimal_string(value) == text

    def test_leading_zeros_dropped(self) -> None:
        value = parse_decimal("+" + "0" * 2000 + "5" * 5000)
        assert value is not None
        assert to_decimal_string(value) == "5" * 5000

    def test_matches_base_3_digits(self) -> None:
        value = parse_decimal("1" + "0" * 4999)
        assert value == 10**4999
        assert from_digits(ListSource(to_digits(value, 3)), 3) == 10**4999


def test_to_decimal_string_negative() -> None:
    with pytest.raises(ValueError):
        to_decimal_string(-1)
