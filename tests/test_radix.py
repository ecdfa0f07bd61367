"""
Unit tests for vspace/radix.py.
"""
import math

import numpy as np
import pytest

from vspace.radix import (
    digits_to_int,
    digits_to_values,
    int_to_digits,
    symbols_needed,
    values_to_digits,
)

# Test cases: (symbol_count, base, width)
WIDTH_TEST_CASES = [
    (64, 2, 6),
    (64, 3, 4),
    (64, 4, 3),
    (64, 8, 2),
    (64, 63, 2),
    (64, 64, 1),
    (64, 65, 1),
    (32, 3, 4),
    (16, 3, 3),
    (243, 3, 5),
    (244, 3, 6),
    (125, 5, 3),
    (1000, 10, 3),
    (1, 2, 1),
    (2, 2, 1),
]


@pytest.mark.parametrize("symbol_count, base, width", WIDTH_TEST_CASES)
def test_symbols_needed(symbol_count, base, width):
    """Test the smallest width w with base ** w >= symbol_count."""
    assert symbols_needed(symbol_count, base) == width


@pytest.mark.parametrize("symbol_count, base, width", WIDTH_TEST_CASES)
def test_symbols_needed_is_minimal(symbol_count, base, width):
    """Test that the width covers symbol_count and one digit fewer would not."""
    assert base ** width >= symbol_count
    if width > 1:
        assert base ** (width - 1) < symbol_count


def test_symbols_needed_exact_power_not_inflated_by_float_rounding():
    """125 is an exact power of 5; the float quotient of logs overshoots 3."""
    float_width = math.ceil(math.log(125) / math.log(5))
    assert float_width in (3, 4)
    assert symbols_needed(125, 5) == 3


@pytest.mark.parametrize("symbol_count, base", [(64, 1), (64, 0), (0, 3), (-5, 3)])
def test_symbols_needed_invalid_input_raises_error(symbol_count, base):
    with pytest.raises(ValueError):
        symbols_needed(symbol_count, base)


# Test cases: (value, base, width, little-endian digits)
DIGIT_TEST_CASES = [
    (0, 3, 4, [0, 0, 0, 0]),
    (16, 3, 4, [1, 2, 1, 0]),
    (63, 3, 4, [0, 0, 1, 2]),
    (80, 3, 4, [2, 2, 2, 2]),
    (63, 2, 6, [1, 1, 1, 1, 1, 1]),
    (5, 2, 6, [1, 0, 1, 0, 0, 0]),
    (42, 64, 1, [42]),
]


@pytest.mark.parametrize("value, base, width, digits", DIGIT_TEST_CASES)
def test_int_to_digits(value, base, width, digits):
    """Test fixed-width conversion, least significant digit first."""
    assert int_to_digits(value, base, width) == digits


@pytest.mark.parametrize("value, base, width, digits", DIGIT_TEST_CASES)
def test_digits_to_int(value, base, width, digits):
    assert digits_to_int(digits, base) == value


@pytest.mark.parametrize("value, base, width", [(81, 3, 4), (-1, 3, 4), (64, 2, 6)])
def test_int_to_digits_value_too_large_raises_error(value, base, width):
    with pytest.raises(ValueError, match="does not fit"):
        int_to_digits(value, base, width)


@pytest.mark.parametrize("digits, base", [([3], 3), ([0, -1], 3), ([2, 2], 2)])
def test_digits_to_int_invalid_digit_raises_error(digits, base):
    with pytest.raises(ValueError, match="Invalid base"):
        digits_to_int(digits, base)


def test_values_to_digits_matches_scalar_conversion():
    """Each row of the digit matrix equals the scalar conversion of its value."""
    values = [16, 0, 63, 80, 27]
    matrix = values_to_digits(values, 3, 4)

    assert matrix.shape == (5, 4)
    assert matrix.tolist() == [int_to_digits(v, 3, 4) for v in values]


def test_digits_to_values_matches_scalar_conversion():
    matrix = [[1, 2, 1, 0], [0, 0, 1, 2], [2, 2, 2, 2]]
    assert digits_to_values(matrix, 3).tolist() == [16, 63, 80]


def test_vectorised_conversion_preserves_order():
    values = list(range(64))
    matrix = values_to_digits(values, 2, 6)
    assert digits_to_values(matrix, 2).tolist() == values


def test_values_to_digits_empty_sequence():
    matrix = values_to_digits([], 3, 4)
    assert matrix.shape == (0, 4)
    assert digits_to_values(matrix, 3).tolist() == []


def test_digits_to_values_rejects_flat_input():
    with pytest.raises(ValueError, match="2-D"):
        digits_to_values(np.array([1, 2, 1, 0]), 3)


def test_large_base_single_digit():
    """A base larger than the symbol count uses one digit per value."""
    base = 100000
    matrix = values_to_digits([0, 1, 63], base, symbols_needed(64, base))
    assert matrix.tolist() == [[0], [1], [63]]


# Test cases: (value, base, width) with blocks wider than int64
WIDE_TEST_CASES = [
    (2 ** 63, 2, 64),
    (2 ** 64 - 1, 2, 64),
    (2 ** 63 + 12345, 3, 41),
    (10 ** 30, 10, 31),
]


@pytest.mark.parametrize("value, base, width", WIDE_TEST_CASES)
def test_values_to_digits_beyond_int64(value, base, width):
    matrix = values_to_digits([value, 0], base, width)

    assert matrix.shape == (2, width)
    assert matrix.tolist() == [int_to_digits(value, base, width), [0] * width]


@pytest.mark.parametrize("value, base, width", WIDE_TEST_CASES)
def test_digits_to_values_beyond_int64(value, base, width):
    """Collapsed values are exact Python ints, not wrapped int64."""
    matrix = [int_to_digits(value, base, width), [base - 1] * width]
    values = digits_to_values(matrix, base).tolist()

    assert values == [value, base ** width - 1]
    assert all(type(v) is int for v in values)


def test_wide_blocks_empty_sequence():
    matrix = values_to_digits([], 2, 64)
    assert matrix.shape == (0, 64)
    assert digits_to_values(matrix, 2).tolist() == []


def test_int64_boundary_block():
    """2 ** 63 - 1 is the largest block that stays on the int64 path."""
    matrix = values_to_digits([2 ** 63 - 1], 2, 63)
    assert matrix.tolist() == [[1] * 63]
    assert digits_to_values(matrix, 2).tolist() == [2 ** 63 - 1]
