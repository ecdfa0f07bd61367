"""
Fixed-width radix conversion
Re-expresses bounded integers as little-endian digit blocks in an arbitrary base
"""

import numpy as np


def symbols_needed(symbol_count, base):
    """
    Compute the number of base-`base` digits needed for any value < symbol_count.

    Searches for the smallest width w with base ** w >= symbol_count using
    integer exponentiation, so the result is exact for every (symbol_count, base).

    Args:
        symbol_count: Number of distinct values to represent
        base: Radix of the target alphabet (>= 2)

    Returns:
        int: Digit width (always >= 1)
    """
    if base < 2:
        raise ValueError(f"Base must be at least 2, got {base}")
    if symbol_count < 1:
        raise ValueError(f"Symbol count must be positive, got {symbol_count}")

    width = 1
    capacity = base
    while capacity < symbol_count:
        capacity *= base
        width += 1

    return width


def int_to_digits(num, base, width):
    """
    Convert integer to a fixed number of digits, least significant first.

    Args:
        num: Non-negative integer to convert
        base: Radix (>= 2)
        width: Number of digits to produce

    Returns:
        list: Digits in [0, base), length == width
    """
    if num < 0 or num >= base ** width:
        raise ValueError(f"Value {num} does not fit in {width} base-{base} digits")

    digits = []
    for _ in range(width):
        digits.append(num % base)
        num = num // base

    return digits


def digits_to_int(digits, base):
    """
    Convert little-endian digits back to an integer.

    Args:
        digits: Digits in [0, base), least significant first
        base: Radix (>= 2)

    Returns:
        int: Decoded integer
    """
    result = 0
    for digit in reversed(digits):
        if digit < 0 or digit >= base:
            raise ValueError(f"Invalid base-{base} digit: {digit}")

        result = result * base + digit

    return result


_INT64_MAX = np.iinfo(np.int64).max


def _fits_int64(base, width):
    """Check that every width-digit block value and its place values fit in int64."""
    return base ** width - 1 <= _INT64_MAX


def _place_values(base, width):
    # Only called when _fits_int64(base, width) holds
    return np.array([base ** j for j in range(width)], dtype=np.int64)


def values_to_digits(values, base, width):
    """
    Expand a sequence of values into a (len(values), width) digit matrix.

    Row i holds the digits of values[i], least significant digit in column 0.
    Blocks wider than int64 are expanded one value at a time with Python ints.
    """
    if not _fits_int64(base, width):
        rows = [int_to_digits(int(value), base, width) for value in values]
        return np.array(rows, dtype=np.int64).reshape(-1, width)

    values = np.asarray(values, dtype=np.int64).reshape(-1, 1)
    return (values // _place_values(base, width)) % base


def digits_to_values(digits, base):
    """
    Collapse a (n, width) digit matrix back into n values.

    Returns an int64 array, or an object array of Python ints when a block
    can hold values beyond int64.
    """
    digits = np.asarray(digits, dtype=np.int64)
    if digits.ndim != 2:
        raise ValueError(f"Expected a 2-D digit matrix, got {digits.ndim} dimension(s)")

    width = digits.shape[1]
    if not _fits_int64(base, width):
        return np.array([digits_to_int(row, base) for row in digits.tolist()], dtype=object)

    return digits @ _place_values(base, width)
