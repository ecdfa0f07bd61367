"""
Pre-encoders for the VSpace encoder.
All pre-encoders must implement the PreEncoder interface.
"""

import base64
import binascii
from abc import ABC, abstractmethod
from typing import List, Sequence

from .constants import (
    BASE16_SYMBOL_COUNT,
    BASE32_SYMBOL_COUNT,
    BASE64_SYMBOL_COUNT,
    MAX_CODE_POINT,
    PADDING_CHAR,
    SINGLE_BYTE_ENCODING,
)
from .errors import InvalidFormatError, InvalidSymbolError, InvalidValueError


def is_extended_ascii(text: str) -> bool:
    """Check that every code point in text is in the extended ASCII range (0-255)."""
    return all(ord(c) <= MAX_CODE_POINT for c in text)


def _format_error(code_point: int, position: int) -> InvalidFormatError:
    return InvalidFormatError(
        f"Expected standard ASCII and extended ASCII format, "
        f"found code point {code_point} at position {position}"
    )


def check_extended_ascii(text: str):
    """
    Validate that every code point in text is in 0-255.

    Raises:
        InvalidFormatError: Naming the first code point above 255 and its position
    """
    for position, c in enumerate(text):
        if ord(c) > MAX_CODE_POINT:
            raise _format_error(ord(c), position)


def text_to_bytes(text: str) -> bytes:
    """
    Convert text to bytes, one byte per character.

    Raises:
        InvalidFormatError: If a code point is above 255
    """
    try:
        return text.encode(SINGLE_BYTE_ENCODING)
    except UnicodeEncodeError as e:
        raise _format_error(ord(text[e.start]), e.start) from e


def bytes_to_text(data: bytes) -> str:
    """Convert bytes back to text, one character per byte."""
    return data.decode(SINGLE_BYTE_ENCODING)


class PreEncoder(ABC):
    """
    Abstract base class for pre-encoders.

    A pre-encoder maps extended ASCII text to a sequence of small integers,
    each in [0, symbol_count), and back.
    """

    @property
    @abstractmethod
    def symbol_count(self) -> int:
        """
        The number of different symbols in a pre-encoded sequence.
        For Base64 this is 64.
        """
        pass

    @abstractmethod
    def encode(self, text: str) -> List[int]:
        """
        Pre-encode text.

        Args:
            text: Text with code points in 0-255

        Returns:
            List of integers, each in [0, symbol_count)
        """
        pass

    @abstractmethod
    def decode(self, values: Sequence[int]) -> str:
        """
        Reverse encode().

        Args:
            values: Integers, each in [0, symbol_count)

        Returns:
            The original text

        Raises:
            InvalidValueError: If a value is outside [0, symbol_count)
        """
        pass

    def __repr__(self):
        return f"{type(self).__name__}(symbol_count={self.symbol_count})"


class AlphabetPreEncoder(PreEncoder):
    """
    Pre-encoder whose intermediate form is a fixed text alphabet
    (Base64, Base32, Base16). Values are mapped symbol by symbol.
    """

    def encode_raw_input(self, symbol: str) -> int:
        """Convert one intermediate-alphabet symbol to its value."""
        return self.to_value(symbol)

    @abstractmethod
    def to_value(self, symbol: str) -> int:
        """Map an intermediate symbol to its value."""
        pass

    @abstractmethod
    def from_value(self, value: int) -> str:
        """Map a value to its intermediate symbol."""
        pass

    def _check_symbol(self, symbol):
        if not isinstance(symbol, str) or len(symbol) != 1:
            raise InvalidSymbolError(symbol, f"Expected a single symbol character, got {symbol!r}")

    def _check_value(self, value):
        # bool is an int subclass but never a valid symbol value
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidValueError(value, self.symbol_count)
        if value < 0 or value >= self.symbol_count:
            raise InvalidValueError(value, self.symbol_count)


class Base64PreEncoder(AlphabetPreEncoder):
    """
    6-bit pre-encoder built on standard Base64.

    Text is packed 3 bytes -> 4 symbols, trailing '=' padding is stripped and
    each symbol becomes its 6-bit value:
    A-Z -> 0-25, a-z -> 26-51, 0-9 -> 52-61, '+' -> 62, '/' -> 63.
    """

    @property
    def symbol_count(self) -> int:
        return BASE64_SYMBOL_COUNT

    def encode(self, text: str) -> List[int]:
        encoded = base64.b64encode(text_to_bytes(text)).decode('ascii').rstrip(PADDING_CHAR)
        return [self.to_value(symbol) for symbol in encoded]

    def decode(self, values: Sequence[int]) -> str:
        encoded = ''.join(self.from_value(value) for value in values)

        # Restore padding so the symbol count is a multiple of 4
        mod4 = len(encoded) % 4
        if mod4 > 0:
            encoded += PADDING_CHAR * (4 - mod4)

        try:
            data = base64.b64decode(encoded, validate=True)
        except binascii.Error as e:
            raise InvalidFormatError(f"Pre-encoded sequence cannot be unpacked: {e}") from e

        return bytes_to_text(data)

    def to_value(self, symbol: str) -> int:
        self._check_symbol(symbol)

        if 'A' <= symbol <= 'Z':
            return ord(symbol) - ord('A')
        if 'a' <= symbol <= 'z':
            return ord(symbol) - ord('a') + 26
        if '0' <= symbol <= '9':
            return ord(symbol) - ord('0') + 52
        if symbol == '+':
            return 62
        if symbol == '/':
            return 63

        raise InvalidSymbolError(symbol, f"Invalid character for Base64 encoding: {symbol!r}")

    def from_value(self, value: int) -> str:
        self._check_value(value)

        if value < 26:
            return chr(ord('A') + value)
        if value < 52:
            return chr(ord('a') + value - 26)
        if value < 62:
            return chr(ord('0') + value - 52)
        if value == 62:
            return '+'
        return '/'


class Base32PreEncoder(AlphabetPreEncoder):
    """
    5-bit pre-encoder built on RFC 4648 Base32 (A-Z -> 0-25, 2-7 -> 26-31).
    """

    @property
    def symbol_count(self) -> int:
        return BASE32_SYMBOL_COUNT

    def encode(self, text: str) -> List[int]:
        encoded = base64.b32encode(text_to_bytes(text)).decode('ascii').rstrip(PADDING_CHAR)
        return [self.to_value(symbol) for symbol in encoded]

    def decode(self, values: Sequence[int]) -> str:
        encoded = ''.join(self.from_value(value) for value in values)

        mod8 = len(encoded) % 8
        if mod8 > 0:
            encoded += PADDING_CHAR * (8 - mod8)

        try:
            data = base64.b32decode(encoded)
        except binascii.Error as e:
            raise InvalidFormatError(f"Pre-encoded sequence cannot be unpacked: {e}") from e

        return bytes_to_text(data)

    def to_value(self, symbol: str) -> int:
        self._check_symbol(symbol)

        if 'A' <= symbol <= 'Z':
            return ord(symbol) - ord('A')
        if '2' <= symbol <= '7':
            return ord(symbol) - ord('2') + 26

        raise InvalidSymbolError(symbol, f"Invalid character for Base32 encoding: {symbol!r}")

    def from_value(self, value: int) -> str:
        self._check_value(value)

        if value < 26:
            return chr(ord('A') + value)
        return chr(ord('2') + value - 26)


class Base16PreEncoder(AlphabetPreEncoder):
    """
    4-bit pre-encoder: one upper-case hex digit per nibble, high nibble first.
    """

    @property
    def symbol_count(self) -> int:
        return BASE16_SYMBOL_COUNT

    def encode(self, text: str) -> List[int]:
        encoded = base64.b16encode(text_to_bytes(text)).decode('ascii')
        return [self.to_value(symbol) for symbol in encoded]

    def decode(self, values: Sequence[int]) -> str:
        encoded = ''.join(self.from_value(value) for value in values)

        if len(encoded) % 2:
            raise InvalidFormatError(
                f"Pre-encoded sequence cannot be unpacked: odd number of hex digits ({len(encoded)})"
            )

        return bytes_to_text(base64.b16decode(encoded))

    def to_value(self, symbol: str) -> int:
        self._check_symbol(symbol)

        if '0' <= symbol <= '9':
            return ord(symbol) - ord('0')
        if 'A' <= symbol <= 'F':
            return ord(symbol) - ord('A') + 10

        raise InvalidSymbolError(symbol, f"Invalid character for Base16 encoding: {symbol!r}")

    def from_value(self, value: int) -> str:
        self._check_value(value)

        if value < 10:
            return chr(ord('0') + value)
        return chr(ord('A') + value - 10)
