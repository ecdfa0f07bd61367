"""
ASCII VSpace Encoder
Hides extended ASCII text in strings made only of blank-rendering characters
"""

import logging
from types import MappingProxyType
from typing import Optional, Sequence, Union

import numpy as np

from .constants import DEFAULT_SYMBOLS
from .errors import InvalidAlphabetError, InvalidCharacterError, InvalidFormatError
from .pre_encoder import Base64PreEncoder, PreEncoder, check_extended_ascii
from .radix import digits_to_values, symbols_needed, values_to_digits

logger = logging.getLogger(__name__)


def _normalize_symbols(symbols):
    """Validate a caller alphabet and return it as a sorted tuple."""
    symbols = tuple(symbols)

    if len(symbols) == 0:
        raise InvalidAlphabetError("Symbol alphabet must not contain zero items.")

    for symbol in symbols:
        if not isinstance(symbol, str) or len(symbol) != 1:
            raise InvalidAlphabetError(
                f"Symbol alphabet members must be single characters, got {symbol!r}"
            )

    if len(set(symbols)) != len(symbols):
        duplicates = sorted({s for s in symbols if symbols.count(s) > 1})
        raise InvalidAlphabetError(f"Symbol alphabet contains duplicates: {duplicates!r}")

    if len(symbols) < 2:
        raise InvalidAlphabetError(
            f"Symbol alphabet needs at least 2 members, got {len(symbols)}"
        )

    return tuple(sorted(symbols))


class AsciiVSpaceEncoder:
    """
    Two-stage text encoder.

    The pre-encoder turns text into values in [0, symbol_count); each value is
    then written as a fixed-width block of alphabet characters, least
    significant digit first. Blocks are concatenated without separators.

    Instances are immutable after construction and safe to share between
    threads.
    """

    def __init__(
        self,
        symbols: Optional[Union[str, Sequence[str]]] = None,
        pre_encoder: Optional[PreEncoder] = None
    ):
        """
        Initialize the encoder.

        Args:
            symbols: Output alphabet (default: space, non-breaking space, tab).
                The caller's sequence is not modified; a sorted copy is kept.
            pre_encoder: Pre-encoder to use (default: Base64PreEncoder)

        Raises:
            InvalidAlphabetError: If the alphabet is empty, has duplicates,
                fewer than 2 members, or non-character members
        """
        self._pre_encoder = pre_encoder if pre_encoder is not None else Base64PreEncoder()
        self._symbols = DEFAULT_SYMBOLS if symbols is None else _normalize_symbols(symbols)

        self._char_to_index = MappingProxyType(
            {symbol: index for index, symbol in enumerate(self._symbols)}
        )
        self._symbol_array = np.array(self._symbols, dtype=object)

        # Fixed number of alphabet characters per pre-encoded value
        self._symbols_needed = symbols_needed(self._pre_encoder.symbol_count, len(self._symbols))

        logger.debug(
            f"AsciiVSpaceEncoder initialized: {len(self._symbols)} symbols, "
            f"{self._pre_encoder!r}, {self._symbols_needed} symbols per value"
        )

    @property
    def symbols(self):
        """Sorted output alphabet."""
        return self._symbols

    @property
    def symbols_needed(self):
        """Number of alphabet characters per pre-encoded value."""
        return self._symbols_needed

    @property
    def pre_encoder(self):
        return self._pre_encoder

    @property
    def char_to_index(self):
        """Read-only character -> digit map."""
        return self._char_to_index

    def encode(self, ascii_text: str) -> str:
        """
        Encode text into the symbol alphabet.

        Args:
            ascii_text: Text with every code point in 0-255

        Returns:
            str: Encoded text, len(values) * symbols_needed characters long

        Raises:
            TypeError: If ascii_text is not a string
            InvalidFormatError: If a code point is above 255
        """
        if not isinstance(ascii_text, str):
            raise TypeError(f"ascii_text must be a string, got {type(ascii_text).__name__}")

        check_extended_ascii(ascii_text)

        input_values = self._pre_encoder.encode(ascii_text)

        digits = values_to_digits(input_values, len(self._symbols), self._symbols_needed)

        return ''.join(self._symbol_array[digits.ravel()].tolist())

    def decode(self, encoded_text: str) -> str:
        """
        Decode text produced by encode().

        Args:
            encoded_text: Encoded text

        Returns:
            str: Original text

        Raises:
            TypeError: If encoded_text is not a string
            InvalidCharacterError: If a character is not in the alphabet
            InvalidFormatError: If the length is not a multiple of symbols_needed
            InvalidValueError: If a block decodes to a value the pre-encoder rejects
        """
        if not isinstance(encoded_text, str):
            raise TypeError(f"encoded_text must be a string, got {type(encoded_text).__name__}")

        indices = []
        for position, c in enumerate(encoded_text):
            index = self._char_to_index.get(c)
            if index is None:
                raise InvalidCharacterError(c, position)
            indices.append(index)

        if len(indices) % self._symbols_needed:
            raise InvalidFormatError(
                f"Encoded text length {len(indices)} is not a multiple of "
                f"{self._symbols_needed} symbols per value"
            )

        digits = np.array(indices, dtype=np.int64).reshape(-1, self._symbols_needed)
        outputs = digits_to_values(digits, len(self._symbols)).tolist()

        return self._pre_encoder.decode(outputs)

    def encoded_length(self, ascii_text: str) -> int:
        """
        Length encode() would produce for ascii_text, without building it.
        """
        return len(self._pre_encoder.encode(ascii_text)) * self._symbols_needed

    def __repr__(self):
        return (
            f"AsciiVSpaceEncoder(symbols={self._symbols!r}, "
            f"pre_encoder={self._pre_encoder!r})"
        )
