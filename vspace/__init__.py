"""
VSpace Package
Encodes extended ASCII text into strings of blank-rendering characters and back
"""

from .constants import (
    Characters,
    DEFAULT_SYMBOLS,
    EXTENDED_SYMBOLS,
    ZERO_WIDTH_SYMBOLS,
    MAX_CODE_POINT,
    BASE64_SYMBOL_COUNT,
    BASE32_SYMBOL_COUNT,
    BASE16_SYMBOL_COUNT
)

from .errors import (
    VSpaceError,
    InvalidAlphabetError,
    InvalidFormatError,
    InvalidCharacterError,
    InvalidSymbolError,
    InvalidValueError
)

from .radix import (
    symbols_needed,
    int_to_digits,
    digits_to_int,
    values_to_digits,
    digits_to_values
)

from .pre_encoder import (
    PreEncoder,
    AlphabetPreEncoder,
    Base64PreEncoder,
    Base32PreEncoder,
    Base16PreEncoder,
    is_extended_ascii,
    check_extended_ascii
)

from .encoder import AsciiVSpaceEncoder
from .factory import EncoderFactory
from .visualize import render_visible, split_blocks

__all__ = [
    # Constants
    'Characters',
    'DEFAULT_SYMBOLS',
    'EXTENDED_SYMBOLS',
    'ZERO_WIDTH_SYMBOLS',
    'MAX_CODE_POINT',
    'BASE64_SYMBOL_COUNT',
    'BASE32_SYMBOL_COUNT',
    'BASE16_SYMBOL_COUNT',

    # Errors
    'VSpaceError',
    'InvalidAlphabetError',
    'InvalidFormatError',
    'InvalidCharacterError',
    'InvalidSymbolError',
    'InvalidValueError',

    # Radix
    'symbols_needed',
    'int_to_digits',
    'digits_to_int',
    'values_to_digits',
    'digits_to_values',

    # Pre-encoders
    'PreEncoder',
    'AlphabetPreEncoder',
    'Base64PreEncoder',
    'Base32PreEncoder',
    'Base16PreEncoder',
    'is_extended_ascii',
    'check_extended_ascii',

    # Encoder
    'AsciiVSpaceEncoder',
    'EncoderFactory',
    'render_visible',
    'split_blocks'
]
