"""
VSpace Constants
Named characters and alphabets used throughout the VSpace encoding system
"""


class Characters:
    """Whitespace-like characters that render as blank space."""

    NON_BREAKING_SPACE = '\u00A0'
    LINE_FEED = '\n'
    HORIZONTAL_TAB = '\t'
    CARRIAGE_RETURN = '\r'
    SPACE = '\u0020'

    # Extended set
    SOFT_HYPHEN = '\u00AD'

    # Zero-width characters
    ZERO_WIDTH_SPACE = '\u200B'
    ZERO_WIDTH_NON_JOINER = '\u200C'
    ZERO_WIDTH_JOINER = '\u200D'
    WORD_JOINER = '\u2060'


# Default alphabet, sorted once so the character -> index map is canonical
DEFAULT_SYMBOLS = tuple(sorted((
    Characters.SPACE,
    Characters.NON_BREAKING_SPACE,
    Characters.HORIZONTAL_TAB,
)))

# Default set plus the remaining blank-rendering characters
EXTENDED_SYMBOLS = tuple(sorted((
    Characters.SPACE,
    Characters.NON_BREAKING_SPACE,
    Characters.HORIZONTAL_TAB,
    Characters.LINE_FEED,
    Characters.CARRIAGE_RETURN,
    Characters.SOFT_HYPHEN,
)))

# Zero-width alphabet (binary digits)
ZERO_WIDTH_SYMBOLS = tuple(sorted((
    Characters.ZERO_WIDTH_SPACE,
    Characters.ZERO_WIDTH_NON_JOINER,
)))

# Highest code point accepted by the single-byte text stage
MAX_CODE_POINT = 255

# Text encoding mapping each code point 0-255 to exactly one byte
SINGLE_BYTE_ENCODING = 'latin-1'

# Symbol counts of the built-in pre-encoders
BASE64_SYMBOL_COUNT = 64
BASE32_SYMBOL_COUNT = 32
BASE16_SYMBOL_COUNT = 16

# Padding marker stripped from the intermediate alphabet
PADDING_CHAR = '='
