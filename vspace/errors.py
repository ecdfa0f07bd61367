"""
Error taxonomy for the VSpace encoder.
Every failure is an input-format violation raised synchronously.
"""


class VSpaceError(Exception):
    """Base VSpace encoding error"""
    pass


class InvalidAlphabetError(VSpaceError, ValueError):
    """Symbol alphabet is empty or otherwise unusable"""
    pass


class InvalidFormatError(VSpaceError, ValueError):
    """Input text or encoded text is malformed"""
    pass


class InvalidCharacterError(InvalidFormatError):
    """Encoded text contains a character outside the alphabet"""

    def __init__(self, character: str, position: int):
        self.character = character
        self.position = position
        super().__init__(
            f"Encoded text contains an invalid character: {character!r} "
            f"at position {position}"
        )


class InvalidSymbolError(VSpaceError, ValueError):
    """Intermediate symbol has no value in the pre-encoder alphabet"""

    def __init__(self, symbol, message: str = None):
        self.symbol = symbol
        super().__init__(message or f"Invalid symbol for pre-encoding: {symbol!r}")


class InvalidValueError(VSpaceError, ValueError):
    """Pre-encoded value is outside [0, symbol_count)"""

    def __init__(self, value, symbol_count: int):
        self.value = value
        self.symbol_count = symbol_count
        super().__init__(
            f"Invalid pre-encoded value: {value!r} "
            f"(expected an integer in [0, {symbol_count}))"
        )
