"""
Encoder factory.
Creates pre-encoder and encoder instances based on configuration.
"""

import codecs
import logging
from typing import Dict, List, Optional

from .encoder import AsciiVSpaceEncoder
from .pre_encoder import Base16PreEncoder, Base32PreEncoder, Base64PreEncoder, PreEncoder

logger = logging.getLogger(__name__)


class EncoderFactory:
    """
    Factory for creating VSpace encoders.

    Configuration keys:
        VSPACE_ALPHABET: Output alphabet, Python escape sequences allowed
            (e.g. "\\u200b\\u200c"). Unset or empty means the default alphabet.
        VSPACE_PRE_ENCODER: 'base64' (default), 'base32' or 'base16'
    """

    PRE_ENCODERS = {
        'base64': Base64PreEncoder,
        'base32': Base32PreEncoder,
        'base16': Base16PreEncoder,
    }

    @staticmethod
    def create_pre_encoder(pre_encoder_type: str) -> PreEncoder:
        """
        Create a pre-encoder.

        Args:
            pre_encoder_type: Pre-encoder type ('base64', 'base32' or 'base16')

        Returns:
            PreEncoder instance

        Raises:
            ValueError: If pre-encoder type is unknown
        """
        pre_encoder_type = pre_encoder_type.lower()

        if pre_encoder_type not in EncoderFactory.PRE_ENCODERS:
            supported = EncoderFactory.get_supported_pre_encoders()
            raise ValueError(
                f"Unknown pre-encoder type: '{pre_encoder_type}'. "
                f"Supported pre-encoders: {', '.join(supported)}"
            )

        return EncoderFactory.PRE_ENCODERS[pre_encoder_type]()

    @staticmethod
    def parse_alphabet(alphabet_spec: Optional[str]) -> Optional[str]:
        """
        Expand escape sequences in an alphabet setting.

        Args:
            alphabet_spec: Alphabet as written in .env or on the command line

        Returns:
            The alphabet characters, or None for the default alphabet

        Raises:
            ValueError: If the escape sequences are malformed
        """
        if not alphabet_spec:
            return None

        try:
            # Round-trip through latin-1 keeps literal non-ASCII characters intact
            return codecs.decode(
                alphabet_spec.encode('latin-1', 'backslashreplace'),
                'unicode_escape'
            )
        except UnicodeDecodeError as e:
            raise ValueError(f"Invalid escape sequence in alphabet: {alphabet_spec!r}") from e

    @staticmethod
    def create_encoder(config: Dict[str, Optional[str]]) -> AsciiVSpaceEncoder:
        """
        Create an encoder from a configuration dictionary.

        Args:
            config: Configuration dictionary (see class docstring)

        Returns:
            AsciiVSpaceEncoder instance

        Raises:
            ValueError: If the pre-encoder type or alphabet is invalid
        """
        pre_encoder_type = config.get('VSPACE_PRE_ENCODER') or 'base64'
        pre_encoder = EncoderFactory.create_pre_encoder(pre_encoder_type)

        symbols = EncoderFactory.parse_alphabet(config.get('VSPACE_ALPHABET'))

        encoder = AsciiVSpaceEncoder(symbols=symbols, pre_encoder=pre_encoder)

        logger.info(
            f"Created encoder: pre-encoder={pre_encoder_type.lower()}, "
            f"{len(encoder.symbols)} symbols, {encoder.symbols_needed} symbols per value"
        )

        return encoder

    @staticmethod
    def get_supported_pre_encoders() -> List[str]:
        """
        Get list of supported pre-encoder types.

        Returns:
            List of pre-encoder type names
        """
        return list(EncoderFactory.PRE_ENCODERS)
