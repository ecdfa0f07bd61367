"""
Unit tests for vspace/factory.py and vspace/visualize.py.
"""
import pytest

from vspace.constants import Characters, DEFAULT_SYMBOLS, ZERO_WIDTH_SYMBOLS
from vspace.encoder import AsciiVSpaceEncoder
from vspace.errors import InvalidAlphabetError
from vspace.factory import EncoderFactory
from vspace.pre_encoder import Base16PreEncoder, Base32PreEncoder, Base64PreEncoder
from vspace.visualize import render_visible, split_blocks


@pytest.mark.parametrize("name, expected_class", [
    ("base64", Base64PreEncoder),
    ("base32", Base32PreEncoder),
    ("base16", Base16PreEncoder),
    ("BASE32", Base32PreEncoder),
])
def test_create_pre_encoder(name, expected_class):
    assert isinstance(EncoderFactory.create_pre_encoder(name), expected_class)


def test_create_pre_encoder_unknown_type_raises_error():
    with pytest.raises(ValueError, match="Unknown pre-encoder type: 'rot13'"):
        EncoderFactory.create_pre_encoder("rot13")


def test_get_supported_pre_encoders():
    assert EncoderFactory.get_supported_pre_encoders() == ["base64", "base32", "base16"]


@pytest.mark.parametrize("spec, expected", [
    (None, None),
    ("", None),
    ("ab", "ab"),
    ("\\u200b\\u200c", "\u200b\u200c"),
    ("\\t \\xa0", "\t \xa0"),
    ("\u200b\u200c", "\u200b\u200c"),
    ("\xa0\t", "\xa0\t"),
])
def test_parse_alphabet(spec, expected):
    assert EncoderFactory.parse_alphabet(spec) == expected


def test_parse_alphabet_malformed_escape_raises_error():
    with pytest.raises(ValueError, match="Invalid escape sequence"):
        EncoderFactory.parse_alphabet("\\u12")


def test_create_encoder_defaults():
    encoder = EncoderFactory.create_encoder({})
    assert isinstance(encoder, AsciiVSpaceEncoder)
    assert isinstance(encoder.pre_encoder, Base64PreEncoder)
    assert encoder.symbols == DEFAULT_SYMBOLS


def test_create_encoder_from_config():
    encoder = EncoderFactory.create_encoder({
        'VSPACE_ALPHABET': "\\u200c\\u200b",
        'VSPACE_PRE_ENCODER': "base32",
    })
    assert isinstance(encoder.pre_encoder, Base32PreEncoder)
    assert encoder.symbols == ZERO_WIDTH_SYMBOLS
    assert encoder.symbols_needed == 5
    assert encoder.decode(encoder.encode("payload")) == "payload"


def test_create_encoder_invalid_alphabet_raises_error():
    with pytest.raises(InvalidAlphabetError):
        EncoderFactory.create_encoder({'VSPACE_ALPHABET': "aa"})


def test_create_encoder_logs_configuration(caplog):
    with caplog.at_level("INFO", logger="vspace.factory"):
        EncoderFactory.create_encoder({'VSPACE_PRE_ENCODER': "base16"})

    assert "pre-encoder=base16" in caplog.text
    assert "3 symbols per value" in caplog.text


# --- Visualisation ---

def test_render_visible_default_alphabet():
    encoded = AsciiVSpaceEncoder().encode("A")
    assert render_visible(encoded) == "·°·→·°·→"


def test_render_visible_uses_index_then_code_point():
    rendered = render_visible("ab\u2028", symbols=("a", "b"))
    assert rendered == "[0][1]<U+2028>"


def test_render_visible_custom_glyphs():
    assert render_visible("ab", glyphs={"a": "0", "b": "1"}) == "01"


def test_split_blocks():
    assert split_blocks("abcdefgh", 4) == ["abcd", "efgh"]
    assert split_blocks("", 4) == []
    assert split_blocks("abcde", 2) == ["ab", "cd", "e"]


def test_zero_width_glyphs():
    text = Characters.ZERO_WIDTH_SPACE + Characters.ZERO_WIDTH_NON_JOINER
    assert render_visible(text) == "01"
