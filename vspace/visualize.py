"""
Visible rendering of encoded text, for inspection only.
"""

from typing import Dict, List, Optional, Sequence

from .constants import Characters

GLYPHS = {
    Characters.SPACE: '·',
    Characters.NON_BREAKING_SPACE: '°',
    Characters.HORIZONTAL_TAB: '→',
    Characters.LINE_FEED: '↓',
    Characters.CARRIAGE_RETURN: '←',
    Characters.SOFT_HYPHEN: '¬',
    Characters.ZERO_WIDTH_SPACE: '0',
    Characters.ZERO_WIDTH_NON_JOINER: '1',
    Characters.ZERO_WIDTH_JOINER: '+',
    Characters.WORD_JOINER: '⟂',
}


def render_visible(encoded_text: str, symbols: Optional[Sequence[str]] = None,
                   glyphs: Optional[Dict[str, str]] = None) -> str:
    """
    Replace blank-rendering characters with visible glyphs.

    Characters without a glyph are shown as their digit index in `symbols`
    when given, else as a U+XXXX code.
    """
    glyphs = GLYPHS if glyphs is None else glyphs
    index = {s: i for i, s in enumerate(symbols)} if symbols else {}

    out = []
    for c in encoded_text:
        if c in glyphs:
            out.append(glyphs[c])
        elif c in index:
            out.append(f"[{index[c]}]")
        else:
            out.append(f"<U+{ord(c):04X}>")

    return ''.join(out)


def split_blocks(text: str, width: int) -> List[str]:
    """Split text into blocks of `width` characters, one block per pre-encoded value."""
    return [text[i:i + width] for i in range(0, len(text), width)]
