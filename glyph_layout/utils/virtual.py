"""Virtual IPA placeholder glyphs.

When a pronunciation character has no grapheme mapping, a virtual glyph is
synthesized so the spelling can still be laid out. Virtual glyphs carry a
negative id derived from the character and a generated SVG showing the
character inside a dashed box.

Ids are only used within a single render pass and are never persisted. The
hash is not collision-free: two distinct characters can map to the same id,
and nothing detects or corrects that.
"""

from __future__ import annotations

from html import escape

from ..domain.glyphs import RenderableGlyph

_INT32_MASK = 0xFFFFFFFF


def _utf16_code_units(text: str) -> list[int]:
    # Lone surrogates pass through as their own code unit.
    data = text.encode('utf-16-le', 'surrogatepass')
    return [int.from_bytes(data[i:i + 2], 'little') for i in range(0, len(data), 2)]


def virtual_glyph_id(ipa_character: str) -> int:
    """Deterministic negative id for an IPA character.

    Uses the 32-bit ``h = h * 31 + c`` string hash over UTF-16 code units,
    then maps non-negative results to ``-h - 1``.

    Args:
        ipa_character: The character (or short sequence) to hash.

    Returns:
        A negative integer; the same input always gives the same id.

    Example:
        >>> virtual_glyph_id('a')
        -98
    """
    h = 0
    for unit in _utf16_code_units(ipa_character):
        h = (h * 31 + unit) & _INT32_MASK
    if h >= 0x80000000:
        h -= 0x100000000
    return h if h < 0 else -h - 1


def is_virtual_glyph_id(glyph_id: int) -> bool:
    """Virtual glyphs always have negative ids."""
    return glyph_id < 0


def virtual_glyph_svg(ipa_character: str) -> str:
    """Placeholder drawing: dashed rounded box with the character centred."""
    text = escape(ipa_character, quote=True)
    return (
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">'
        '<rect x="5" y="5" width="90" height="90" fill="none" stroke="currentColor" '
        'stroke-width="2" stroke-dasharray="5,5" rx="8"/>'
        '<text x="50" y="60" font-family="serif" font-size="48" text-anchor="middle" '
        f'fill="currentColor">{text}</text>'
        '</svg>'
    )


def create_virtual_glyph(ipa_character: str, source_index: int) -> RenderableGlyph:
    """Build the placeholder glyph for ``ipa_character``."""
    return RenderableGlyph(
        id=virtual_glyph_id(ipa_character),
        name=ipa_character,
        svg_data=virtual_glyph_svg(ipa_character),
        is_virtual=True,
        ipa_character=ipa_character,
        source_index=source_index,
    )
