"""Word-boundary and line-break detection for composed layouts.

A translated phrase is a single glyph sequence in which words are separated
by a space entry and lines by a newline entry. Both arrive as virtual IPA
glyphs (``' '`` and ``'\\n'``) unless the script assigns a real grapheme to
the word separator, in which case its glyph ids are passed in explicitly.

Indices are computed over the normalized glyph list, the same sequence the
composed-block strategy receives, so a grapheme that expands to several
glyphs does not shift later separators.
"""

from __future__ import annotations

from collections.abc import Collection, Sequence
from dataclasses import dataclass

from ..domain.glyphs import RenderableGlyph

WORD_SEPARATOR_CHAR = ' '
LINE_BREAK_CHAR = '\n'


@dataclass(frozen=True)
class SeparatorIndices:
    """Positions of separator glyphs in a normalized sequence."""
    word_boundaries: tuple[int, ...] = ()
    line_breaks: tuple[int, ...] = ()


def find_separators(
    glyphs: Sequence[RenderableGlyph],
    word_separator_ids: Collection[int] = (),
) -> SeparatorIndices:
    """Locate word boundaries and line breaks.

    Args:
        glyphs: Normalized glyphs.
        word_separator_ids: Ids of real glyphs that act as word separators.

    Returns:
        SeparatorIndices with ascending indices for each kind.
    """
    word_boundaries = []
    line_breaks = []

    for i, glyph in enumerate(glyphs):
        if glyph.is_virtual and glyph.ipa_character == LINE_BREAK_CHAR:
            line_breaks.append(i)
        elif glyph.is_virtual and glyph.ipa_character == WORD_SEPARATOR_CHAR:
            word_boundaries.append(i)
        elif not glyph.is_virtual and glyph.id in word_separator_ids:
            word_boundaries.append(i)

    return SeparatorIndices(tuple(word_boundaries), tuple(line_breaks))
