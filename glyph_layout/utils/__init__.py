"""Input utilities for glyph layout.

The module provides the following:
    normalize_glyph_input: Convert any supported input shape to
        RenderableGlyph lists.
    detect_input_type: Classify an input by its first element.
    NormalizationContext: Glyph and grapheme lookups.
    virtual_glyph_id, create_virtual_glyph: IPA placeholder glyphs.
    find_separators: Word-boundary and line-break indices for composed
        layouts.
"""

from .normalization import InputType, NormalizationContext, detect_input_type, normalize_glyph_input
from .separators import SeparatorIndices, find_separators
from .virtual import create_virtual_glyph, is_virtual_glyph_id, virtual_glyph_id, virtual_glyph_svg

__all__ = [
    'normalize_glyph_input', 'detect_input_type', 'InputType', 'NormalizationContext',
    'find_separators', 'SeparatorIndices',
    'virtual_glyph_id', 'is_virtual_glyph_id', 'virtual_glyph_svg', 'create_virtual_glyph',
]
