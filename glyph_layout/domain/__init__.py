"""Domain objects for glyph layout.

This module provides the value objects shared by the normalizer, the
layout strategies and the facade.

Configuration:
    LayoutStrategyConfig: Validated glyph box geometry.
    LayoutPreset: Named configurations (compact, detailed, tree, input).
    resolve_layout_config: Merge defaults, presets and overrides.

Glyph records and entries:
    GlyphRecord, GraphemeRecord: Records supplied by the glyph database.
    GraphemeEntry, IpaEntry: Spelling entries.
    RenderableGlyph: Normalized glyph consumed by strategies.

Geometry:
    PositionedGlyph, LayoutBounds, LayoutResult, plus the bounds helpers.

Writing system:
    Direction, BaselineAlignment, WordWrap, WritingSystemSettings.

Example usage:
    >>> from glyph_layout.domain import resolve_layout_config, empty_bounds
    >>> empty_bounds(resolve_layout_config('tree')).width
    18
"""

from .config import (
    DEFAULT_LAYOUT_CONFIG,
    LAYOUT_PRESETS,
    LayoutConfigError,
    LayoutPreset,
    LayoutStrategyConfig,
    resolve_layout_config,
)
from .geometry import (
    LayoutBounds,
    LayoutResult,
    PositionedGlyph,
    bounds_to_viewbox,
    calculate_bounds,
    empty_bounds,
    merge_bounds,
    pad_bounds,
)
from .glyphs import (
    GlyphRecord,
    GraphemeEntry,
    GraphemeRecord,
    IpaEntry,
    RenderableGlyph,
    SpellingEntry,
    spelling_entry_from_dict,
)
from .writing_system import (
    DEFAULT_WRITING_SYSTEM,
    BaselineAlignment,
    Direction,
    WordWrap,
    WritingSystemSettings,
)

__all__ = [
    # Configuration
    'LayoutStrategyConfig', 'LayoutPreset', 'LayoutConfigError',
    'DEFAULT_LAYOUT_CONFIG', 'LAYOUT_PRESETS', 'resolve_layout_config',
    # Glyphs
    'GlyphRecord', 'GraphemeRecord', 'GraphemeEntry', 'IpaEntry',
    'SpellingEntry', 'RenderableGlyph', 'spelling_entry_from_dict',
    # Geometry
    'PositionedGlyph', 'LayoutBounds', 'LayoutResult',
    'empty_bounds', 'calculate_bounds', 'merge_bounds', 'pad_bounds',
    'bounds_to_viewbox',
    # Writing system
    'Direction', 'BaselineAlignment', 'WordWrap', 'WritingSystemSettings',
    'DEFAULT_WRITING_SYSTEM',
]
