"""Shared pytest fixtures for the glyph_layout test suite.

Fixtures:
    default_config: The default 20x20 layout configuration
    make_glyphs: Factory for sequences of real RenderableGlyphs
    make_phrase: Factory for glyph sequences with space/newline separators
    glyph_records: Glyph id -> GlyphRecord lookup (ids 1-5)
    grapheme_12: Two-glyph grapheme with id 12
    normalization_context: Context holding both lookups

Markers:
    slow: Mark test as slow-running (skip with -m "not slow")
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from glyph_layout.domain.config import DEFAULT_LAYOUT_CONFIG
from glyph_layout.domain.glyphs import GlyphRecord, GraphemeRecord, RenderableGlyph
from glyph_layout.utils.normalization import NormalizationContext
from glyph_layout.utils.virtual import create_virtual_glyph


# -----------------------------------------------------------------------------
# Pytest Markers
# -----------------------------------------------------------------------------

def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: mark test as slow-running (deselect with '-m \"not slow\"')"
    )


# -----------------------------------------------------------------------------
# Config Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def default_config():
    """Return the default config: 20x20 boxes, spacing 2, padding 4."""
    return DEFAULT_LAYOUT_CONFIG


# -----------------------------------------------------------------------------
# Glyph Fixtures
# -----------------------------------------------------------------------------

def _glyph(glyph_id, source_index=0):
    return RenderableGlyph(
        id=glyph_id,
        name=f'g{glyph_id}',
        svg_data=f'<path d="M0 0 L{glyph_id} 10"/>',
        source_index=source_index,
    )


@pytest.fixture
def make_glyphs():
    """Return a factory building ``n`` real glyphs with ids 1..n.

        Callable[[int], list[RenderableGlyph]]
    """
    def _make(n):
        return [_glyph(i + 1, i) for i in range(n)]
    return _make


@pytest.fixture
def make_phrase():
    """Return a factory turning a token string into a normalized glyph list.

    Each character is one glyph: ``' '`` becomes a virtual space glyph,
    ``'|'`` a virtual newline glyph, and any other character a real glyph
    whose id is its position + 1.

        Callable[[str], list[RenderableGlyph]]
    """
    def _make(tokens):
        glyphs = []
        for i, token in enumerate(tokens):
            if token == ' ':
                glyphs.append(create_virtual_glyph(' ', i))
            elif token == '|':
                glyphs.append(create_virtual_glyph('\n', i))
            else:
                glyphs.append(_glyph(i + 1, i))
        return glyphs
    return _make


# -----------------------------------------------------------------------------
# Lookup Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def glyph_records():
    """Return a glyph lookup with ids 1 through 5."""
    return {
        i: GlyphRecord(id=i, name=f'stroke-{i}', svg_data=f'<path d="M{i} 0"/>')
        for i in range(1, 6)
    }


@pytest.fixture
def grapheme_12(glyph_records):
    """Return grapheme 12, made of glyphs 1 and 2."""
    return GraphemeRecord(id=12, name='ka', glyphs=(glyph_records[1], glyph_records[2]))


@pytest.fixture
def normalization_context(glyph_records, grapheme_12):
    """Return a context with both the glyph and the grapheme lookup."""
    return NormalizationContext(glyph_lookup=glyph_records, grapheme_lookup={12: grapheme_12})
