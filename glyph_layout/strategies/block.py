"""Wrapping row layouts.

BlockStrategy fills fixed-width rows left to right:

    [G1] [G2] [G3]
    [G4] [G5] [G6]
    [G7]

BoustrophedonStrategy uses the same rows but runs every odd row right to
left, "as the ox plows":

    [G1] [G2] [G3] ->
    <- [G6] [G5] [G4]
    [G7] ->

The row width comes from ``max_width`` when it is set, otherwise
DEFAULT_GLYPHS_PER_ROW glyphs fit in a row.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from ..domain.config import LayoutStrategyConfig
from ..domain.glyphs import RenderableGlyph
from .base import LayoutStrategy, Placement

# Row length when the config has no max_width
DEFAULT_GLYPHS_PER_ROW = 5


def glyphs_per_row(config: LayoutStrategyConfig) -> int:
    """Number of glyph boxes that fit in one row (at least 1).

    Example:
        >>> glyphs_per_row(LayoutStrategyConfig(20, 20, 2, 4, max_width=74))
        3
    """
    if not config.max_width:
        return DEFAULT_GLYPHS_PER_ROW
    available = config.max_width - config.padding * 2
    return max(1, math.floor((available + config.spacing) / config.cell_width))


class BlockStrategy(LayoutStrategy):
    """Rows of glyphs wrapped at the row width."""
    name = 'block'

    def _place(self, glyphs: Sequence[RenderableGlyph], config: LayoutStrategyConfig) -> list[Placement]:
        per_row = glyphs_per_row(config)
        placements = []
        for i, glyph in enumerate(glyphs):
            row, col = divmod(i, per_row)
            placements.append(Placement(
                glyph,
                config.padding + col * config.cell_width,
                config.padding + row * config.cell_height,
            ))
        return placements


class BoustrophedonStrategy(LayoutStrategy):
    """Rows of alternating direction.

    Mirrored rows are aligned to the nominal row width, so a short last
    mirrored row hugs the right edge.
    """
    name = 'boustrophedon'

    def _place(self, glyphs: Sequence[RenderableGlyph], config: LayoutStrategyConfig) -> list[Placement]:
        per_row = glyphs_per_row(config)
        row_width = per_row * config.glyph_width + (per_row - 1) * config.spacing
        right_edge = config.padding + row_width - config.glyph_width

        placements = []
        for i, glyph in enumerate(glyphs):
            row, col = divmod(i, per_row)
            if row % 2 == 1:
                x = right_edge - col * config.cell_width
            else:
                x = config.padding + col * config.cell_width
            placements.append(Placement(glyph, x, config.padding + row * config.cell_height))
        return placements


block_strategy = BlockStrategy()
boustrophedon_strategy = BoustrophedonStrategy()
