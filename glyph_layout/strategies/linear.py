"""Linear layout strategies: one row or one column.

    ltr   [G1] [G2] [G3] ->
    rtl   <- [G3] [G2] [G1]
    ttb   G1 above G2 above G3
    btt   G3 above G2 above G1

Reversed directions mirror the forward layout about the far edge of the
run, so glyph 0 is rightmost (rtl) or bottommost (btt) and the layout still
starts at the padding.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..domain.config import LayoutStrategyConfig
from ..domain.glyphs import RenderableGlyph
from .base import LayoutStrategy, Placement


class LinearStrategy(LayoutStrategy):
    """Glyphs in a single run along one axis.

    Args:
        name: Registry name ('ltr', 'rtl', 'ttb', 'btt').
        vertical: Run along the y axis instead of the x axis.
        reverse: Place glyph 0 at the far end of the run.
    """

    def __init__(self, name: str, vertical: bool = False, reverse: bool = False):
        self.name = name
        self.vertical = vertical
        self.reverse = reverse

    def _place(self, glyphs: Sequence[RenderableGlyph], config: LayoutStrategyConfig) -> list[Placement]:
        n = len(glyphs)
        box = config.glyph_height if self.vertical else config.glyph_width
        step = box + config.spacing

        if self.reverse:
            total = n * box + (n - 1) * config.spacing
            start = config.padding + total - box
            offsets = [start - i * step for i in range(n)]
        else:
            offsets = [config.padding + i * step for i in range(n)]

        if self.vertical:
            return [Placement(g, config.padding, off) for g, off in zip(glyphs, offsets)]
        return [Placement(g, off, config.padding) for g, off in zip(glyphs, offsets)]


ltr_strategy = LinearStrategy('ltr')
rtl_strategy = LinearStrategy('rtl', reverse=True)
ttb_strategy = LinearStrategy('ttb', vertical=True)
btt_strategy = LinearStrategy('btt', vertical=True, reverse=True)
