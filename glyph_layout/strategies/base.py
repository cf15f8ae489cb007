"""Layout strategy base class.

A layout strategy is a pure function from (glyph sequence, config) to
(positions, bounds). Strategies hold only their own construction-time
parameters (a writing system, separator indices); they never keep state
between calls, so one instance can be shared by any number of callers.

Subclasses implement ``_place``, which returns the top-left corner (and
optional rotation) of each glyph box in output order. The base class turns
those into PositionedGlyph objects and derives the bounds, so that every
strategy computes bounds the same way.

Example implementation::

    class DiagonalStrategy(LayoutStrategy):
        name = 'diagonal'

        def _place(self, glyphs, config):
            return [
                Placement(g, config.padding + i * config.cell_width,
                          config.padding + i * config.cell_height)
                for i, g in enumerate(glyphs)
            ]
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import NamedTuple

from ..domain.config import LayoutStrategyConfig
from ..domain.geometry import LayoutResult, PositionedGlyph, calculate_bounds, empty_bounds
from ..domain.glyphs import RenderableGlyph


class Placement(NamedTuple):
    """Top-left corner assigned to a glyph by a strategy."""
    glyph: RenderableGlyph
    x: float
    y: float
    rotation: float | None = None


class LayoutStrategy(ABC):
    """Base class for layout strategies.

    Attributes:
        name: Registry name of the strategy.
    """
    name: str = ''

    def calculate(self, glyphs: Sequence[RenderableGlyph], config: LayoutStrategyConfig) -> LayoutResult:
        """Position every glyph and compute the layout bounds.

        Args:
            glyphs: Normalized glyphs in input order.
            config: Resolved layout configuration.

        Returns:
            LayoutResult whose positions are indexed in output order. An
            empty input gives no positions and ``empty_bounds(config)``.
        """
        if not glyphs:
            return LayoutResult([], empty_bounds(config))

        positions = [
            PositionedGlyph(
                glyph=p.glyph,
                x=p.x,
                y=p.y,
                width=config.glyph_width,
                height=config.glyph_height,
                index=index,
                rotation=p.rotation,
            )
            for index, p in enumerate(self._place(glyphs, config))
        ]
        return LayoutResult(positions, calculate_bounds(positions, config))

    @abstractmethod
    def _place(self, glyphs: Sequence[RenderableGlyph], config: LayoutStrategyConfig) -> list[Placement]:
        """Compute box corners for a non-empty glyph sequence, in output order."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
