"""Positioned glyphs and layout bounds."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from .config import LayoutStrategyConfig
from .glyphs import RenderableGlyph


@dataclass(frozen=True)
class PositionedGlyph:
    """A glyph box placed on the layout canvas.

    ``index`` is the position in the output sequence, which is not
    necessarily the glyph's ``source_index`` (composed layouts reorder).
    """
    glyph: RenderableGlyph
    x: float
    y: float
    width: float
    height: float
    index: int
    rotation: float | None = None  # degrees

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        d = {
            'glyph': self.glyph.to_dict(),
            'x': self.x,
            'y': self.y,
            'width': self.width,
            'height': self.height,
            'index': self.index,
        }
        if self.rotation is not None:
            d['rotation'] = self.rotation
        return d


@dataclass(frozen=True)
class LayoutBounds:
    """Padded bounding box of a layout.

    ``width`` and ``height`` always equal ``max - min`` on each axis.
    """
    width: float
    height: float
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def from_extents(cls, min_x: float, min_y: float, max_x: float, max_y: float) -> LayoutBounds:
        return cls(
            width=max_x - min_x,
            height=max_y - min_y,
            min_x=min_x,
            min_y=min_y,
            max_x=max_x,
            max_y=max_y,
        )

    def contains_box(self, x: float, y: float, width: float, height: float) -> bool:
        """Check if a box lies entirely inside the bounds."""
        return (self.min_x <= x and x + width <= self.max_x and
                self.min_y <= y and y + height <= self.max_y)

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to (min_x, min_y, max_x, max_y)."""
        return (self.min_x, self.min_y, self.max_x, self.max_y)

    def to_dict(self) -> dict[str, float]:
        return {
            'width': self.width,
            'height': self.height,
            'min_x': self.min_x,
            'min_y': self.min_y,
            'max_x': self.max_x,
            'max_y': self.max_y,
        }


@dataclass(frozen=True)
class LayoutResult:
    """Output of a layout strategy."""
    positions: list[PositionedGlyph]
    bounds: LayoutBounds

    def __len__(self) -> int:
        return len(self.positions)

    def to_dict(self) -> dict[str, Any]:
        return {
            'positions': [p.to_dict() for p in self.positions],
            'bounds': self.bounds.to_dict(),
        }


def empty_bounds(config: LayoutStrategyConfig) -> LayoutBounds:
    """Bounds of an empty layout: one glyph box plus padding at the origin."""
    return LayoutBounds.from_extents(
        0,
        0,
        config.glyph_width + config.padding * 2,
        config.glyph_height + config.padding * 2,
    )


def calculate_bounds(positions: list[PositionedGlyph], config: LayoutStrategyConfig) -> LayoutBounds:
    """Tight bounding box around positioned glyphs, grown by the padding.

    Args:
        positions: Positioned glyph boxes.
        config: Layout configuration supplying ``padding`` (and the glyph box
            for the empty case).

    Returns:
        LayoutBounds enclosing every box with one padding margin on each
        side, or ``empty_bounds(config)`` when there are no positions.
    """
    if not positions:
        return empty_bounds(config)

    boxes = np.array([(p.x, p.y, p.right, p.bottom) for p in positions], dtype=float)
    min_x, min_y = boxes[:, :2].min(axis=0)
    max_x, max_y = boxes[:, 2:].max(axis=0)
    pad = config.padding

    return LayoutBounds.from_extents(
        float(min_x - pad),
        float(min_y - pad),
        float(max_x + pad),
        float(max_y + pad),
    )


def merge_bounds(a: LayoutBounds, b: LayoutBounds) -> LayoutBounds:
    """Union of two bounds."""
    return LayoutBounds.from_extents(
        min(a.min_x, b.min_x),
        min(a.min_y, b.min_y),
        max(a.max_x, b.max_x),
        max(a.max_y, b.max_y),
    )


def pad_bounds(bounds: LayoutBounds, padding: float) -> LayoutBounds:
    """Grow bounds by ``padding`` on every side."""
    return LayoutBounds.from_extents(
        bounds.min_x - padding,
        bounds.min_y - padding,
        bounds.max_x + padding,
        bounds.max_y + padding,
    )


def _format_number(value: float) -> str:
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def bounds_to_viewbox(bounds: LayoutBounds) -> str:
    """SVG ``viewBox`` attribute value for the bounds.

    Example:
        >>> bounds_to_viewbox(LayoutBounds.from_extents(0, 0, 72, 28))
        '0 0 72 28'
    """
    return ' '.join(_format_number(v) for v in (bounds.min_x, bounds.min_y, bounds.width, bounds.height))
