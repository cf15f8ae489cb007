"""Centre-out layouts: spiral and circle.

SpiralStrategy walks an Ulam spiral on the glyph grid, starting at the
centre and turning right, up, left, down with run lengths 1, 1, 2, 2, 3, 3:

        [G5][G4][G3]
        [G6][G1][G2]
        [G7] ...

CircularStrategy places glyphs clockwise on a ring starting at 12 o'clock,
with a radius large enough that neighbouring boxes do not overlap.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from ..domain.config import LayoutStrategyConfig
from ..domain.glyphs import RenderableGlyph
from .base import LayoutStrategy, Placement

# right, up, left, down (y grows downward)
SPIRAL_DIRECTIONS = ((1, 0), (0, -1), (-1, 0), (0, 1))


def spiral_grid(n: int) -> np.ndarray:
    """Integer grid cells of the first ``n`` steps of an Ulam spiral.

    Args:
        n: Number of cells to generate.

    Returns:
        Array of shape (n, 2) with (x, y) cells, starting at (0, 0). All
        cells are distinct.
    """
    cells = np.zeros((n, 2), dtype=int)
    x = y = 0
    direction = 0
    run_length = 1
    steps = 0
    turns = 0

    for i in range(n):
        cells[i] = (x, y)
        dx, dy = SPIRAL_DIRECTIONS[direction]
        x += dx
        y += dy
        steps += 1
        if steps == run_length:
            steps = 0
            direction = (direction + 1) % 4
            turns += 1
            if turns == 2:
                turns = 0
                run_length += 1

    return cells


class SpiralStrategy(LayoutStrategy):
    """Outward square spiral from the first glyph."""
    name = 'spiral'

    def _place(self, glyphs: Sequence[RenderableGlyph], config: LayoutStrategyConfig) -> list[Placement]:
        cells = spiral_grid(len(glyphs))
        cell_size = np.array([config.cell_width, config.cell_height], dtype=float)
        corners = (cells - cells.min(axis=0)) * cell_size + config.padding
        return [Placement(g, float(cx), float(cy)) for g, (cx, cy) in zip(glyphs, corners)]


class CircularStrategy(LayoutStrategy):
    """Ring layout, clockwise from the top.

    One glyph sits at the padding corner and two glyphs sit side by side;
    a ring only forms from three glyphs on.

    Args:
        rotate_glyphs: Rotate each glyph to face away from the centre.
    """
    name = 'circular'

    def __init__(self, rotate_glyphs: bool = False):
        self.rotate_glyphs = rotate_glyphs

    def _place(self, glyphs: Sequence[RenderableGlyph], config: LayoutStrategyConfig) -> list[Placement]:
        n = len(glyphs)
        w, h, pad = config.glyph_width, config.glyph_height, config.padding

        if n == 1:
            return [Placement(glyphs[0], pad, pad)]
        if n == 2:
            return [
                Placement(glyphs[0], pad, pad),
                Placement(glyphs[1], pad + config.cell_width, pad),
            ]

        diagonal = math.hypot(w, h)
        radius = max(diagonal, n * (diagonal + config.spacing) / (2 * math.pi))
        center_x = pad + radius + w / 2
        center_y = pad + radius + h / 2

        angles = -math.pi / 2 + 2 * math.pi * np.arange(n) / n
        xs = center_x + radius * np.cos(angles) - w / 2
        ys = center_y + radius * np.sin(angles) - h / 2

        placements = []
        for glyph, x, y, angle in zip(glyphs, xs, ys, angles):
            rotation = math.degrees(angle) + 90 if self.rotate_glyphs else None
            placements.append(Placement(glyph, float(x), float(y), rotation))
        return placements


spiral_strategy = SpiralStrategy()
circular_strategy = CircularStrategy()
