"""Unit tests for the spiral and circular strategies."""

import math

import numpy as np
import pytest

from glyph_layout.domain.config import LayoutStrategyConfig
from glyph_layout.strategies.radial import (
    CircularStrategy,
    circular_strategy,
    spiral_grid,
    spiral_strategy,
)


def _centres(positions):
    return np.array([(p.x + p.width / 2, p.y + p.height / 2) for p in positions])


# ---------------------------------------------------------------------------
# TestSpiralGrid
# ---------------------------------------------------------------------------

class TestSpiralGrid:
    """Tests for spiral_grid."""

    def test_first_nine_cells(self):
        cells = spiral_grid(9)
        assert cells.tolist() == [
            [0, 0], [1, 0], [1, -1], [0, -1], [-1, -1],
            [-1, 0], [-1, 1], [0, 1], [1, 1],
        ]

    def test_zero_cells(self):
        assert spiral_grid(0).shape == (0, 2)

    @pytest.mark.parametrize("n", [1, 2, 5, 17, 50, 101])
    def test_cells_unique(self, n):
        cells = spiral_grid(n)
        assert len({tuple(c) for c in cells.tolist()}) == n

    def test_neighbouring_cells_adjacent(self):
        cells = spiral_grid(30)
        steps = np.abs(np.diff(cells, axis=0)).sum(axis=1)
        assert np.all(steps == 1)


# ---------------------------------------------------------------------------
# TestSpiralStrategy
# ---------------------------------------------------------------------------

class TestSpiralStrategy:
    """Tests for SpiralStrategy."""

    def test_single_glyph(self, make_glyphs, default_config):
        result = spiral_strategy.calculate(make_glyphs(1), default_config)
        assert (result.positions[0].x, result.positions[0].y) == (4, 4)

    def test_nine_glyphs_fill_square(self, make_glyphs, default_config):
        result = spiral_strategy.calculate(make_glyphs(9), default_config)
        first, second, third = result.positions[:3]
        assert (first.x, first.y) == (26, 26)
        assert (second.x, second.y) == (48, 26)
        assert (third.x, third.y) == (48, 4)
        assert result.bounds.to_tuple() == (0, 0, 72, 72)

    def test_no_overlap(self, make_glyphs, default_config):
        positions = spiral_strategy.calculate(make_glyphs(20), default_config).positions
        corners = {(p.x, p.y) for p in positions}
        assert len(corners) == 20


# ---------------------------------------------------------------------------
# TestCircularStrategy
# ---------------------------------------------------------------------------

class TestCircularStrategy:
    """Tests for CircularStrategy."""

    def test_single_glyph(self, make_glyphs, default_config):
        p = circular_strategy.calculate(make_glyphs(1), default_config).positions[0]
        assert (p.x, p.y) == (4, 4)

    def test_pair_symmetry(self, make_glyphs, default_config):
        """Two glyphs sit symmetrically about the centre line, one spacing apart."""
        result = circular_strategy.calculate(make_glyphs(2), default_config)
        left, right = result.positions
        centre_line = (result.bounds.min_x + result.bounds.max_x) / 2
        assert left.y == right.y
        assert centre_line - (left.x + left.width / 2) == (right.x + right.width / 2) - centre_line
        assert right.x - left.right == default_config.spacing

    def test_three_glyphs_use_diagonal_radius(self, make_glyphs, default_config):
        positions = circular_strategy.calculate(make_glyphs(3), default_config).positions
        diagonal = math.hypot(20, 20)
        assert positions[0].x == pytest.approx(4 + diagonal)
        assert positions[0].y == pytest.approx(4)

    @pytest.mark.parametrize("n", [3, 6, 12, 40])
    def test_centres_on_ring(self, make_glyphs, default_config, n):
        positions = circular_strategy.calculate(make_glyphs(n), default_config).positions
        diagonal = math.hypot(20, 20)
        radius = max(diagonal, n * (diagonal + 2) / (2 * math.pi))
        centres = _centres(positions)
        distances = np.linalg.norm(centres - centres.mean(axis=0), axis=1)
        assert np.allclose(distances, radius)

    @pytest.mark.parametrize("n", [3, 5, 8, 16])
    def test_neighbours_do_not_overlap(self, make_glyphs, default_config, n):
        centres = _centres(circular_strategy.calculate(make_glyphs(n), default_config).positions)
        gaps = np.linalg.norm(centres - np.roll(centres, 1, axis=0), axis=1)
        assert np.all(gaps >= math.hypot(20, 20) - 1e-9)

    def test_clockwise_from_top(self, make_glyphs, default_config):
        """Second glyph of four is at 3 o'clock, third at 6 o'clock."""
        top, right, bottom, left = circular_strategy.calculate(make_glyphs(4), default_config).positions
        assert right.x > top.x
        assert bottom.y > right.y
        assert left.x < top.x
        assert top.x == pytest.approx(bottom.x)

    def test_rotation_only_when_enabled(self, make_glyphs, default_config):
        plain = circular_strategy.calculate(make_glyphs(4), default_config).positions
        rotated = CircularStrategy(rotate_glyphs=True).calculate(make_glyphs(4), default_config).positions
        assert all(p.rotation is None for p in plain)
        assert [p.rotation for p in rotated] == pytest.approx([0, 90, 180, 270])

    def test_wide_boxes(self, make_glyphs):
        config = LayoutStrategyConfig(glyph_width=60, glyph_height=20, spacing=4, padding=0)
        result = circular_strategy.calculate(make_glyphs(5), config)
        for p in result.positions:
            assert result.bounds.contains_box(p.x, p.y, p.width, p.height)
