"""Layout strategies.

Every strategy maps a normalized glyph sequence and a LayoutStrategyConfig
to a LayoutResult (positions plus bounds). The module exports:

Strategy classes:
    LayoutStrategy: Abstract base class.
    LinearStrategy: Single row or column (ltr, rtl, ttb, btt).
    BlockStrategy: Wrapping rows.
    BoustrophedonStrategy: Wrapping rows of alternating direction.
    SpiralStrategy: Outward square spiral.
    CircularStrategy: Ring, clockwise from 12 o'clock.
    ComposedBlockStrategy: Writing-system aware three-axis layout.

Registry:
    StrategyRegistry, get_strategy, get_strategy_names.

Example usage:
    >>> from glyph_layout.strategies import get_strategy
    >>> from glyph_layout.domain import resolve_layout_config
    >>> result = get_strategy('block').calculate(glyphs, resolve_layout_config('compact'))
"""

from .base import LayoutStrategy, Placement
from .block import BlockStrategy, BoustrophedonStrategy, glyphs_per_row
from .composed import ComposedBlockStrategy, create_composed_block_strategy, split_into_groups
from .linear import LinearStrategy
from .radial import CircularStrategy, SpiralStrategy, spiral_grid
from .registry import StrategyRegistry, default_registry, get_strategy, get_strategy_names

__all__ = [
    'LayoutStrategy', 'Placement',
    'LinearStrategy', 'BlockStrategy', 'BoustrophedonStrategy',
    'SpiralStrategy', 'CircularStrategy', 'ComposedBlockStrategy',
    'create_composed_block_strategy', 'split_into_groups', 'glyphs_per_row', 'spiral_grid',
    'StrategyRegistry', 'default_registry', 'get_strategy', 'get_strategy_names',
]
