"""Glyph layout package.

Positions the glyphs of a constructed writing system on a 2D canvas. Glyphs
arrive in several shapes (spelling entries, graphemes, glyph records, bare
ids) and are normalized into one renderable form, then handed to a named
layout strategy that returns a position for every glyph together with the
bounding box a renderer needs for its viewBox.

The package is organized into the following modules:
    domain: Value objects including LayoutStrategyConfig, RenderableGlyph,
        PositionedGlyph, LayoutBounds and WritingSystemSettings.
    utils: Input normalization, virtual IPA glyphs and separator detection.
    strategies: Linear, block, boustrophedon, spiral, circular and
        composed-block layouts, plus the name-keyed registry.
    api: LayoutService facade returning a LayoutOutcome.
    diagnostics: Structured records for degraded results.
    logging_config: configure_logging for host applications.

Example usage:
    Laying out a spelling::

        from glyph_layout import LayoutService, NormalizationContext

        context = NormalizationContext(grapheme_lookup=graphemes)
        outcome = LayoutService().layout(spelling, strategy='ltr', context=context)
        print(outcome.view_box)

    Driving a strategy directly::

        from glyph_layout import get_strategy, resolve_layout_config

        result = get_strategy('circular').calculate(glyphs, resolve_layout_config('detailed'))

Attributes:
    __version__ (str): Package version string.
    __all__ (list): List of public symbols exported by this package.
"""

from .api import LayoutOutcome, LayoutService
from .diagnostics import Diagnostic, DiagnosticCode, DiagnosticLog
from .domain import (
    LayoutBounds,
    LayoutResult,
    LayoutStrategyConfig,
    PositionedGlyph,
    RenderableGlyph,
    WritingSystemSettings,
    bounds_to_viewbox,
    resolve_layout_config,
)
from .strategies import create_composed_block_strategy, get_strategy, get_strategy_names
from .utils import NormalizationContext, find_separators, normalize_glyph_input

__all__ = [
    # Domain objects
    'LayoutStrategyConfig', 'RenderableGlyph', 'PositionedGlyph',
    'LayoutBounds', 'LayoutResult', 'WritingSystemSettings',
    # Pipeline steps
    'normalize_glyph_input', 'NormalizationContext', 'resolve_layout_config',
    'get_strategy', 'get_strategy_names', 'create_composed_block_strategy',
    'find_separators', 'bounds_to_viewbox',
    # Services
    'LayoutService', 'LayoutOutcome',
    # Diagnostics
    'Diagnostic', 'DiagnosticCode', 'DiagnosticLog',
]

__version__ = '1.0.0'
