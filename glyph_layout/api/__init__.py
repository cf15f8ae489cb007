"""API module for glyph layout.

This module provides the facade used by display code.

Classes:
    LayoutService: Normalize, resolve config, dispatch and calculate.
    LayoutOutcome: Result of one layout call, with diagnostics.

Functions:
    normalize_glyph_input, resolve_layout_config, get_strategy,
    bounds_to_viewbox: The individual pipeline steps.

Example usage:
    >>> from glyph_layout.api import LayoutService
    >>> outcome = LayoutService().layout(nine_glyphs, strategy='spiral')
    >>> outcome.view_box
    '0 0 72 72'
"""

from .services import (
    LayoutOutcome,
    LayoutService,
    bounds_to_viewbox,
    get_strategy,
    normalize_glyph_input,
    resolve_layout_config,
)

__all__ = [
    'LayoutService', 'LayoutOutcome',
    'normalize_glyph_input', 'resolve_layout_config', 'get_strategy', 'bounds_to_viewbox',
]
