"""Service layer for glyph layout.

This module is the single entry point used by display code. LayoutService
runs the whole pipeline:

    raw input -> normalize -> resolve config -> pick strategy -> calculate

and returns a LayoutOutcome carrying the normalized glyphs, the resolved
config, the layout result and any diagnostics raised on the way. The
individual steps are re-exported here for callers that drive them one by
one.

Example usage:
    Laying out a spelling::

        from glyph_layout.api.services import LayoutService

        service = LayoutService()
        outcome = service.layout(entries, strategy='block', config='detailed',
                                 context=context)
        svg_view_box = outcome.view_box
        for p in outcome.result.positions:
            print(p.glyph.name, p.x, p.y)

    Laying out a translated phrase in the script's own direction::

        outcome = service.layout_phrase(combined_spelling, settings.writing_system,
                                        config={'max_width': 240})
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from ..diagnostics import Diagnostic, DiagnosticLog
from ..domain.config import ConfigInput, LayoutStrategyConfig, resolve_layout_config
from ..domain.geometry import LayoutResult, bounds_to_viewbox
from ..domain.glyphs import RenderableGlyph
from ..domain.writing_system import WritingSystemSettings
from ..strategies.base import LayoutStrategy
from ..strategies.composed import create_composed_block_strategy
from ..strategies.registry import StrategyRegistry, default_registry, get_strategy
from ..utils.normalization import NormalizationContext, normalize_glyph_input
from ..utils.separators import find_separators

_logger = logging.getLogger(__name__)

__all__ = [
    'LayoutService', 'LayoutOutcome',
    'normalize_glyph_input', 'resolve_layout_config', 'get_strategy', 'bounds_to_viewbox',
]


@dataclass(frozen=True)
class LayoutOutcome:
    """Everything produced by one layout call.

    Attributes:
        glyphs: Normalized glyphs fed to the strategy.
        config: Resolved layout configuration.
        strategy: Name of the strategy that actually ran (the fallback name
            when the requested one was unknown).
        result: Positions and bounds.
        diagnostics: Conditions that degraded the result, in order.
    """
    glyphs: list[RenderableGlyph]
    config: LayoutStrategyConfig
    strategy: str
    result: LayoutResult
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def view_box(self) -> str:
        return bounds_to_viewbox(self.result.bounds)

    @property
    def has_virtual_glyphs(self) -> bool:
        return any(g.is_virtual for g in self.glyphs)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'strategy': self.strategy,
            'config': self.config.to_dict(),
            'view_box': self.view_box,
            **self.result.to_dict(),
            'diagnostics': [d.to_dict() for d in self.diagnostics],
        }


@dataclass
class LayoutService:
    """Facade over normalization, config resolution and strategy dispatch.

    Attributes:
        registry: Strategy registry used for name lookups.
    """
    registry: StrategyRegistry = field(default_factory=lambda: default_registry)

    def layout(
        self,
        items: Sequence[Any],
        strategy: str | LayoutStrategy = 'ltr',
        config: ConfigInput = None,
        context: NormalizationContext | None = None,
    ) -> LayoutOutcome:
        """Normalize ``items`` and lay them out.

        Args:
            items: Any input shape accepted by normalize_glyph_input.
            strategy: Registered strategy name or a strategy instance.
            config: Partial config, preset name, or resolved config.
            context: Glyph and grapheme lookups.

        Returns:
            LayoutOutcome for the call. Never raises on bad glyph data or an
            unknown strategy name; those are reported in ``diagnostics``.
        """
        diagnostics = DiagnosticLog()
        glyphs = normalize_glyph_input(items, context, diagnostics)
        resolved = resolve_layout_config(config, diagnostics)
        if isinstance(strategy, str):
            strategy = self.registry.get(strategy, diagnostics)
        return self._run(glyphs, resolved, strategy, diagnostics)

    def layout_phrase(
        self,
        items: Sequence[Any],
        writing_system: WritingSystemSettings | Mapping[str, Any] | None = None,
        config: ConfigInput = None,
        context: NormalizationContext | None = None,
        word_separator_ids: Collection[int] = (),
    ) -> LayoutOutcome:
        """Lay out a multi-word phrase with the composed-block strategy.

        Word boundaries and line breaks are detected on the normalized glyphs
        (virtual space and newline glyphs, plus ``word_separator_ids``).

        Args:
            items: Spelling of the whole phrase, separators included.
            writing_system: Script flow settings (object or stored dict).
            config: Partial config, preset name, or resolved config.
            context: Glyph and grapheme lookups.
            word_separator_ids: Ids of real glyphs used as word separators.

        Returns:
            LayoutOutcome; line-break glyphs are not positioned.
        """
        diagnostics = DiagnosticLog()
        glyphs = normalize_glyph_input(items, context, diagnostics)
        resolved = resolve_layout_config(config, diagnostics)
        separators = find_separators(glyphs, word_separator_ids)
        strategy = create_composed_block_strategy(
            writing_system, separators.word_boundaries, separators.line_breaks)
        return self._run(glyphs, resolved, strategy, diagnostics)

    def _run(
        self,
        glyphs: list[RenderableGlyph],
        config: LayoutStrategyConfig,
        strategy: LayoutStrategy,
        diagnostics: DiagnosticLog,
    ) -> LayoutOutcome:
        result = strategy.calculate(glyphs, config)
        _logger.debug("Laid out %d glyphs with %s: %d positions, %s",
                      len(glyphs), strategy.name, len(result.positions),
                      bounds_to_viewbox(result.bounds))
        return LayoutOutcome(
            glyphs=glyphs,
            config=config,
            strategy=strategy.name,
            result=result,
            diagnostics=list(diagnostics),
        )
