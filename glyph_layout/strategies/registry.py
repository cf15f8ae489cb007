"""Strategy registry for looking up layouts by name.

Display code refers to layouts by name ('ltr', 'spiral', ...). The registry
maps those names to strategy instances and never fails a lookup: an unknown
name falls back to left-to-right with a diagnostic, so a stale setting can
never blank out a display.

Example usage:
    >>> registry = StrategyRegistry.create_default()
    >>> registry.get('spiral').name
    'spiral'
    >>> registry.get('zigzag').name   # logs a warning
    'ltr'
"""

from __future__ import annotations

import logging

from ..diagnostics import DiagnosticCode, DiagnosticLog, emit
from .base import LayoutStrategy
from .block import block_strategy, boustrophedon_strategy
from .composed import ComposedBlockStrategy
from .linear import btt_strategy, ltr_strategy, rtl_strategy, ttb_strategy
from .radial import circular_strategy, spiral_strategy

logger = logging.getLogger(__name__)


class StrategyRegistry:
    """Name-keyed table of layout strategies.

    Attributes:
        fallback: Strategy returned for unknown names.
    """

    def __init__(self, fallback: LayoutStrategy = ltr_strategy):
        self._strategies: dict[str, LayoutStrategy] = {}
        self.fallback = fallback

    def register(self, name: str, strategy: LayoutStrategy) -> None:
        """Register a strategy under ``name``, replacing any previous entry."""
        self._strategies[name] = strategy

    def get(self, name: str, diagnostics: DiagnosticLog | None = None) -> LayoutStrategy:
        """Look up a strategy by name.

        Args:
            name: Registered strategy name.
            diagnostics: Optional collector for the unknown-name diagnostic.

        Returns:
            The registered strategy, or ``fallback`` when the name is unknown.
        """
        strategy = self._strategies.get(name)
        if strategy is None:
            emit(logger, diagnostics, DiagnosticCode.UNKNOWN_STRATEGY,
                 "Unknown layout strategy: %s, falling back to %s", name, self.fallback.name,
                 name=name, fallback=self.fallback.name)
            return self.fallback
        return strategy

    def __contains__(self, name: str) -> bool:
        return name in self._strategies

    def list_names(self) -> list[str]:
        """Registered names in registration order."""
        return list(self._strategies)

    @classmethod
    def create_default(cls) -> StrategyRegistry:
        """Registry holding every built-in strategy.

        The composed-block entry uses the default writing system and no
        separators; callers with a script of their own build a
        ComposedBlockStrategy directly.
        """
        registry = cls()
        for strategy in (
            ltr_strategy,
            rtl_strategy,
            ttb_strategy,
            btt_strategy,
            spiral_strategy,
            block_strategy,
            circular_strategy,
            boustrophedon_strategy,
            ComposedBlockStrategy(),
        ):
            registry.register(strategy.name, strategy)
        return registry


default_registry = StrategyRegistry.create_default()


def get_strategy(name: str, diagnostics: DiagnosticLog | None = None) -> LayoutStrategy:
    """Look up a strategy in the default registry."""
    return default_registry.get(name, diagnostics)


def get_strategy_names() -> list[str]:
    """Names of all strategies in the default registry."""
    return default_registry.list_names()
