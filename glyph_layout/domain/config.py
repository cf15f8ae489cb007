"""Layout configuration and preset resolution.

A LayoutStrategyConfig describes the fixed glyph box every strategy works
with, plus the optional extents used for wrapping. It is validated when it
is built, so strategies never check it again.

Configurations are resolved from three layers, later layers winning:

    DEFAULT_LAYOUT_CONFIG  <-  preset (optional)  <-  caller overrides

Example usage:
    >>> resolve_layout_config(None).glyph_width
    20
    >>> resolve_layout_config('detailed').padding
    12
    >>> resolve_layout_config({'spacing': 0, 'maxWidth': 200}).max_width
    200
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any, Union

from ..diagnostics import DiagnosticCode, DiagnosticLog, emit

logger = logging.getLogger(__name__)


class LayoutConfigError(ValueError):
    """Raised when a layout configuration violates its invariants."""


@dataclass(frozen=True)
class LayoutStrategyConfig:
    """Glyph box geometry shared by all layout strategies.

    Attributes:
        glyph_width: Width of each glyph box. Must be > 0.
        glyph_height: Height of each glyph box. Must be > 0.
        spacing: Gap between adjacent glyph boxes. Must be >= 0.
        padding: Margin around the whole layout. Must be >= 0.
        max_width: Optional horizontal extent used by wrapping strategies.
        max_height: Optional vertical extent used by wrapping strategies.

    Raises:
        LayoutConfigError: On construction, if any invariant is violated.
    """
    glyph_width: float
    glyph_height: float
    spacing: float
    padding: float
    max_width: float | None = None
    max_height: float | None = None

    def __post_init__(self):
        if self.glyph_width <= 0 or self.glyph_height <= 0:
            raise LayoutConfigError(
                f"glyph box must be positive, got {self.glyph_width}x{self.glyph_height}")
        if self.spacing < 0:
            raise LayoutConfigError(f"spacing must be >= 0, got {self.spacing}")
        if self.padding < 0:
            raise LayoutConfigError(f"padding must be >= 0, got {self.padding}")
        for name in ('max_width', 'max_height'):
            value = getattr(self, name)
            if value is not None and value <= 0:
                raise LayoutConfigError(f"{name} must be positive when set, got {value}")

    @property
    def cell_width(self) -> float:
        """Horizontal advance from one glyph box to the next."""
        return self.glyph_width + self.spacing

    @property
    def cell_height(self) -> float:
        """Vertical advance from one glyph box to the next."""
        return self.glyph_height + self.spacing

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization (unset extents omitted)."""
        d = {f.name: getattr(self, f.name) for f in fields(self)}
        return {k: v for k, v in d.items() if v is not None}


class LayoutPreset(str, Enum):
    """Named configurations for the places glyphs are displayed."""
    COMPACT = 'compact'
    DETAILED = 'detailed'
    TREE = 'tree'
    INPUT = 'input'


DEFAULT_LAYOUT_CONFIG = LayoutStrategyConfig(glyph_width=20, glyph_height=20, spacing=2, padding=4)

LAYOUT_PRESETS: dict[LayoutPreset, dict[str, float]] = {
    LayoutPreset.COMPACT: {'glyph_width': 20, 'glyph_height': 20, 'spacing': 2, 'padding': 4},
    LayoutPreset.DETAILED: {'glyph_width': 40, 'glyph_height': 40, 'spacing': 6, 'padding': 12},
    LayoutPreset.TREE: {'glyph_width': 14, 'glyph_height': 14, 'spacing': 1, 'padding': 2},
    LayoutPreset.INPUT: {'glyph_width': 48, 'glyph_height': 48, 'spacing': 8, 'padding': 16},
}

# camelCase keys used by stored UI settings
_FIELD_ALIASES = {
    'glyphWidth': 'glyph_width',
    'glyphHeight': 'glyph_height',
    'maxWidth': 'max_width',
    'maxHeight': 'max_height',
}

_CONFIG_FIELDS = frozenset(f.name for f in fields(LayoutStrategyConfig))

ConfigInput = Union[LayoutStrategyConfig, LayoutPreset, str, Mapping[str, Any], None]


def resolve_layout_config(
    config: ConfigInput = None,
    diagnostics: DiagnosticLog | None = None,
) -> LayoutStrategyConfig:
    """Resolve a partial config or preset name into a complete config.

    Args:
        config: One of
            - None: the default configuration.
            - A LayoutPreset member or its string value: default plus preset.
            - A mapping of field overrides (snake_case or camelCase keys):
              default plus overrides, shallow merge. Keys that name no
              config field are dropped with an ``UNKNOWN_CONFIG_FIELD``
              diagnostic.
            - A LayoutStrategyConfig: returned unchanged.
        diagnostics: Optional collector for dropped override keys.

    Returns:
        A validated LayoutStrategyConfig.

    Raises:
        ValueError: If a preset name is not a LayoutPreset member.
        LayoutConfigError: If the merged values violate the config invariants.
    """
    if config is None:
        return DEFAULT_LAYOUT_CONFIG

    if isinstance(config, LayoutStrategyConfig):
        return config

    if isinstance(config, str):
        preset = LayoutPreset(config)
        return replace(DEFAULT_LAYOUT_CONFIG, **LAYOUT_PRESETS[preset])

    overrides = {}
    for key, value in config.items():
        name = _FIELD_ALIASES.get(key, key)
        if name not in _CONFIG_FIELDS:
            emit(logger, diagnostics, DiagnosticCode.UNKNOWN_CONFIG_FIELD,
                 "Ignoring unknown layout config field %r", key, field=key)
            continue
        overrides[name] = value
    return replace(DEFAULT_LAYOUT_CONFIG, **overrides)
