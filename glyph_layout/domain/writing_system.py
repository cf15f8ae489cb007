"""Writing-system descriptor for composed layouts.

A script's flow is described on three independent axes:

    glyph_direction   how glyphs follow each other inside a word
    word_order        how words follow each other inside a line
    line_progression  where the next line goes

Each axis takes one of four directions: ltr, rtl, ttb (top to bottom) and
btu (bottom to top). Alignment and wrapping complete the descriptor.

Example usage:
    >>> ws = WritingSystemSettings.from_dict({'glyphDirection': 'rtl'})
    >>> ws.glyph_direction.is_reversed
    True
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any


class Direction(str, Enum):
    LTR = 'ltr'
    RTL = 'rtl'
    TTB = 'ttb'
    BTU = 'btu'

    @property
    def is_horizontal(self) -> bool:
        return self in (Direction.LTR, Direction.RTL)

    @property
    def is_reversed(self) -> bool:
        """True for directions that run against the canvas axes (rtl, btu)."""
        return self in (Direction.RTL, Direction.BTU)


class BaselineAlignment(str, Enum):
    TOP = 'top'
    CENTER = 'center'
    BOTTOM = 'bottom'


class WordWrap(str, Enum):
    NONE = 'none'
    WRAP = 'wrap'

    @classmethod
    def _missing_(cls, value):
        # Stored settings use 'word' and 'glyph'; both wrap at word groups.
        if value in ('word', 'glyph'):
            return cls.WRAP
        return None


@dataclass(frozen=True)
class WritingSystemSettings:
    """Directional flow of a constructed script.

    Attributes:
        glyph_direction: Flow of glyphs within a word.
        word_order: Flow of words within a line.
        line_progression: Where new lines are placed.
        baseline_alignment: Alignment of words across the word-order axis.
        word_wrap: Whether lines wrap at the configured extent.
    """
    glyph_direction: Direction = Direction.LTR
    word_order: Direction = Direction.LTR
    line_progression: Direction = Direction.TTB
    baseline_alignment: BaselineAlignment = BaselineAlignment.BOTTOM
    word_wrap: WordWrap = WordWrap.WRAP

    def __post_init__(self):
        # Accept plain strings; frozen, so go through object.__setattr__
        object.__setattr__(self, 'glyph_direction', Direction(self.glyph_direction))
        object.__setattr__(self, 'word_order', Direction(self.word_order))
        object.__setattr__(self, 'line_progression', Direction(self.line_progression))
        object.__setattr__(self, 'baseline_alignment', BaselineAlignment(self.baseline_alignment))
        object.__setattr__(self, 'word_wrap', WordWrap(self.word_wrap))

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> WritingSystemSettings:
        """Create from stored settings (camelCase or snake_case keys).

        Missing keys take the defaults; unrelated keys are ignored.
        """
        keys = {
            'glyph_direction': ('glyphDirection', 'glyph_direction'),
            'word_order': ('wordOrder', 'word_order'),
            'line_progression': ('lineProgression', 'line_progression'),
            'baseline_alignment': ('baselineAlignment', 'baseline_alignment'),
            'word_wrap': ('wordWrap', 'word_wrap'),
        }
        kwargs = {}
        for name, aliases in keys.items():
            for alias in aliases:
                if alias in d:
                    kwargs[name] = d[alias]
                    break
        return cls(**kwargs)

    def to_dict(self) -> dict[str, str]:
        return {
            'glyph_direction': self.glyph_direction.value,
            'word_order': self.word_order.value,
            'line_progression': self.line_progression.value,
            'baseline_alignment': self.baseline_alignment.value,
            'word_wrap': self.word_wrap.value,
        }


DEFAULT_WRITING_SYSTEM = WritingSystemSettings()
