"""Writing-system aware composed block layout.

Positions are composed from three independent axes taken from the script's
WritingSystemSettings:

    1. glyph_direction   glyphs within a word
    2. word_order        words within a line
    3. line_progression  lines within the block

The glyph sequence is first split into groups at the word-boundary and
line-break indices. Line-break glyphs end the current line and are not
rendered; word-boundary glyphs (a space, a separator grapheme) are laid out
as one-glyph words of their own. Groups are then packed into lines, wrapping
on the word-order axis when the script wraps and the config gives an
extent, and finally placed.

Each glyph's position is ``padding`` plus three offsets, one per axis; every
offset is added to x or y depending on whether its axis is horizontal.
Reversed directions walk their items back to front, and a reversed line
progression subtracts the line offset so later lines go left or up.

Example usage:
    >>> ws = WritingSystemSettings(glyph_direction='rtl')
    >>> strategy = ComposedBlockStrategy(ws, word_boundaries=[3])
    >>> result = strategy.calculate(glyphs, config)
"""

from __future__ import annotations

import logging
import math
from collections.abc import Collection, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from ..domain.config import LayoutStrategyConfig
from ..domain.glyphs import RenderableGlyph
from ..domain.writing_system import (
    DEFAULT_WRITING_SYSTEM,
    BaselineAlignment,
    Direction,
    WordWrap,
    WritingSystemSettings,
)
from .base import LayoutStrategy, Placement

logger = logging.getLogger(__name__)


@dataclass
class WordGroup:
    """Contiguous run of glyphs; ``is_line_break`` marks a line-break marker."""
    glyphs: list[RenderableGlyph]
    is_line_break: bool = False


@dataclass
class Line:
    """Words packed onto one line, with their measured sizes."""
    words: list[list[RenderableGlyph]] = field(default_factory=list)
    sizes: list[tuple[float, float]] = field(default_factory=list)
    extent: float = 0.0


def split_into_groups(
    glyphs: Sequence[RenderableGlyph],
    word_boundaries: Collection[int] = (),
    line_breaks: Collection[int] = (),
) -> list[WordGroup]:
    """Split a glyph sequence at separator indices.

    A line-break index becomes a single-glyph group flagged as a line break
    and a word-boundary index becomes a plain single-glyph group. Runs in
    between become word groups. With no separators the whole sequence is one
    group.
    """
    boundary_set = set(word_boundaries)
    break_set = set(line_breaks)

    if not boundary_set and not break_set:
        return [WordGroup(list(glyphs))]

    groups: list[WordGroup] = []
    current: list[RenderableGlyph] = []

    for i, glyph in enumerate(glyphs):
        if i in break_set or i in boundary_set:
            if current:
                groups.append(WordGroup(current))
                current = []
            groups.append(WordGroup([glyph], is_line_break=i in break_set))
        else:
            current.append(glyph)

    if current:
        groups.append(WordGroup(current))

    return groups


def measure_word(glyph_count: int, glyph_direction: Direction,
                 config: LayoutStrategyConfig) -> tuple[float, float]:
    """Size (width, height) of a word laid out along ``glyph_direction``."""
    if glyph_count == 0:
        return (0.0, 0.0)
    if glyph_direction.is_horizontal:
        return (glyph_count * config.glyph_width + (glyph_count - 1) * config.spacing,
                config.glyph_height)
    return (config.glyph_width,
            glyph_count * config.glyph_height + (glyph_count - 1) * config.spacing)


class ComposedBlockStrategy(LayoutStrategy):
    """Three-axis layout for a constructed script.

    Args:
        writing_system: Directional flow of the script.
        word_boundaries: Indices of word-separator glyphs.
        line_breaks: Indices of line-break glyphs (not rendered).
    """
    name = 'composed-block'

    def __init__(
        self,
        writing_system: WritingSystemSettings = DEFAULT_WRITING_SYSTEM,
        word_boundaries: Collection[int] = (),
        line_breaks: Collection[int] = (),
    ):
        self.writing_system = writing_system
        self.word_boundaries = frozenset(word_boundaries)
        self.line_breaks = frozenset(line_breaks)

    def _max_line_extent(self, config: LayoutStrategyConfig) -> float:
        if self.writing_system.word_order.is_horizontal:
            limit = config.max_width
        else:
            limit = config.max_height
        if not limit:
            return math.inf
        return limit - config.padding * 2

    def pack_lines(self, groups: Sequence[WordGroup], config: LayoutStrategyConfig) -> list[Line]:
        """Group words into lines at explicit breaks and, when wrapping, at overflow."""
        ws = self.writing_system
        word_horizontal = ws.word_order.is_horizontal
        max_extent = self._max_line_extent(config)
        wraps = ws.word_wrap != WordWrap.NONE

        lines: list[Line] = []
        line = Line()

        for group in groups:
            if group.is_line_break:
                if line.words:
                    lines.append(line)
                line = Line()
                continue

            size = measure_word(len(group.glyphs), ws.glyph_direction, config)
            extent = size[0] if word_horizontal else size[1]
            gap = config.spacing if line.words else 0

            if wraps and line.words and line.extent + gap + extent > max_extent:
                lines.append(line)
                line = Line()
                gap = 0

            line.words.append(group.glyphs)
            line.sizes.append(size)
            line.extent += gap + extent

        if line.words:
            lines.append(line)

        return lines

    def _place(self, glyphs: Sequence[RenderableGlyph], config: LayoutStrategyConfig) -> list[Placement]:
        ws = self.writing_system
        groups = split_into_groups(glyphs, self.word_boundaries, self.line_breaks)
        lines = self.pack_lines(groups, config)

        logger.debug("Composed block: %d glyphs, %d groups, %d lines (%s/%s/%s)",
                     len(glyphs), len(groups), len(lines),
                     ws.glyph_direction.value, ws.word_order.value, ws.line_progression.value)

        word_horizontal = ws.word_order.is_horizontal
        line_horizontal = ws.line_progression.is_horizontal
        glyph_horizontal = ws.glyph_direction.is_horizontal
        line_sign = -1 if ws.line_progression.is_reversed else 1
        glyph_step = config.cell_width if glyph_horizontal else config.cell_height

        placements: list[Placement] = []
        line_offset = 0.0

        for line in lines:
            cross_sizes = [h if word_horizontal else w for w, h in line.sizes]
            line_cross = max(cross_sizes)

            word_order = range(len(line.words))
            if ws.word_order.is_reversed:
                word_order = reversed(word_order)

            word_offset = 0.0
            for wi in word_order:
                word = line.words[wi]
                width, height = line.sizes[wi]
                baseline = self._baseline_shift(line_cross, cross_sizes[wi])

                glyph_seq = reversed(word) if ws.glyph_direction.is_reversed else word
                glyph_offset = 0.0
                for glyph in glyph_seq:
                    x = y = config.padding

                    if line_horizontal:
                        x += line_offset * line_sign
                    else:
                        y += line_offset * line_sign

                    if word_horizontal:
                        x += word_offset
                        y += baseline
                    else:
                        y += word_offset
                        x += baseline

                    if glyph_horizontal:
                        x += glyph_offset
                    else:
                        y += glyph_offset

                    placements.append(Placement(glyph, x, y))
                    glyph_offset += glyph_step

                word_offset += (width if word_horizontal else height) + config.spacing

            line_offset += line_cross + config.spacing

        return placements

    def _baseline_shift(self, line_cross: float, word_cross: float) -> float:
        alignment = self.writing_system.baseline_alignment
        if alignment == BaselineAlignment.CENTER:
            return (line_cross - word_cross) / 2
        if alignment == BaselineAlignment.BOTTOM:
            return line_cross - word_cross
        return 0.0


def create_composed_block_strategy(
    writing_system: WritingSystemSettings | Mapping[str, Any] | None = None,
    word_boundaries: Collection[int] | None = None,
    line_breaks: Collection[int] | None = None,
) -> ComposedBlockStrategy:
    """Build a composed-block strategy from settings in either form.

    Args:
        writing_system: WritingSystemSettings, a stored settings dict, or None
            for the default left-to-right, top-to-bottom script.
        word_boundaries: Indices of word-separator glyphs.
        line_breaks: Indices of line-break glyphs.

    Returns:
        A configured ComposedBlockStrategy.
    """
    if writing_system is None:
        writing_system = DEFAULT_WRITING_SYSTEM
    elif not isinstance(writing_system, WritingSystemSettings):
        writing_system = WritingSystemSettings.from_dict(writing_system)
    return ComposedBlockStrategy(writing_system, word_boundaries or (), line_breaks or ())
