"""Input normalization.

Callers hand the layout engine glyphs in one of four shapes:

    - spelling entries: GraphemeEntry / IpaEntry (or their dict form)
    - glyph records: GlyphRecord, RenderableGlyph (or glyph row dicts)
    - grapheme records: GraphemeRecord (or grapheme row dicts)
    - glyph ids: ints, resolved through a glyph lookup

normalize_glyph_input() detects the shape from the first element and
converts everything into a flat list of RenderableGlyph with
``source_index`` counting 0, 1, 2, ... over the output.

Unresolvable pieces are dropped and reported; normalization never raises on
bad data, since a partial spelling is more useful to the renderer than none.

Example usage:
    >>> context = NormalizationContext(grapheme_lookup={12: grapheme_12})
    >>> glyphs = normalize_glyph_input(
    ...     [GraphemeEntry(GraphemeRecord(id=12)), IpaEntry('ə')], context)
    >>> [g.is_virtual for g in glyphs]
    [False, False, True]
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from ..diagnostics import DiagnosticCode, DiagnosticLog, emit
from ..domain.glyphs import (
    GlyphRecord,
    GraphemeEntry,
    GraphemeRecord,
    IpaEntry,
    RenderableGlyph,
    spelling_entry_from_dict,
)
from .virtual import create_virtual_glyph

logger = logging.getLogger(__name__)

GlyphLike = Union[GlyphRecord, RenderableGlyph, Mapping[str, Any]]
GraphemeLike = Union[GraphemeRecord, Mapping[str, Any]]


class InputType(str, Enum):
    """Shape of a normalizer input, as detected from its first element."""
    EMPTY = 'empty'
    SPELLING_DISPLAY = 'spelling-display'
    GRAPHEMES = 'graphemes'
    GLYPHS = 'glyphs'
    IDS = 'ids'
    UNSUPPORTED = 'unsupported'


@dataclass(frozen=True)
class NormalizationContext:
    """Lookups supplied by the glyph database.

    Attributes:
        glyph_lookup: Glyph id -> glyph record. Required for id input.
        grapheme_lookup: Grapheme id -> full grapheme with its glyphs.
    """
    glyph_lookup: Mapping[int, GlyphLike] | None = None
    grapheme_lookup: Mapping[int, GraphemeLike] | None = None


def _is_spelling_entry(item: Any) -> bool:
    if isinstance(item, (GraphemeEntry, IpaEntry)):
        return True
    return isinstance(item, Mapping) and item.get('type') in ('grapheme', 'ipa')


def _is_grapheme(item: Any) -> bool:
    if isinstance(item, GraphemeRecord):
        return True
    return isinstance(item, Mapping) and isinstance(item.get('glyphs'), (list, tuple))


def _is_glyph(item: Any) -> bool:
    if isinstance(item, (GlyphRecord, RenderableGlyph)):
        return True
    return isinstance(item, Mapping) and 'svg_data' in item


def _is_glyph_id(item: Any) -> bool:
    return isinstance(item, int) and not isinstance(item, bool)


def detect_input_type(items: Sequence[Any]) -> InputType:
    """Classify an input sequence by inspecting its first element.

    Every input gets a classification; shapes the normalizer cannot handle
    come back as ``InputType.UNSUPPORTED``.
    """
    if not items:
        return InputType.EMPTY

    first = items[0]
    if _is_spelling_entry(first):
        return InputType.SPELLING_DISPLAY
    if _is_grapheme(first):
        return InputType.GRAPHEMES
    if _is_glyph(first):
        return InputType.GLYPHS
    if _is_glyph_id(first):
        return InputType.IDS
    return InputType.UNSUPPORTED


# Conversion errors raised by from_dict on malformed rows.
_ROW_ERRORS = (AttributeError, KeyError, TypeError, ValueError)


def _report_malformed(kind: str, item: Any, error: Exception,
                      diagnostics: DiagnosticLog | None) -> None:
    emit(logger, diagnostics, DiagnosticCode.UNSUPPORTED_INPUT,
         "Skipping malformed %s %r (%s: %s)", kind, item, type(error).__name__, error,
         kind=kind, error=type(error).__name__)


def _as_grapheme(item: GraphemeLike) -> GraphemeRecord:
    return item if isinstance(item, GraphemeRecord) else GraphemeRecord.from_dict(item)


def _to_renderable(item: GlyphLike, source_index: int) -> RenderableGlyph:
    """Renderable copy of a glyph-like item at ``source_index``.

    Already-renderable glyphs and rows flagged ``isVirtual`` keep their
    virtual flag; records and plain rows are wrapped as real glyphs.
    """
    if isinstance(item, RenderableGlyph):
        return item.with_source_index(source_index)
    if isinstance(item, GlyphRecord):
        return RenderableGlyph.from_record(item, source_index)
    if not isinstance(item, Mapping):
        raise TypeError(f"expected a glyph, got {type(item).__name__}")
    return RenderableGlyph.from_dict(item, source_index)


def _append_glyph(result: list[RenderableGlyph], item: GlyphLike,
                  diagnostics: DiagnosticLog | None) -> None:
    try:
        result.append(_to_renderable(item, len(result)))
    except _ROW_ERRORS as e:
        _report_malformed('glyph', item, e, diagnostics)


def _resolve_grapheme(item: GraphemeLike,
                      diagnostics: DiagnosticLog | None) -> GraphemeRecord | None:
    try:
        return _as_grapheme(item)
    except _ROW_ERRORS as e:
        _report_malformed('grapheme', item, e, diagnostics)
        return None


def _normalize_spelling(
    entries: Sequence[Any],
    context: NormalizationContext,
    diagnostics: DiagnosticLog | None,
) -> list[RenderableGlyph]:
    result: list[RenderableGlyph] = []

    for entry in entries:
        if isinstance(entry, Mapping) and _is_spelling_entry(entry):
            try:
                entry = spelling_entry_from_dict(entry)
            except _ROW_ERRORS as e:
                _report_malformed('spelling entry', entry, e, diagnostics)
                continue

        if not isinstance(entry, (GraphemeEntry, IpaEntry)):
            emit(logger, diagnostics, DiagnosticCode.UNSUPPORTED_INPUT,
                 "Skipping non-spelling entry in spelling input: %r", entry)
            continue

        if isinstance(entry, GraphemeEntry):
            if entry.grapheme is None:
                continue
            full = None
            if context.grapheme_lookup is not None:
                full = context.grapheme_lookup.get(entry.grapheme.id)
            grapheme = entry.grapheme
            if full is not None:
                grapheme = _resolve_grapheme(full, diagnostics)
                if grapheme is None:
                    continue
            for glyph in grapheme.glyphs:
                _append_glyph(result, glyph, diagnostics)
        elif entry.ipa_character:
            result.append(create_virtual_glyph(entry.ipa_character, len(result)))

    return result


def _normalize_glyphs(
    glyphs: Sequence[GlyphLike],
    diagnostics: DiagnosticLog | None,
) -> list[RenderableGlyph]:
    result: list[RenderableGlyph] = []
    for glyph in glyphs:
        _append_glyph(result, glyph, diagnostics)
    return result


def _normalize_graphemes(
    graphemes: Sequence[GraphemeLike],
    diagnostics: DiagnosticLog | None,
) -> list[RenderableGlyph]:
    result: list[RenderableGlyph] = []
    for item in graphemes:
        grapheme = _resolve_grapheme(item, diagnostics)
        if grapheme is None:
            continue
        for glyph in grapheme.glyphs:
            _append_glyph(result, glyph, diagnostics)
    return result


def _normalize_ids(
    ids: Sequence[int],
    context: NormalizationContext,
    diagnostics: DiagnosticLog | None,
) -> list[RenderableGlyph]:
    if context.glyph_lookup is None:
        emit(logger, diagnostics, DiagnosticCode.MISSING_GLYPH_LOOKUP,
             "Glyph id input needs a glyph lookup; none was provided")
        return []

    result: list[RenderableGlyph] = []
    for glyph_id in ids:
        glyph = context.glyph_lookup.get(glyph_id)
        if glyph is None:
            emit(logger, diagnostics, DiagnosticCode.GLYPH_NOT_FOUND,
                 "Glyph with id %s not found in glyph lookup", glyph_id,
                 glyph_id=glyph_id)
            continue
        _append_glyph(result, glyph, diagnostics)
    return result


def normalize_glyph_input(
    items: Sequence[Any] | None,
    context: NormalizationContext | None = None,
    diagnostics: DiagnosticLog | None = None,
) -> list[RenderableGlyph]:
    """Normalize any supported input shape to a list of RenderableGlyph.

    Args:
        items: Spelling entries, glyph records, grapheme records or glyph ids.
        context: Lookups used to resolve ids and grapheme references.
        diagnostics: Optional collector for dropped-input diagnostics.

    Returns:
        Glyphs in display order with ``source_index`` 0..n-1. Empty when the
        input is empty, unsupported, or cannot be resolved at all. Rows that
        cannot be converted are skipped with an ``UNSUPPORTED_INPUT``
        diagnostic.
    """
    context = context or NormalizationContext()
    input_type = detect_input_type(items or ())

    if input_type == InputType.EMPTY:
        return []
    if input_type == InputType.SPELLING_DISPLAY:
        return _normalize_spelling(items, context, diagnostics)
    if input_type == InputType.GRAPHEMES:
        return _normalize_graphemes(items, diagnostics)
    if input_type == InputType.GLYPHS:
        return _normalize_glyphs(items, diagnostics)
    if input_type == InputType.IDS:
        return _normalize_ids(items, context, diagnostics)

    emit(logger, diagnostics, DiagnosticCode.UNSUPPORTED_INPUT,
         "Unsupported glyph input (first element: %s)", type(items[0]).__name__,
         element_type=type(items[0]).__name__)
    return []
