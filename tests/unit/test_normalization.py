"""Unit tests for input normalization.

Tests glyph_layout.utils.normalization and glyph_layout.utils.separators:
    - detect_input_type: shape classification by first element
    - normalize_glyph_input: all four input shapes plus degraded inputs
    - find_separators: word boundaries and line breaks
"""

import logging

import pytest

from glyph_layout.diagnostics import DiagnosticCode, DiagnosticLog
from glyph_layout.domain.glyphs import (
    GlyphRecord,
    GraphemeEntry,
    GraphemeRecord,
    IpaEntry,
    RenderableGlyph,
)
from glyph_layout.utils.normalization import (
    InputType,
    NormalizationContext,
    detect_input_type,
    normalize_glyph_input,
)
from glyph_layout.utils.separators import find_separators
from glyph_layout.utils.virtual import create_virtual_glyph


# ---------------------------------------------------------------------------
# TestDetectInputType
# ---------------------------------------------------------------------------

class TestDetectInputType:
    """Tests for detect_input_type."""

    @pytest.mark.parametrize("items,expected", [
        ([], InputType.EMPTY),
        ([IpaEntry('a')], InputType.SPELLING_DISPLAY),
        ([{'type': 'ipa', 'ipaCharacter': 'a'}], InputType.SPELLING_DISPLAY),
        ([GraphemeRecord(id=1)], InputType.GRAPHEMES),
        ([{'id': 1, 'glyphs': []}], InputType.GRAPHEMES),
        ([GlyphRecord(1, 'g', '')], InputType.GLYPHS),
        ([{'id': 1, 'svg_data': ''}], InputType.GLYPHS),
        ([1, 2], InputType.IDS),
        (['a'], InputType.UNSUPPORTED),
        ([True], InputType.UNSUPPORTED),
        ([{'type': 'emoji'}], InputType.UNSUPPORTED),
    ])
    def test_classification(self, items, expected):
        assert detect_input_type(items) == expected


# ---------------------------------------------------------------------------
# TestNormalizeSpelling
# ---------------------------------------------------------------------------

class TestNormalizeSpelling:
    """Tests for spelling-entry input."""

    def test_grapheme_then_ipa(self, grapheme_12):
        """A two-glyph grapheme followed by an unmapped IPA character."""
        context = NormalizationContext(grapheme_lookup={12: grapheme_12})
        entries = [GraphemeEntry(GraphemeRecord(id=12, name='ka')), IpaEntry('ə')]

        glyphs = normalize_glyph_input(entries, context)

        assert len(glyphs) == 3
        assert [g.is_virtual for g in glyphs] == [False, False, True]
        assert [g.id for g in glyphs[:2]] == [1, 2]
        assert glyphs[2].ipa_character == 'ə'
        assert [g.source_index for g in glyphs] == [0, 1, 2]

    def test_dict_entries(self, grapheme_12):
        context = NormalizationContext(grapheme_lookup={12: grapheme_12})
        entries = [
            {'type': 'grapheme', 'grapheme': {'id': 12, 'name': 'ka'}, 'position': 0},
            {'type': 'ipa', 'ipaCharacter': 'ə', 'position': 1},
        ]

        glyphs = normalize_glyph_input(entries, context)

        assert [g.is_virtual for g in glyphs] == [False, False, True]

    def test_lookup_stored_as_dict(self):
        lookup = {12: {'id': 12, 'name': 'ka', 'glyphs': [{'id': 7, 'name': 'k', 'svg_data': '<p/>'}]}}
        context = NormalizationContext(grapheme_lookup=lookup)

        glyphs = normalize_glyph_input([GraphemeEntry(GraphemeRecord(id=12))], context)

        assert [g.id for g in glyphs] == [7]

    def test_inline_glyphs_without_lookup(self, grapheme_12):
        """Without a lookup the entry's own glyphs are used."""
        glyphs = normalize_glyph_input([GraphemeEntry(grapheme_12)])
        assert [g.id for g in glyphs] == [1, 2]

    def test_bare_reference_without_lookup_contributes_nothing(self):
        glyphs = normalize_glyph_input([GraphemeEntry(GraphemeRecord(id=12)), IpaEntry('a')])
        assert len(glyphs) == 1
        assert glyphs[0].is_virtual
        assert glyphs[0].source_index == 0

    def test_empty_ipa_character_skipped(self):
        glyphs = normalize_glyph_input([IpaEntry(''), IpaEntry('a')])
        assert [g.ipa_character for g in glyphs] == ['a']

    def test_repeated_glyphs_get_own_index(self, grapheme_12):
        entries = [GraphemeEntry(grapheme_12), GraphemeEntry(grapheme_12)]
        glyphs = normalize_glyph_input(entries)
        assert [g.id for g in glyphs] == [1, 2, 1, 2]
        assert [g.source_index for g in glyphs] == [0, 1, 2, 3]

    def test_stray_element_reported(self):
        log = DiagnosticLog()
        glyphs = normalize_glyph_input([IpaEntry('a'), 42], diagnostics=log)
        assert len(glyphs) == 1
        assert log.codes() == [DiagnosticCode.UNSUPPORTED_INPUT]


# ---------------------------------------------------------------------------
# TestNormalizeGlyphsAndGraphemes
# ---------------------------------------------------------------------------

class TestNormalizeGlyphsAndGraphemes:
    """Tests for glyph-record and grapheme-record input."""

    def test_glyph_records(self, glyph_records):
        glyphs = normalize_glyph_input([glyph_records[3], glyph_records[1]])
        assert [g.id for g in glyphs] == [3, 1]
        assert [g.source_index for g in glyphs] == [0, 1]
        assert glyphs[0].svg_data == '<path d="M3 0"/>'
        assert not any(g.is_virtual for g in glyphs)

    def test_glyph_dicts(self):
        rows = [{'id': 4, 'name': 'four', 'svg_data': '<p/>', 'category': 'x', 'created_at': 0}]
        glyphs = normalize_glyph_input(rows)
        assert glyphs[0].id == 4
        assert glyphs[0].name == 'four'

    def test_renderable_glyphs_keep_virtual_flag(self):
        items = [create_virtual_glyph('ə', 9), RenderableGlyph(5, 'five', '<p/>', source_index=4)]
        glyphs = normalize_glyph_input(items)
        assert glyphs[0].is_virtual
        assert glyphs[0].ipa_character == 'ə'
        assert [g.source_index for g in glyphs] == [0, 1]

    def test_graphemes_flattened_in_order(self, grapheme_12, glyph_records):
        other = GraphemeRecord(id=13, name='sa', glyphs=(glyph_records[3],))
        glyphs = normalize_glyph_input([grapheme_12, other])
        assert [g.id for g in glyphs] == [1, 2, 3]
        assert [g.source_index for g in glyphs] == [0, 1, 2]

    def test_grapheme_dicts(self):
        rows = [{'id': 12, 'glyphs': [{'id': 1, 'svg_data': 'a'}, {'id': 2, 'svg_data': 'b'}]}]
        glyphs = normalize_glyph_input(rows)
        assert [g.id for g in glyphs] == [1, 2]


# ---------------------------------------------------------------------------
# TestNormalizeIds
# ---------------------------------------------------------------------------

class TestNormalizeIds:
    """Tests for glyph-id input."""

    def test_ids_resolved_through_lookup(self, normalization_context):
        glyphs = normalize_glyph_input([2, 5, 2], normalization_context)
        assert [g.id for g in glyphs] == [2, 5, 2]
        assert [g.source_index for g in glyphs] == [0, 1, 2]

    def test_unknown_id_dropped(self, normalization_context, caplog):
        log = DiagnosticLog()
        with caplog.at_level(logging.WARNING):
            glyphs = normalize_glyph_input([1, 99, 2], normalization_context, log)

        assert [g.id for g in glyphs] == [1, 2]
        assert [g.source_index for g in glyphs] == [0, 1]
        assert log.codes() == [DiagnosticCode.GLYPH_NOT_FOUND]
        assert log.entries[0].details == {'glyph_id': 99}
        assert "99" in caplog.text

    def test_missing_lookup(self):
        log = DiagnosticLog()
        glyphs = normalize_glyph_input([1, 2], NormalizationContext(), log)
        assert glyphs == []
        assert log.has(DiagnosticCode.MISSING_GLYPH_LOOKUP)

    def test_virtual_glyph_in_lookup_stays_virtual(self):
        context = NormalizationContext(glyph_lookup={-98: create_virtual_glyph('a', 0)})
        glyphs = normalize_glyph_input([-98], context)
        assert glyphs[0].is_virtual
        assert glyphs[0].ipa_character == 'a'

    def test_virtual_row_in_lookup_stays_virtual(self):
        row = {'id': -98, 'name': 'a', 'svg_data': '<text>a</text>', 'isVirtual': True,
               'ipaCharacter': 'a'}
        glyphs = normalize_glyph_input([-98], NormalizationContext(glyph_lookup={-98: row}))
        assert glyphs[0].id == -98
        assert glyphs[0].is_virtual
        assert glyphs[0].ipa_character == 'a'


# ---------------------------------------------------------------------------
# TestDegradedInput
# ---------------------------------------------------------------------------

class TestDegradedInput:
    """Tests for empty and unsupported input."""

    @pytest.mark.parametrize("items", [None, [], ()])
    def test_empty(self, items):
        log = DiagnosticLog()
        assert normalize_glyph_input(items, diagnostics=log) == []
        assert len(log) == 0

    def test_unsupported(self):
        log = DiagnosticLog()
        assert normalize_glyph_input(['hello', 'world'], diagnostics=log) == []
        assert log.codes() == [DiagnosticCode.UNSUPPORTED_INPUT]
        assert log.entries[0].details == {'element_type': 'str'}

    def test_diagnostics_optional(self, caplog):
        """Without a collector the condition is still logged."""
        with caplog.at_level(logging.WARNING, logger='glyph_layout'):
            assert normalize_glyph_input([3.5]) == []
        assert "Unsupported glyph input" in caplog.text


# ---------------------------------------------------------------------------
# TestMalformedRows
# ---------------------------------------------------------------------------

class TestMalformedRows:
    """Rows that cannot be converted are skipped and reported, never raised."""

    def test_glyph_row_without_id(self, caplog):
        log = DiagnosticLog()
        with caplog.at_level(logging.WARNING, logger='glyph_layout'):
            glyphs = normalize_glyph_input([{'name': 'x', 'svg_data': '<path/>'}], diagnostics=log)
        assert glyphs == []
        assert log.codes() == [DiagnosticCode.UNSUPPORTED_INPUT]
        assert log.entries[0].details == {'kind': 'glyph', 'error': 'KeyError'}
        assert "malformed glyph" in caplog.text

    def test_good_rows_kept_and_reindexed(self):
        log = DiagnosticLog()
        rows = [{'id': 1, 'svg_data': 'a'}, {'svg_data': 'b'}, {'id': 3, 'svg_data': 'c'}]
        glyphs = normalize_glyph_input(rows, diagnostics=log)
        assert [g.id for g in glyphs] == [1, 3]
        assert [g.source_index for g in glyphs] == [0, 1]
        assert len(log) == 1

    def test_stray_value_among_glyph_rows(self):
        log = DiagnosticLog()
        glyphs = normalize_glyph_input([{'id': 1, 'svg_data': 'a'}, 7], diagnostics=log)
        assert [g.id for g in glyphs] == [1]
        assert log.entries[0].details == {'kind': 'glyph', 'error': 'TypeError'}

    def test_virtual_row_without_character(self):
        log = DiagnosticLog()
        rows = [{'id': -98, 'svg_data': '', 'isVirtual': True}, {'id': 2, 'svg_data': 'b'}]
        glyphs = normalize_glyph_input(rows, diagnostics=log)
        assert [g.id for g in glyphs] == [2]
        assert log.entries[0].details['error'] == 'ValueError'

    def test_grapheme_row_without_id(self):
        log = DiagnosticLog()
        rows = [{'glyphs': [{'id': 1, 'svg_data': 'a'}]},
                {'id': 13, 'glyphs': [{'id': 3, 'svg_data': 'c'}]}]
        glyphs = normalize_glyph_input(rows, diagnostics=log)
        assert [g.id for g in glyphs] == [3]
        assert log.entries[0].details['kind'] == 'grapheme'

    def test_grapheme_glyph_without_id(self):
        log = DiagnosticLog()
        rows = [{'id': 12, 'glyphs': [{'svg_data': 'a'}]}]
        assert normalize_glyph_input(rows, diagnostics=log) == []
        assert log.codes() == [DiagnosticCode.UNSUPPORTED_INPUT]

    def test_spelling_entry_with_malformed_grapheme(self):
        log = DiagnosticLog()
        entries = [{'type': 'grapheme', 'grapheme': {'name': 'ka'}}, {'type': 'ipa', 'ipaCharacter': 'a'}]
        glyphs = normalize_glyph_input(entries, diagnostics=log)
        assert [g.ipa_character for g in glyphs] == ['a']
        assert glyphs[0].source_index == 0
        assert log.entries[0].details['kind'] == 'spelling entry'

    def test_malformed_grapheme_in_lookup(self):
        log = DiagnosticLog()
        context = NormalizationContext(grapheme_lookup={12: {'name': 'ka', 'glyphs': []}})
        glyphs = normalize_glyph_input(
            [GraphemeEntry(GraphemeRecord(id=12)), IpaEntry('ə')], context, log)
        assert [g.is_virtual for g in glyphs] == [True]
        assert log.codes() == [DiagnosticCode.UNSUPPORTED_INPUT]

    def test_malformed_row_in_glyph_lookup(self):
        log = DiagnosticLog()
        context = NormalizationContext(glyph_lookup={1: {'name': 'no id'}, 2: {'id': 2, 'svg_data': 'b'}})
        glyphs = normalize_glyph_input([1, 2], context, log)
        assert [g.id for g in glyphs] == [2]
        assert log.codes() == [DiagnosticCode.UNSUPPORTED_INPUT]

    def test_lone_surrogate_spelling(self):
        glyphs = normalize_glyph_input([IpaEntry('\ud83d')])
        assert len(glyphs) == 1
        assert glyphs[0].id == -55358

# ---------------------------------------------------------------------------
# TestFindSeparators
# ---------------------------------------------------------------------------

class TestFindSeparators:
    """Tests for find_separators."""

    def test_virtual_separators(self, make_phrase):
        separators = find_separators(make_phrase('ab c|de'))
        assert separators.word_boundaries == (2,)
        assert separators.line_breaks == (4,)

    def test_configured_separator_glyph(self, make_glyphs):
        glyphs = make_glyphs(5)
        separators = find_separators(glyphs, word_separator_ids={3})
        assert separators.word_boundaries == (2,)
        assert separators.line_breaks == ()

    def test_virtual_glyph_never_matches_separator_ids(self):
        glyph = create_virtual_glyph('a', 0)
        separators = find_separators([glyph], word_separator_ids={glyph.id})
        assert separators.word_boundaries == ()

    def test_indices_follow_normalized_sequence(self, grapheme_12):
        """A multi-glyph grapheme before a space shifts the space index."""
        glyphs = normalize_glyph_input([GraphemeEntry(grapheme_12), IpaEntry(' '), IpaEntry('a')])
        assert find_separators(glyphs).word_boundaries == (2,)

    def test_no_separators(self, make_glyphs):
        separators = find_separators(make_glyphs(3))
        assert separators.word_boundaries == ()
        assert separators.line_breaks == ()
