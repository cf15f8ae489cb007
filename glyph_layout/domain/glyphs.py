"""Glyph and grapheme value objects.

Records coming from the glyph database (GlyphRecord, GraphemeRecord), the
spelling entries that reference them (GraphemeEntry, IpaEntry), and the
normalized RenderableGlyph that every layout strategy consumes.

The database hands rows over as plain dictionaries in places, so each
record type has a ``from_dict`` constructor that accepts those rows.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any, Union


@dataclass(frozen=True)
class GlyphRecord:
    """A stored glyph drawing."""
    id: int
    name: str
    svg_data: str
    category: str | None = None
    notes: str | None = None

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> GlyphRecord:
        """Create from a database row (extra columns are ignored)."""
        return cls(
            id=d['id'],
            name=d.get('name', ''),
            svg_data=d.get('svg_data', ''),
            category=d.get('category'),
            notes=d.get('notes'),
        )


@dataclass(frozen=True)
class GraphemeRecord:
    """A grapheme with its constituent glyphs in stored order.

    ``glyphs`` may be empty when only a reference (id and name) is known;
    the normalizer then resolves the full record through a lookup.
    """
    id: int
    name: str = ''
    glyphs: tuple[GlyphRecord, ...] = ()
    category: str | None = None
    notes: str | None = None

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> GraphemeRecord:
        """Create from a database row whose ``glyphs`` holds dicts or records."""
        glyphs = tuple(
            g if isinstance(g, GlyphRecord) else GlyphRecord.from_dict(g)
            for g in d.get('glyphs') or ()
        )
        return cls(
            id=d['id'],
            name=d.get('name', ''),
            glyphs=glyphs,
            category=d.get('category'),
            notes=d.get('notes'),
        )


@dataclass(frozen=True)
class GraphemeEntry:
    """Spelling entry that refers to a grapheme."""
    grapheme: GraphemeRecord
    position: int = 0


@dataclass(frozen=True)
class IpaEntry:
    """Spelling entry for an IPA character with no grapheme mapping."""
    ipa_character: str
    position: int = 0


SpellingEntry = Union[GraphemeEntry, IpaEntry]


def spelling_entry_from_dict(d: Mapping[str, Any]) -> SpellingEntry:
    """Convert a ``{'type': 'grapheme' | 'ipa', ...}`` dict to an entry.

    Raises:
        ValueError: If ``type`` is neither 'grapheme' nor 'ipa'.
    """
    kind = d.get('type')
    position = d.get('position', 0)
    if kind == 'grapheme':
        grapheme = d.get('grapheme')
        if grapheme is not None and not isinstance(grapheme, GraphemeRecord):
            grapheme = GraphemeRecord.from_dict(grapheme)
        return GraphemeEntry(grapheme=grapheme, position=position)
    if kind == 'ipa':
        return IpaEntry(ipa_character=d.get('ipaCharacter') or d.get('ipa_character') or '',
                        position=position)
    raise ValueError(f"Unknown spelling entry type: {kind!r}")


@dataclass(frozen=True)
class RenderableGlyph:
    """Normalized glyph ready for layout.

    Attributes:
        id: Glyph id. Negative ids mark virtual glyphs.
        name: Display name.
        svg_data: Opaque drawable payload passed through to the renderer.
        is_virtual: True for synthesized IPA placeholder glyphs.
        ipa_character: Source character of a virtual glyph.
        source_index: Position in the normalized output sequence.

    Raises:
        ValueError: If ``is_virtual`` is set without ``ipa_character``.
    """
    id: int
    name: str
    svg_data: str
    is_virtual: bool = False
    ipa_character: str | None = None
    source_index: int = 0

    def __post_init__(self):
        if self.is_virtual and not self.ipa_character:
            raise ValueError(f"virtual glyph {self.id} has no ipa_character")

    def with_source_index(self, source_index: int) -> RenderableGlyph:
        return replace(self, source_index=source_index)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        d = {
            'id': self.id,
            'name': self.name,
            'svg_data': self.svg_data,
            'is_virtual': self.is_virtual,
            'source_index': self.source_index,
        }
        if self.ipa_character is not None:
            d['ipa_character'] = self.ipa_character
        return d

    @classmethod
    def from_dict(cls, d: Mapping[str, Any], source_index: int) -> RenderableGlyph:
        """Create from a glyph row, keeping the virtual flag when the row has one.

        Accepts camelCase (``isVirtual``, ``ipaCharacter``) or snake_case keys.

        Raises:
            KeyError: If the row has no ``id``.
            ValueError: If the row is virtual but has no IPA character.
        """
        is_virtual = bool(d.get('isVirtual') or d.get('is_virtual'))
        return cls(
            id=d['id'],
            name=d.get('name', ''),
            svg_data=d.get('svg_data', ''),
            is_virtual=is_virtual,
            ipa_character=(d.get('ipaCharacter') or d.get('ipa_character')) if is_virtual else None,
            source_index=source_index,
        )

    @classmethod
    def from_record(cls, record: GlyphRecord, source_index: int) -> RenderableGlyph:
        """Wrap a stored glyph."""
        return cls(
            id=record.id,
            name=record.name,
            svg_data=record.svg_data,
            is_virtual=False,
            source_index=source_index,
        )
