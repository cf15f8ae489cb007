"""Structured diagnostics for degraded layout conditions.

Layout never fails on malformed input in the rendering path. Instead the
offending piece is skipped (an unknown glyph id, an unknown strategy name)
and a diagnostic is emitted. Every diagnostic goes to the module logger of
the code that raised it; callers that want to inspect them programmatically
pass a DiagnosticLog and read it back afterwards.

Example usage:
    Collecting diagnostics from normalization::

        from glyph_layout.diagnostics import DiagnosticLog
        from glyph_layout.utils.normalization import normalize_glyph_input

        log = DiagnosticLog()
        glyphs = normalize_glyph_input([1, 2, 99], context, diagnostics=log)
        for d in log:
            print(d.code.value, d.message)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator


class DiagnosticCode(str, Enum):
    """Kinds of recoverable conditions reported by the engine."""
    UNKNOWN_STRATEGY = 'unknown_strategy'
    GLYPH_NOT_FOUND = 'glyph_not_found'
    MISSING_GLYPH_LOOKUP = 'missing_glyph_lookup'
    UNSUPPORTED_INPUT = 'unsupported_input'
    UNKNOWN_CONFIG_FIELD = 'unknown_config_field'


@dataclass(frozen=True)
class Diagnostic:
    """A single recoverable condition.

    Attributes:
        code: Machine-readable kind of the condition.
        message: Human-readable description, already formatted.
        details: Extra context (the offending id, name, ...).
    """
    code: DiagnosticCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {'code': self.code.value, 'message': self.message, 'details': dict(self.details)}


@dataclass
class DiagnosticLog:
    """Caller-owned collector of diagnostics for one or more calls."""
    entries: list[Diagnostic] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.entries)

    def add(self, diagnostic: Diagnostic) -> None:
        self.entries.append(diagnostic)

    def codes(self) -> list[DiagnosticCode]:
        """Codes of all collected diagnostics, in emission order."""
        return [d.code for d in self.entries]

    def has(self, code: DiagnosticCode) -> bool:
        return any(d.code == code for d in self.entries)


def emit(
    logger: logging.Logger,
    diagnostics: DiagnosticLog | None,
    code: DiagnosticCode,
    message: str,
    *args: Any,
    **details: Any,
) -> None:
    """Log a warning and record it in ``diagnostics`` when one is given.

    Args:
        logger: Logger of the emitting module.
        diagnostics: Optional collector supplied by the caller.
        code: Kind of condition.
        message: %-style format string, as passed to ``logger.warning``.
        *args: Format arguments for ``message``.
        **details: Extra context stored on the Diagnostic.
    """
    logger.warning(message, *args)
    if diagnostics is not None:
        diagnostics.add(Diagnostic(code, message % args if args else message, details))
