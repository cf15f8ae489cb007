"""Logging setup for applications embedding glyph_layout.

Library modules only create loggers (``logging.getLogger(__name__)``) and
never attach handlers. A host application calls configure_logging once at
startup to see layout warnings such as unknown strategies or missing
glyphs.
"""

from __future__ import annotations

import logging

LOG_FORMAT = '%(asctime)s %(levelname)-8s [%(name)s] %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _resolve_level(level: str) -> int:
    value = getattr(logging, level.upper(), None)
    return value if isinstance(value, int) else logging.INFO


def _layout_handlers(log_file: str | None) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def configure_logging(level: str = 'INFO', log_file: str | None = None) -> None:
    """Send layout diagnostics to stderr and, optionally, a file.

    Every degraded layout (an unknown strategy name, a glyph id missing from
    the lookup, a malformed glyph row, an unknown config key) is logged as a
    WARNING on a ``glyph_layout.*`` logger, and the layout service and the
    composed-block strategy log per-call summaries at DEBUG. Handlers go on
    the root logger so both reach the host's output. Calling it again
    replaces the root handlers.

    Args:
        level: Root level name, e.g. 'DEBUG' for the per-call summaries or
            'WARNING' for diagnostics only. Unknown names mean INFO.
        log_file: Optional file that receives the same records as stderr.

    Example:
        Trace a glyph editor session::

            from glyph_layout.logging_config import configure_logging
            configure_logging(level='DEBUG', log_file='layout.log')
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(_resolve_level(level))
    root_logger.handlers.clear()
    for handler in _layout_handlers(log_file):
        root_logger.addHandler(handler)
