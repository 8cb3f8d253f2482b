"""Structured logging for ingestion runs, built on structlog.

Only the ingestion layer and scripts log; the parsing functions stay silent
and report failures through their return values.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from numeric_ingestion.config import Settings


def _level_number(log_level: str) -> int:
    levels = logging.getLevelNamesMapping()
    try:
        return levels[log_level.upper()]
    except KeyError:
        raise ValueError(f"Unknown log level: {log_level!r}") from None


def setup_logging(log_level: str = "INFO", json_output: bool = True):
    """Route structlog events to stdout at *log_level* and above.

    ``json_output`` selects JSON lines (for collectors) or the console
    renderer (for someone watching a CSV import in a terminal).
    """
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
    ]
    processors.append(structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_level_number(log_level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
    )


def configure_from_settings(settings: Settings):
    """Apply ``NUMERIC_LOG_LEVEL`` and ``NUMERIC_LOG_JSON``."""
    setup_logging(settings.log_level, json_output=settings.log_json)


def get_logger(name: str) -> structlog.BoundLogger:
    """Return a bound logger for the given component *name*."""
    return structlog.get_logger(name)
