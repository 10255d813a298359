"""
Structured logging for the encoding visualizer.

structlog with ISO timestamps and log level; JSON output when LOG_FORMAT=json,
console rendering otherwise. Log with an event name plus keyword context:

    log = get_logger(__name__)
    log.info("encoding_completed", input_len=8, append_final_state=True)
"""

from __future__ import annotations

import logging
import sys
from typing import Any, List, Optional

import structlog

from settings import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    settings = settings or get_settings()
    level = getattr(logging, settings.log_level, logging.INFO)

    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if settings.log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    if not structlog.is_configured():
        configure_logging()
    return structlog.get_logger(name).bind(logger=name)
