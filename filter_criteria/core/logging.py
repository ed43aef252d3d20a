"""
Filter Criteria - Logging Configuration

Loggers live under the ``filter_criteria`` namespace. The library never
touches the root logger; applications call ``setup_logging`` once (or wire
the namespace into their own logging setup).
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

import structlog
from structlog.types import Processor

from filter_criteria.core.config import settings

LOGGER_NAMESPACE = "filter_criteria"


def setup_logging(
    level: Optional[str] = None,
    json_output: Optional[bool] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Configure structured logging for the engine.

    Args:
        level: Level name; defaults to settings.LOG_LEVEL
        json_output: JSON lines instead of console output; defaults to not settings.DEBUG
        stream: Output stream; defaults to stdout

    Returns:
        The namespace logger the engine writes to
    """
    log_level = logging.getLevelName((level or settings.LOG_LEVEL).upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO
    if json_output is None:
        json_output = not settings.DEBUG

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_output:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))

    namespace_logger = logging.getLogger(LOGGER_NAMESPACE)
    namespace_logger.handlers = [handler]
    namespace_logger.setLevel(log_level)
    namespace_logger.propagate = False
    return namespace_logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a logger under the engine namespace.

    Events always go through the stdlib logger of that name, so stdlib levels
    and handlers decide what is emitted, even before ``setup_logging``.
    """
    if not name.startswith(LOGGER_NAMESPACE):
        name = f"{LOGGER_NAMESPACE}.{name}"
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


class LoggerMixin:
    """Gives a class a ``logger`` named after it."""

    @property
    def logger(self) -> structlog.stdlib.BoundLogger:
        return get_logger(self.__class__.__name__)
