"""
Structured logging configuration.

This module provides utilities for configuring and using structured logging.
"""

from __future__ import annotations

import logging
import sys
from enum import Enum

import structlog


class LogFormat(str, Enum):
    """Log format options."""

    JSON = "json"
    CONSOLE = "console"
    PLAIN = "plain"


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger.

    Args:
        name: Optional logger name

    Returns:
        A structured logger backed by the standard library logger ``name``,
        so nothing below WARNING is emitted until :func:`configure_logging`
        has run.
    """
    return structlog.wrap_logger(  # type: ignore
        logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger
    )


def _renderer(log_format: LogFormat) -> structlog.types.Processor:
    if log_format == LogFormat.JSON:
        return structlog.processors.JSONRenderer()
    if log_format == LogFormat.CONSOLE:
        return structlog.dev.ConsoleRenderer(colors=False)
    return structlog.processors.KeyValueRenderer(
        key_order=["event"], drop_missing=True
    )


def configure_logging(
    level: int | str = logging.WARNING,
    log_format: LogFormat | str = LogFormat.PLAIN,
) -> None:
    """Route structlog through the standard library logging module.

    Args:
        level: Logging level, as a number or a level name
        log_format: Renderer used for the event dictionary
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    log_format = LogFormat(log_format)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        stream=sys.stderr,
        force=True,  # Override any existing configuration
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            _renderer(log_format),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
