#!/usr/bin/env python3
"""
Structured Logging Setup
Routes structlog through the standard library logging backend, so library
code stays silent until an application calls configure_logging().
"""

import logging
import sys

import structlog
from structlog.stdlib import LoggerFactory


def _configure_structlog(log_format: str = "text") -> None:
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def configure_logging(level: str = "INFO", log_format: str = "text") -> None:
    """Configure structured logging with Structlog."""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.INFO),
        force=True,
    )
    _configure_structlog(log_format)


def get_logger(name: str):
    return structlog.get_logger(name)


# Leave a host application's own structlog setup in place.
if not structlog.is_configured():
    _configure_structlog()
