"""Structured logging for tm-bridge.

Everything goes to stderr: stdout carries tables, JSON output and the MCP
stdio transport.
"""

import logging
import sys

import structlog
from structlog.types import Processor

from tm_bridge.config import BridgeSettings


def _renderer(log_format: str) -> list[Processor]:
    if log_format == "json":
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]


def configure_logging(settings: BridgeSettings | None = None) -> None:
    """Route bridge diagnostics to stderr at the configured level.

    Without settings only warnings and errors are shown, in console format.
    """
    level_name = settings.log_level if settings is not None else "warning"
    log_format = settings.log_format if settings is not None else "console"
    level = getattr(logging, level_name.upper())

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            *_renderer(log_format),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger, typically with ``__name__``."""
    return structlog.get_logger(name) if name else structlog.get_logger()
