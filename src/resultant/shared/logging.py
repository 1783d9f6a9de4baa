"""Structured logging configuration.

Modules log through structlog and never configure it themselves. Importing
resultant leaves the host application's structlog and stdlib logging setup
untouched; ``configure_logging`` is an explicit opt-in for callers that want
the library's own output format.
"""
from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

LIBRARY_LOGGER = "resultant"

_configured = False


def _shared_processors() -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]


def configure_logging(
    level: str | None = None,
    log_format: str | None = None,
    log_file: str | None = None,
) -> None:
    """Configure structured logging for the library logger.

    Arguments left as None are read from settings. Calling it again after a
    successful configuration is a no-op.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Output format ("json" or "console")
        log_file: Optional log file path
    """
    global _configured
    if _configured:
        return

    from resultant.shared.config import get_settings

    settings = get_settings()
    level = level or settings.log_level
    log_format = log_format or settings.log_format
    log_file = log_file or settings.log_file

    processors = _shared_processors()
    renderer: Any = (
        structlog.processors.JSONRenderer()
        if log_format == "json"
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[*processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=processors,
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    library_logger = logging.getLogger(LIBRARY_LOGGER)
    for handler in handlers:
        handler.setFormatter(formatter)
        library_logger.addHandler(handler)
    library_logger.setLevel(getattr(logging, level.upper()))
    # Records are written by the handlers above only, not again by root's.
    library_logger.propagate = False

    _configured = True


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger bound to whatever structlog configuration is active.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Lazy structlog logger proxy
    """
    return structlog.get_logger(name)
