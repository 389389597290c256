"""Structured logging for floatstats (structlog over stdlib logging)."""

from __future__ import annotations

import logging

import structlog


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger for library module *name*.

    Events are rendered as JSON and handed to the stdlib logger of the
    same name, so they follow the host application's logging setup and
    are dropped when nothing enables that logger.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(sort_keys=True),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_structlog(level: int = logging.INFO) -> None:
    """Set up console rendering for applications built on floatstats.

    Only affects loggers obtained through ``structlog.get_logger``; the
    library's own loggers go through stdlib logging, so raise the
    ``"floatstats"`` stdlib logger to DEBUG to see them.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
