"""structlog setup.

Log lines are key/value events (``logger.info("standards_loaded", version=...)``)
rendered as JSON by default, or as colored console lines when ``log_json`` is
off. Per-request values bound with ``add_log_context`` (the request ID) are
merged into every line emitted while the request is handled.
"""
import logging
import sys
from typing import Any

import structlog

from powerscore.config.settings import get_settings


def _resolve_level(level: str | None) -> int:
    settings = get_settings()
    if level is not None:
        return getattr(logging, level.upper())
    if settings.debug:
        return logging.DEBUG
    return getattr(logging, settings.log_level)


def configure_logging(level: str | None = None, json_logs: bool | None = None) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        level: Overrides ``settings.log_level`` (``debug=True`` forces DEBUG)
        json_logs: Overrides ``settings.log_json``
    """
    settings = get_settings()
    log_level = _resolve_level(level)
    use_json = settings.log_json if json_logs is None else json_logs

    # uvicorn and other stdlib loggers share the stream and level
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    processors.append(
        structlog.processors.JSONRenderer() if use_json else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger that tags each event with its module name."""
    return structlog.get_logger().bind(logger=name)


def add_log_context(**kwargs: Any) -> None:
    """Add context to all future log entries."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    """Clear all log context."""
    structlog.contextvars.clear_contextvars()
