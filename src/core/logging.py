"""Logging and observability configuration using Pydantic Logfire.

All modules use Python's standard logging library (logging.getLogger(__name__))
with snake_case event names and structured ``extra`` fields. Logfire captures
those records through its logging handler.

Standard usage:
    import logging
    logger = logging.getLogger(__name__)
    logger.info("todo_created", extra={"todo_id": "abc"})
"""

import logging

import logfire
from fastapi import FastAPI

from src.core.config import settings


def configure_logfire() -> None:
    """Configure Pydantic Logfire and route standard logging through it."""
    logfire.configure(
        token=settings.logfire_token,
        service_name="todolist",
        service_version="0.1.0",
        send_to_logfire="if-token-present",
        console=False,
    )
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[logging.StreamHandler(), logfire.LogfireLoggingHandler()],
        force=True,
    )

    logger = logging.getLogger(__name__)
    logger.info("Logfire configured successfully")


def instrument_fastapi(app: FastAPI) -> None:
    """Add Logfire instrumentation to FastAPI application."""
    logfire.instrument_fastapi(app)
    logger = logging.getLogger(__name__)
    logger.info("FastAPI instrumentation configured")


def span(name: str, **attributes: object) -> logfire.LogfireSpan:
    """Create a custom span around a store operation.

    Usage:
        with span("todo_store.insert", title=title):
            ...
    """
    return logfire.span(name, **attributes)


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    **context: object,
) -> None:
    """Log a message with structured context fields.

    Args:
        logger: Logger instance to use
        level: Log level ("debug", "info", "warning", "error", "critical")
        message: Log message
        **context: Additional context fields (todo_id, path, error, ...)
    """
    log_method = getattr(logger, level.lower())
    log_method(message, extra=context)
