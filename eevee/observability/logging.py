"""Structured logging configuration."""

import logging
import sys
from typing import Any, TextIO

import structlog


def configure_logging(
    level: int = logging.INFO,
    output: TextIO = sys.stderr,
    json_format: bool = True,
) -> None:
    """Configure structured logging for lookups.

    Sets up structlog with JSON output format and standard processors
    for timestamps, log levels, and context binding.

    Args:
        level: Logging level (default: INFO).
        output: Output stream (default: stderr).
        json_format: Whether to use JSON format (default: True).
    """
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=output),
        cache_logger_on_first_use=True,
    )


def configure_from_settings() -> None:
    """Configure logging from ``EEVEE_*`` environment settings."""
    from eevee.settings import get_settings

    settings = get_settings()
    configure_logging(
        level=settings.log_level_number(),
        json_format=settings.log_json,
    )


def get_logger(component: str | None = None) -> Any:
    """Get a lazily bound logger for a library component.

    The logger resolves the structlog configuration on each call, so it
    can be created at import time and still honor later configuration.

    Args:
        component: Value for the ``component`` key on every event.

    Returns:
        Lazy structlog logger proxy.
    """
    if component is None:
        return structlog.get_logger()
    return structlog.get_logger(component=component)
