"""
Structured logging configuration using structlog.

The library only emits events; applications call configure_logging() once
at startup to choose how they are rendered. Until then events go to the
stdlib "class_discovery" logger, which has a NullHandler and stays silent.
"""

import logging
import sys
from typing import Any

import structlog

from class_discovery.shared.infrastructure.config import Settings, settings

LIBRARY_LOGGER = "class_discovery"

logging.getLogger(LIBRARY_LOGGER).addHandler(logging.NullHandler())


def configure_logging(stream: Any = sys.stderr, config: Settings | None = None) -> None:
    """
    Configure structlog for the application.

    Sets up:
    - Pretty console output for development
    - JSON output otherwise
    - Log level from settings
    """
    config = config or settings

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if config.is_development:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=stream.isatty() if hasattr(stream, "isatty") else False),
        ]
    else:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=stream,
        level=getattr(logging, config.log_level.upper()),
        force=True,
    )


def get_logger(name: str) -> Any:
    """
    Get a structured logger instance.

    The logger wraps the stdlib logger of the same name, so output follows the
    host application's logging setup.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("candidate_unresolved", identifier="App.Events.Bar")
    """
    return structlog.wrap_logger(logging.getLogger(name))
