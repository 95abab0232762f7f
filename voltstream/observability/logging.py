"""
Structured logging configuration using structlog.

JSON logs in production, coloured console logs everywhere else.
Request handlers bind a request_id so every event emitted while
serving a request can be correlated.
"""

import logging
import sys

import structlog
from structlog.types import Processor

from voltstream.config.settings import get_settings


def setup_logging() -> None:
    """
    Configure structlog and route the standard library logger to stdout.

    Usage:
        setup_logging()
        logger = structlog.get_logger()
        logger.info("Feedback scored", feedback_id=12, priority=16)
    """
    settings = get_settings()

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.is_production:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True),
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
        stream=sys.stdout,
        level=getattr(logging, settings.log_level),
    )

    # uvicorn access lines duplicate the request logging middleware
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def bind_context(**kwargs) -> None:
    """Bind key/value pairs to every subsequent log event in this context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()
