"""
Logging setup.

structlog on top of the standard logging module. Call configure_logging()
once at application start; library modules only call structlog.get_logger().
"""

from __future__ import annotations

import logging
from typing import Optional

import structlog

from flashcards import config


def configure_logging(level: Optional[str] = None, json_output: Optional[bool] = None) -> None:
    """
    Configure structlog for the whole application.

    Args:
        level: Log level name (default: LEITNER_LOG_LEVEL)
        json_output: Render JSON lines (default: LEITNER_LOG_JSON)
    """
    level = (level or config.get_log_level()).upper()
    if json_output is None:
        json_output = config.is_json_logging()

    logging.basicConfig(level=getattr(logging, level, logging.INFO), format="%(message)s")
    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def configure_defaults() -> None:
    """
    Route structlog through stdlib logging unless the application configured it.

    Library calls then follow the stdlib root level (WARNING by default), so
    debug events from the scheduler stay silent until configure_logging() runs.
    """
    if structlog.is_configured():
        return
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.KeyValueRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
