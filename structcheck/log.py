"""Structured logging setup.

The library only ever calls ``structlog.get_logger()``; applications that want
the processor chain below call ``configure_logging()`` once at startup.
"""

import logging
from typing import Optional

import structlog

from structcheck.config import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Install the structlog processor chain and level filter.

    Args:
        settings: Optional settings override. Defaults to ``get_settings()``.
    """
    settings = settings or get_settings()
    level = logging.getLevelName(settings.LOG_LEVEL.upper())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if settings.DEBUG else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )
