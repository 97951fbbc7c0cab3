"""Structured logging configuration using structlog."""

import logging
import sys
from typing import Optional

import structlog

from kuberx.core.config import Settings, settings as default_settings


def setup_logging(app_settings: Optional[Settings] = None) -> None:
    """
    Configure structlog and the stdlib root logger.

    Output goes to stdout, rendered as JSON lines for production or as
    colourless key/value text for local development (LOG_FORMAT=console).

    Args:
        app_settings: Settings to read level and format from
            (uses the cached application settings if not provided)
    """
    app_settings = app_settings or default_settings
    level = logging.getLevelName(app_settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
        force=True,
    )

    if app_settings.log_format == "console":
        renderer = structlog.dev.ConsoleRenderer(colors=False)
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.bind_contextvars(
        service=app_settings.app_name,
        version=app_settings.app_version,
    )
