"""
Structured logging setup built on structlog.

structlog is routed through stdlib logging from import time on, so the
library stays silent until the application calls setup_logging().
Modules grab a logger with get_logger(__name__) and log with key/value
context:

    logger = get_logger(__name__)
    logger.info("Supplier scored", supplier_id="abc", score=45)
"""

from __future__ import annotations

import logging
import sys

import structlog

from supplier_quality.core.config import settings


def configure_structlog(
    renderer: structlog.types.Processor | None = None,
    cache_logger_on_first_use: bool = False,
) -> None:
    """Point structlog at stdlib logging with the shared processor chain."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer or structlog.dev.ConsoleRenderer(colors=False),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=cache_logger_on_first_use,
    )


def setup_logging(level: str | None = None) -> None:
    """Configure stdlib logging and structlog processors."""
    level_name = (level or settings.LOG_LEVEL).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
        force=True,
    )

    if settings.APP_ENV == "development":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    configure_structlog(renderer, cache_logger_on_first_use=True)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to the given name."""
    return structlog.stdlib.get_logger(name)


configure_structlog()
