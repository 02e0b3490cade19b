from __future__ import annotations

import logging
import sys

import structlog
from structlog.types import Processor

from app.core.config import settings
from app.shared.enums import Env


def _renderer() -> Processor:
    # Human-readable lines for local work; one JSON object per line everywhere else.
    if settings.env == Env.dev and sys.stdout.isatty():
        return structlog.dev.ConsoleRenderer()
    return structlog.processors.JSONRenderer()


def configure_logging() -> None:
    """Configure structlog on top of stdlib logging; request and actor context merge in from contextvars."""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
    )
    # Request lines come from RequestIdMiddleware.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _renderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
