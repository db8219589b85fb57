from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def configure_logging(level: str, fmt: str = 'json') -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format='%(message)s',
        stream=sys.stdout,
    )

    if fmt == 'console':
        renderer: Any = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt='iso'),
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        cache_logger_on_first_use=True,
    )


def configure_from_settings() -> None:
    from genform.config import get_settings

    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format)


def get_logger(name: str) -> Any:
    return structlog.get_logger(name)
