"""structlog configuration shared by every module."""

from __future__ import annotations

import logging
import sys

import structlog

from rrd_api.config import settings


def setup_logging(level: str | None = None, *, json: bool | None = None) -> None:
    """Configure structlog once at startup."""
    level_name = (level or settings.rrd_log_level).upper()
    use_json = settings.rrd_log_json if json is None else json

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level_name)

    renderer = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level_name),
        ),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    return structlog.get_logger(name)
