"""Logging setup: stdlib logging plus structlog processors."""

import logging

import structlog

from infrastructure.config import get_log_format, get_log_level


def configure_logging() -> None:
    """Configure stdlib logging and structlog from environment.

    LOG_LEVEL selects the level, LOG_FORMAT selects console or JSON output.
    Safe to call more than once.
    """
    level = getattr(logging, get_log_level(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if get_log_format() == "json"
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )
