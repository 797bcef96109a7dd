"""Logging configuration using structlog.

Log lines go to stderr so they do not interleave with pytest's terminal
report on stdout. While a scenario runs, its name and platform are bound
as context variables and appear on every event.
"""

import logging
import sys

import structlog

from petspot_e2e.config.settings import get_settings

# Chatty at INFO: one line per HTTP call / browser protocol message.
_NOISY_LOGGERS = ("httpx", "httpcore", "asyncio")


def configure_logging(level: str | None = None) -> None:
    """Configure structlog for a test run.

    Args:
        level: Overrides ``PETSPOT_E2E_LOG_LEVEL`` when given.
    """
    settings = get_settings()
    log_level = getattr(logging, (level or settings.log_level).upper())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            # JSON for CI artifacts, coloured console locally
            structlog.dev.ConsoleRenderer()
            if settings.debug
            else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=log_level)
    if log_level > logging.DEBUG:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)


def bind_scenario(name: str, platform: str | None) -> None:
    """Attach scenario context to every following log event."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(scenario=name, platform=platform or "mobile")


def clear_scenario() -> None:
    structlog.contextvars.clear_contextvars()
