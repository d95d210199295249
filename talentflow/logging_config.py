"""
Logging setup - TalentFlow
talentflow/logging_config.py

Configures the stdlib root logger and the structlog processor chain.
LOG_FORMAT=json renders one JSON object per event, LOG_FORMAT=console
renders coloured key=value lines for local development.
"""

import logging
import sys

import structlog

from talentflow.config import Settings


def configure_logging(settings: Settings) -> None:
    """Apply LOG_LEVEL / LOG_FORMAT to stdlib logging and structlog."""
    level = getattr(logging, settings.LOG_LEVEL)

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )
    logging.getLogger().setLevel(level)

    if settings.LOG_FORMAT == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

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
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
