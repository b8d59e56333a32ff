import logging

import structlog

from ding_robot.config import settings


def configure_logging(env: str | None = None, level: int | str = logging.INFO):
    """Route structlog output for an application using the robot.

    Events below ``level`` are dropped. ``env == "development"`` renders for a
    console, anything else as one JSON object per line. The library itself
    never calls this.
    """
    env = env or settings.APP_ENV
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    renderer = (
        structlog.dev.ConsoleRenderer()
        if env == "development"
        else structlog.processors.JSONRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
