"""Structured logging for dirtree using structlog.

Library modules only obtain loggers through get_logger(); nothing is printed
until an application (such as the dirtree CLI) calls configure_logging().
Logs always go to stderr because stdout may carry the rendered tree.
"""

import logging
import os
import sys
from typing import Optional, Union

import structlog

LOG_LEVEL_ENV = "DIRTREE_LOG_LEVEL"
LOG_FORMAT_ENV = "DIRTREE_LOG_FORMAT"


def get_log_level() -> int:
    """Get the log level from the environment (default WARNING)."""
    level = os.getenv(LOG_LEVEL_ENV, "WARNING").upper()
    return getattr(logging, level, logging.WARNING)


def get_log_format() -> str:
    """Get the log format from the environment ("pretty" or "json")."""
    return os.getenv(LOG_FORMAT_ENV, "pretty").lower()


def _configure_structlog() -> None:
    # structlog pipeline; wrap_for_formatter hands off to the ProcessorFormatter
    # installed by configure_logging()
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def configure_logging(level: Optional[Union[int, str]] = None, log_format: Optional[str] = None) -> None:
    """Route dirtree logs to stderr through structlog.

    Args:
        level: Log level name or number. Defaults to $DIRTREE_LOG_LEVEL or WARNING.
        log_format: "pretty" for console output or "json" for one JSON object per
            line. Defaults to $DIRTREE_LOG_FORMAT or "pretty".
    """
    if level is None:
        level = get_log_level()
    elif isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)
    log_format = (log_format or get_log_format()).lower()

    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=renderer,
            foreign_pre_chain=[
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso"),
            ],
        )
    )

    package_logger = logging.getLogger("dirtree")
    package_logger.handlers = [h for h in package_logger.handlers if isinstance(h, logging.NullHandler)]
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger backed by the stdlib logger of the same name."""
    return structlog.stdlib.get_logger(name)


_configure_structlog()
