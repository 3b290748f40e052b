"""Logging configuration module."""

from logging import (
    CRITICAL,
    DEBUG,
    ERROR,
    INFO,
    WARNING,
    Handler,
    Logger,
    StreamHandler,
    getLogger,
)
from typing import Any, cast

import structlog
from structlog import dev, processors, stdlib
from structlog.processors import JSONRenderer, TimeStamper, dict_tracebacks
from structlog.stdlib import BoundLogger

# Define log levels
LOG_LEVELS: dict[str, int] = {
    "debug": DEBUG,
    "info": INFO,
    "warning": WARNING,
    "error": ERROR,
    "critical": CRITICAL,
}


def configure_logging(
    testing: bool = False, level: str = "info", json_logs: bool = True
) -> None:
    """Configure structured logging for the lister.

    Args:
        testing: Whether the lister is running in test mode
        level: Name of the minimal log level (case insensitive)
        json_logs: Whether to render log lines as JSON
    """
    log_level = LOG_LEVELS.get(level.lower(), INFO)

    # Configure root logger
    root_logger: Logger = getLogger()
    root_logger.setLevel(log_level)

    # Create and configure package logger
    pkg_logger: Logger = getLogger("bad_contents_lister")
    pkg_logger.setLevel(log_level)

    # Logs go to stderr, progress and stats to stdout
    handler: Handler = StreamHandler()
    handler.setLevel(log_level)

    # Define shared processors
    shared_processors = [
        stdlib.add_logger_name,
        stdlib.add_log_level,
        stdlib.PositionalArgumentsFormatter(),
        TimeStamper(fmt="%Y-%m-%d %H:%M:%S.%f"),
        dict_tracebacks,
    ]

    use_json = json_logs and not testing

    # Configure structlog
    structlog.configure(
        processors=[
            stdlib.filter_by_level,
            *shared_processors,
            processors.format_exc_info,
            JSONRenderer() if use_json else processors.KeyValueRenderer(),
        ],
        context_class=dict,
        logger_factory=stdlib.LoggerFactory(),
        wrapper_class=stdlib.BoundLogger,
        # loggers stay lazy in tests so that log capture can be swapped in
        cache_logger_on_first_use=not testing,
    )

    # Configure handler formatter
    formatter = stdlib.ProcessorFormatter(
        processor=processors.JSONRenderer() if use_json else dev.ConsoleRenderer(),
        foreign_pre_chain=shared_processors,
    )
    handler.setFormatter(formatter)

    # Clear existing handlers to prevent duplicates
    root_logger.handlers = []
    pkg_logger.handlers = []
    pkg_logger.propagate = False

    root_logger.addHandler(handler)
    pkg_logger.addHandler(handler)


def get_logger(**initial_values: Any) -> BoundLogger:
    """Get a configured logger instance.

    The logger is lazy: it picks the configuration up on first use.

    Args:
        **initial_values: Context bound to every event of the logger

    Returns:
        A structured logger instance.
    """
    return cast(BoundLogger, structlog.get_logger(**initial_values))
