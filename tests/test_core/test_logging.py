"""Tests for logging configuration."""

import logging

import structlog
from structlog.stdlib import BoundLogger
from structlog.testing import capture_logs
from structlog.types import BindableLogger

from bad_contents_lister.core.logging import LOG_LEVELS, configure_logging, get_logger


def teardown_function() -> None:
    """Restore the test logging configuration."""
    configure_logging(testing=True)


def test_configure_logging() -> None:
    """Test logging configuration renders JSON outside of tests."""
    configure_logging(json_logs=True)

    processors = structlog.get_config()["processors"]
    assert any(
        p.__class__.__name__ == "JSONRenderer" for p in processors
    ), "JSONRenderer not configured"


def test_configure_logging_for_tests() -> None:
    """Test mode should render key/value pairs."""
    configure_logging(testing=True, json_logs=True)

    processors = structlog.get_config()["processors"]
    assert not any(p.__class__.__name__ == "JSONRenderer" for p in processors)


def test_configure_logging_level() -> None:
    """The level should apply to the package logger, defaulting to info."""
    configure_logging(testing=True, level="DEBUG")
    assert logging.getLogger("bad_contents_lister").level == LOG_LEVELS["debug"]

    configure_logging(testing=True, level="chatty")
    assert logging.getLogger("bad_contents_lister").level == logging.INFO


def test_configure_logging_does_not_duplicate_handlers() -> None:
    """Reconfiguring should replace handlers."""
    configure_logging(testing=True)
    configure_logging(testing=True)

    pkg_logger = logging.getLogger("bad_contents_lister")
    assert len(pkg_logger.handlers) == 1
    assert pkg_logger.propagate is False


def test_get_logger() -> None:
    """Test get_logger returns a configured logger."""
    logger = get_logger()
    assert isinstance(logger, BoundLogger | BindableLogger)


def test_get_logger_binds_initial_values() -> None:
    """Initial values should be bound to every event."""
    logger = get_logger(module="tests")

    with capture_logs() as logs:
        logger.info("test_message", test_key="test_value")

    assert logs == [
        {
            "module": "tests",
            "test_key": "test_value",
            "event": "test_message",
            "log_level": "info",
        }
    ]
