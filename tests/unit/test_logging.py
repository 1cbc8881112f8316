"""Logging configuration tests."""

import logging

import pytest
import structlog
from pythonjsonlogger.json import JsonFormatter

from viewkit.core import LogContext, configure_logging
from viewkit.core.logging_config import ROOT_LOGGER


def installed_handlers():
    return [
        h for h in logging.getLogger(ROOT_LOGGER).handlers
        if getattr(h, "_viewkit_handler", False)
    ]


@pytest.mark.unit
def test_configure_logging_replaces_its_handler():
    configure_logging("DEBUG", json_logs=False)
    configure_logging("WARNING", json_logs=True)

    stdlib_logger = logging.getLogger(ROOT_LOGGER)
    assert len(installed_handlers()) == 1
    assert stdlib_logger.level == logging.WARNING
    assert stdlib_logger.propagate is False

    configure_logging("DEBUG")


@pytest.mark.unit
def test_json_logs_use_json_formatter():
    configure_logging("INFO", json_logs=True)

    (handler,) = installed_handlers()
    assert isinstance(handler.formatter, JsonFormatter)

    configure_logging("DEBUG")


@pytest.mark.unit
def test_configure_logging_unknown_level_defaults_to_info():
    configure_logging("chatty")
    assert logging.getLogger(ROOT_LOGGER).level == logging.INFO

    configure_logging("DEBUG")


@pytest.mark.unit
def test_log_context_binds_and_restores():
    structlog.contextvars.clear_contextvars()

    with LogContext(template_file="outer.html"):
        with LogContext(template_file="inner.html", stage="compile"):
            assert structlog.contextvars.get_contextvars() == {
                "template_file": "inner.html",
                "stage": "compile",
            }
        assert structlog.contextvars.get_contextvars() == {"template_file": "outer.html"}

    assert structlog.contextvars.get_contextvars() == {}
