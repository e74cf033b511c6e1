"""
Tests for datetimeutils/utils/logging.py
"""

import json
import logging

import pytest
import structlog

from datetimeutils.utils.logging import LOGGER_NAME, configure_logging, get_logger


@pytest.fixture(autouse=True)
def restore_logging():
    """Put the root logger and structlog back the way they were."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    package_level = logging.getLogger(LOGGER_NAME).level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger(LOGGER_NAME).setLevel(package_level)
    structlog.reset_defaults()


def test_configure_logging_installs_formatter():
    configure_logging()

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)
    assert logging.getLogger(LOGGER_NAME).level == logging.WARNING


def test_configure_logging_verbose():
    configure_logging(verbose=True)
    assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG


def test_json_output(capsys):
    """JSON mode writes one JSON object per event to stderr."""
    configure_logging(log_json=True)

    get_logger(f"{LOGGER_NAME}.tests").warning("zone_resolved", zone="UTC")

    lines = [line for line in capsys.readouterr().err.splitlines() if line.strip()]
    event = json.loads(lines[-1])
    assert event["event"] == "zone_resolved"
    assert event["zone"] == "UTC"
    assert event["level"] == "warning"


def test_debug_events_hidden_by_default(capsys):
    configure_logging(log_json=True)

    get_logger(f"{LOGGER_NAME}.tests").debug("settings_loaded")

    assert "settings_loaded" not in capsys.readouterr().err
