"""Tests for console logging."""

import io

import pytest
from chipper.logging import ConsoleLogger, configure_logging, get_logger


def test_level_filtering():
    stream = io.StringIO()
    logger = ConsoleLogger(name="Test", log_level="WARNING", stream=stream)

    logger.info("hidden")
    logger.warning("shown")
    logger.error("failed")

    assert stream.getvalue().splitlines() == ["[WARNING][Test] shown", "[ERROR][Test] failed"]


def test_set_level():
    stream = io.StringIO()
    logger = ConsoleLogger(stream=stream)
    logger.set_level("debug")
    logger.debug("details")
    assert stream.getvalue() == "[DEBUG][Chipper] details\n"

    with pytest.raises(ValueError):
        logger.set_level("LOUD")


def test_defaults_to_stderr(capsys):
    ConsoleLogger(log_level="INFO").info("loaded")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "[INFO][Chipper] loaded\n"


def test_configure_logging():
    logger = get_logger()
    assert configure_logging(True) is logger
    assert logger.log_level == "DEBUG"
    configure_logging(False)
    assert logger.log_level == "WARNING"
