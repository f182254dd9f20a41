"""Tests for JSON logging setup."""

import io
import json
import logging
import pytest

from rewardnet.log import CustomJsonFormatter, setup_logging, teardown_logging


def test_formatter_adds_metadata():
    """Test records are rendered as JSON with service metadata."""
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s"))
    logger = logging.getLogger("rewardnet.test_formatter")
    logger.addHandler(handler)
    logger.propagate = False
    logger.setLevel(logging.INFO)
    try:
        logger.info("Reward confirmed", extra={"confirmation_number": "7"})
    finally:
        logger.removeHandler(handler)

    record = json.loads(stream.getvalue())
    assert record["message"] == "Reward confirmed"
    assert record["level"] == "INFO"
    assert record["service"] == "rewardnet"
    assert record["confirmation_number"] == "7"
    assert "timestamp" in record


def test_setup_logging_replaces_previous_handler():
    """Test repeated setup leaves a single package handler."""
    first = setup_logging("INFO")
    second = setup_logging("DEBUG")
    try:
        logger = logging.getLogger("rewardnet")
        assert first not in logger.handlers
        assert second in logger.handlers
        assert logger.level == logging.DEBUG
    finally:
        teardown_logging(second)
        logging.getLogger("rewardnet").setLevel(logging.NOTSET)

    assert second not in logging.getLogger("rewardnet").handlers


def test_setup_logging_rejects_unknown_level():
    with pytest.raises(ValueError, match="Unknown log level"):
        setup_logging("LOUD")
