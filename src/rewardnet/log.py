"""Structured JSON logging for rewardnet."""

import logging
import sys
from datetime import datetime, UTC
from typing import Any

from pythonjsonlogger import jsonlogger

SERVICE_NAME = "rewardnet"


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter with timestamp, level and service metadata"""

    def add_fields(
        self, log_record: dict[str, Any], record: logging.LogRecord, message_dict: dict[str, Any]
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(UTC).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = SERVICE_NAME


def setup_logging(level: str = "WARNING") -> logging.Handler:
    """Send rewardnet logs to stderr as JSON lines.

    Only the ``rewardnet`` package logger is configured; the root logger is
    left alone. Calling this again replaces the previous handler.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR)

    Returns:
        The installed handler (pass it to ``teardown_logging`` when done)

    Raises:
        ValueError: If level is not a known level name
    """
    level_name = level.upper()
    if not isinstance(logging.getLevelName(level_name), int):
        raise ValueError(f"Unknown log level '{level}'")

    logger = logging.getLogger(SERVICE_NAME)
    logger.setLevel(level_name)

    for handler in list(logger.handlers):
        if getattr(handler, "_rewardnet_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler._rewardnet_handler = True
    handler.setFormatter(CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s"))
    logger.addHandler(handler)
    return handler


def teardown_logging(handler: logging.Handler) -> None:
    """Detach a handler installed by ``setup_logging``."""
    logging.getLogger(SERVICE_NAME).removeHandler(handler)
    handler.close()
