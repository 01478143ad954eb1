"""Structured logging configuration for Basekalk."""

import logging
import sys
from datetime import datetime
from typing import Optional

from . import config


class StructuredFormatter(logging.Formatter):
    """One line per record: timestamp, level, logger and message.

    Records logged with ``extra={"error_code": ...}`` (failed calculations)
    get the CalcError code appended, so failures can be grepped by kind.
    """

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).isoformat()
        line = f"{timestamp} [{record.levelname}] {record.name}: {record.getMessage()}"
        code = getattr(record, "error_code", None)
        if code:
            line += f" (code={code})"
        return line


def setup_logging(
    level: Optional[str] = None, log_file: Optional[str] = None
) -> logging.Logger:
    """Set up structured logging for the application.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to config.LOG_LEVEL; unknown names fall back to WARNING.
        log_file: Optional file path to write logs (if None, logs to stderr)

    Returns:
        Configured logger instance
    """
    if level is None:
        level = config.LOG_LEVEL
    logger = logging.getLogger("basekalk")
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    # Remove existing handlers
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(StructuredFormatter())
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(StructuredFormatter())
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return the ``basekalk.<name>`` child logger."""
    return logging.getLogger(f"basekalk.{name}")
