"""Logging configuration helpers for sparselsh.

Importing ``sparselsh`` only attaches a ``NullHandler`` to the ``sparselsh``
logger. Applications opt in to output with the helpers below, or with
``configure_from_env`` and these variables:

    SPARSELSH_LOGGING: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    SPARSELSH_LOG_FILE: Path to a rotating log file
    SPARSELSH_LOG_JSON: "1" switches the output to JSON lines
"""

from __future__ import annotations

import json
import logging
import os
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Literal

__all__ = [
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_logging",
    "set_level",
    "set_module_level",
]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
DEFAULT_BACKUP_COUNT = 5

LOGGER_NAME = "sparselsh"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class JsonFormatter(logging.Formatter):
    """Renders each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def _get_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.INFO)


def _get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def _clear_handlers() -> None:
    """Detach and close every non-null handler of the package logger."""
    logger = _get_logger()
    for handler in logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()


def _attach(handler: logging.Handler, level: LogLevel | int, formatter: logging.Formatter) -> None:
    logger = _get_logger()
    logger.setLevel(_get_level(level))
    handler.setLevel(_get_level(level))
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def enable_console_logging(
    level: LogLevel | int = "INFO", format: str = DEFAULT_FORMAT
) -> logging.StreamHandler:
    """Send sparselsh log records to stderr and return the handler."""
    handler = logging.StreamHandler()
    _attach(handler, level, logging.Formatter(format))
    return handler


def enable_file_logging(
    path: str | Path,
    level: LogLevel | int = "INFO",
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
    json_lines: bool = False,
) -> RotatingFileHandler:
    """Write sparselsh log records to a size-rotated file.

    Args:
        path: Log file path. Missing parent directories are created.
        level: Level name or number.
        max_bytes: Size at which the file is rolled over.
        backup_count: Number of rolled-over files to keep.
        json_lines: Write JSON objects instead of formatted text.

    Returns:
        The attached RotatingFileHandler.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backup_count)
    formatter = JsonFormatter() if json_lines else logging.Formatter(DEFAULT_FORMAT)
    _attach(handler, level, formatter)
    return handler


def enable_json_logging(level: LogLevel | int = "INFO") -> logging.StreamHandler:
    """Send sparselsh log records to stderr as JSON lines."""
    handler = logging.StreamHandler()
    _attach(handler, level, JsonFormatter())
    return handler


def configure_from_env() -> None:
    """Configure logging from ``SPARSELSH_*`` environment variables.

    Does nothing unless ``SPARSELSH_LOGGING`` or ``SPARSELSH_LOG_FILE`` is
    set. A file without an explicit level logs at INFO.
    """
    level = os.environ.get("SPARSELSH_LOGGING", "").upper()
    log_file = os.environ.get("SPARSELSH_LOG_FILE", "")
    use_json = os.environ.get("SPARSELSH_LOG_JSON", "") == "1"

    if not level and not log_file:
        return

    level = level or "INFO"
    if log_file:
        enable_file_logging(log_file, level=level, json_lines=use_json)
    elif use_json:
        enable_json_logging(level=level)
    else:
        enable_console_logging(level=level)


def set_level(level: LogLevel | int) -> None:
    _get_logger().setLevel(_get_level(level))


def set_module_level(module: str, level: LogLevel | int) -> None:
    """Change the level of one submodule logger, e.g. ``"lsh.simhash"``."""
    logging.getLogger(f"{LOGGER_NAME}.{module}").setLevel(_get_level(level))


def disable_logging() -> None:
    """Silence sparselsh completely, dropping any attached handlers."""
    logger = _get_logger()
    _clear_handlers()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.CRITICAL + 1)
