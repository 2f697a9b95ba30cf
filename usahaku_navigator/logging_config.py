"""Structured logging configuration for UsahaKu Navigator.

JSON records go to a rotating file (logs/navigator.log, 10MB x 5 backups),
human-readable records go to stdout. Call sites attach structured context
through ``log_with_context`` so every record carries an ``event_type``.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from pythonjsonlogger import jsonlogger

DEFAULT_LOG_DIR = Path(__file__).parent.parent / "logs"
LOG_FILE_NAME = "navigator.log"


def setup_logging(log_level: str = "INFO", log_dir: Path | None = None) -> logging.Logger:
    """Configure JSON file logging and console logging on the root logger.

    Args:
        log_level: Console logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for the rotating JSON log (defaults to ./logs)

    Returns:
        Configured root logger instance
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    target_dir = log_dir or DEFAULT_LOG_DIR
    target_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(min(level, logging.DEBUG))
    root_logger.handlers.clear()

    json_handler = RotatingFileHandler(
        target_dir / LOG_FILE_NAME,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    json_handler.setFormatter(
        jsonlogger.JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(filename)s %(lineno)d",
            timestamp=True,
        )
    )
    json_handler.setLevel(logging.DEBUG)
    root_logger.addHandler(json_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    # Request/response logging is done by our own httpx event hooks
    for noisy in ("httpx", "httpcore", "uvicorn.access"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance (typically ``get_logger(__name__)``)."""
    return logging.getLogger(name)


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    **extra_fields: Any,
) -> None:
    """Log a message with additional structured context fields.

    Args:
        logger: Logger instance
        level: Log level (debug, info, warning, error, critical)
        message: Log message
        **extra_fields: Additional fields to include in JSON log (e.g., user_id, audiobook_id)
    """
    log_method = getattr(logger, level.lower())
    log_method(message, extra=extra_fields)
