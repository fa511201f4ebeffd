"""
Logging configuration for the vending machine.

This module provides a centralized logging setup with support for:
- Console output with colored formatting (stderr, so it stays out of the menu)
- Optional file rotation with size limits
- Optional remote logging to Loki
"""

import logging
import sys
import time
from logging.handlers import RotatingFileHandler
from typing import Final, Optional

import colorlog
import httpx

from vending_machine.configs import LOG_APP_NAME, LOGGER_NAME
from vending_machine.infrastructure.settings import Settings


# =============================================================================
# Constants
# =============================================================================

DEFAULT_LOG_FORMAT: Final[str] = (
    "%(name)s | %(asctime)s | %(levelname)s | %(funcName)s:%(lineno)d | %(message)s"
)
DEFAULT_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
MAX_LOG_FILE_SIZE: Final[int] = 5 * 1024 * 1024  # 5 MB
LOG_BACKUP_COUNT: Final[int] = 3
LOKI_TIMEOUT: Final[float] = 2.0


# =============================================================================
# Color Configuration
# =============================================================================

LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}


# =============================================================================
# Loki Integration
# =============================================================================

def send_to_loki(url: str, level: str, message: str, app: str) -> None:
    """
    Send a log entry to Loki.

    Args:
        url: Loki push endpoint.
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        message: Log message.
        app: Application name for Loki labels.
    """
    log_entry = {
        "streams": [
            {
                "stream": {"level": level, "app": app},
                "values": [[str(int(time.time() * 1e9)), message]],
            }
        ]
    }
    try:
        with httpx.Client() as client:
            client.post(url, json=log_entry, timeout=LOKI_TIMEOUT)
    except Exception as e:
        # Logging here would recurse into this handler
        print(f"[Loki send error]: {e}", file=sys.stderr)


class LokiHandler(logging.Handler):
    """
    Logging handler that sends logs to Loki.

    Attributes:
        url: Loki push endpoint.
        app: Application name for Loki labels.
    """

    def __init__(self, url: str, app: str) -> None:
        super().__init__()
        self.url = url
        self.app = app

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            send_to_loki(self.url, record.levelname.upper(), message, self.app)
        except Exception:
            self.handleError(record)


# =============================================================================
# Logger Factory
# =============================================================================

def _level(value: "int | str") -> int:
    if isinstance(value, int):
        return value
    return logging.getLevelName(value.upper())


def _build_handlers(
    app: str,
    log_file: Optional[str],
    console_level: int,
    loki_url: Optional[str],
) -> list[logging.Handler]:
    handlers: list[logging.Handler] = []

    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(
        colorlog.ColoredFormatter(
            f"%(name)s | %(log_color)s%(asctime)s | %(levelname)s | "
            f"%(funcName)s:%(lineno)d | %(message)s",
            datefmt=DEFAULT_DATE_FORMAT,
            log_colors=LOG_COLORS,
        )
    )
    handlers.append(console_handler)

    # File handler with rotation
    if log_file:
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=MAX_LOG_FILE_SIZE,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(
            logging.Formatter(fmt=DEFAULT_LOG_FORMAT, datefmt=DEFAULT_DATE_FORMAT)
        )
        handlers.append(file_handler)

    # Loki handler
    if loki_url:
        loki_handler = LokiHandler(loki_url, app)
        loki_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
                datefmt=DEFAULT_DATE_FORMAT,
            )
        )
        handlers.append(loki_handler)

    return handlers


def get_logger(
    name: str,
    app: str = LOG_APP_NAME,
    log_file: Optional[str] = None,
    level: "int | str" = logging.INFO,
    console_level: "int | str" = logging.WARNING,
    loki_url: Optional[str] = None,
) -> logging.Logger:
    """
    Create and configure a logger with console, file, and Loki handlers.

    Args:
        name: Logger name.
        app: Application name for Loki labels.
        log_file: Path to the log file; no file handler when None.
        level: Logger level.
        console_level: Level of the console handler.
        loki_url: Loki push endpoint; no Loki handler when None.

    Returns:
        Configured logger instance.
    """
    logger_instance = logging.getLogger(name)
    logger_instance.setLevel(_level(level))

    # Avoid duplicate handlers on repeated calls
    if logger_instance.handlers:
        return logger_instance

    for handler in _build_handlers(app, log_file, _level(console_level), loki_url):
        logger_instance.addHandler(handler)

    return logger_instance


def configure_logging(settings: Settings) -> logging.Logger:
    """
    Rebuild the shared logger's handlers from settings.

    Args:
        settings: Application settings.

    Returns:
        The shared logger.
    """
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    config = settings.logging
    logger.setLevel(_level(config.level))
    for handler in _build_handlers(
        config.app,
        config.log_file,
        _level(config.console_level),
        config.loki_url,
    ):
        logger.addHandler(handler)

    return logger


# =============================================================================
# Default Logger Instance
# =============================================================================

logger = get_logger(name=LOGGER_NAME)
