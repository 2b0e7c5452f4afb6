"""Centralized logging configuration for Taskpad.

This module provides a standardized logging setup with:
- File-based logging with rotation
- Configurable log levels via environment variable
- Automatic log directory creation
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional


# Log file configuration
LOG_DIR = Path.home() / ".taskpad" / "logs"
LOG_FILE = LOG_DIR / "taskpad.log"

# Log format configuration
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Rotation configuration
MAX_BYTES = 10 * 1024 * 1024  # 10MB
BACKUP_COUNT = 5


def setup_logging(
    log_level: Optional[str] = None,
    use_textual_handler: bool = False
) -> None:
    """Initialize application logging with file rotation.

    Args:
        log_level: Override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
                  If None, reads from TASKPAD_LOG_LEVEL environment variable.
                  Defaults to INFO if not specified or invalid.
        use_textual_handler: If True, log to the Textual devtools console
                            instead of the log file.

    Example:
        >>> setup_logging()
        >>> setup_logging(log_level="DEBUG")
    """
    if log_level is None:
        log_level = os.getenv("TASKPAD_LOG_LEVEL", "INFO")
    log_level = log_level.upper()

    numeric_level = getattr(logging, log_level, None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
        log_level = "INFO"

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if use_textual_handler:
        from textual.logging import TextualHandler

        handler = TextualHandler()
    else:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            LOG_FILE,
            maxBytes=MAX_BYTES,
            backupCount=BACKUP_COUNT,
            encoding="utf-8"
        )

    handler.setLevel(numeric_level)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    logger = logging.getLogger(__name__)
    logger.info(
        f"Logging initialized: level={log_level}, "
        f"file={LOG_FILE}, "
        f"textual_handler={use_textual_handler}"
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the specified module.

    Args:
        name: Module name, typically __name__

    Returns:
        Logger instance configured with the module name
    """
    return logging.getLogger(name)
