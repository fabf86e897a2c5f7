"""Logging configuration for Replica Settings.

Provides centralized logging setup with file and console handlers.
The log file is written next to the settings files by default.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

LOG_FILE_NAME = "replica_settings.log"


def setup_logging(log_dir: Optional[Path] = None, debug: bool = False) -> logging.Logger:
    """Configure package-wide logging.

    Sets up logging to a file (if a log directory is given) and to the
    console (if debug mode).

    Args:
        log_dir: Directory for replica_settings.log, no file handler if None
        debug: If True, also log to console at DEBUG level

    Returns:
        The root logger for the package
    """
    logger = logging.getLogger("replica_settings")
    logger.setLevel(logging.DEBUG)

    # Clear any existing handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        # File handler - always logs DEBUG and above
        file_handler = logging.FileHandler(log_dir / LOG_FILE_NAME, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    # Console handler - only in debug mode
    if debug:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.DEBUG)
        console_formatter = logging.Formatter(
            "%(levelname)s - %(name)s - %(message)s"
        )
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a child logger for a specific module.

    Args:
        name: Module name (e.g., 'codec', 'document')

    Returns:
        A logger instance for the module
    """
    return logging.getLogger(f"replica_settings.{name}")
