"""Logging configuration for xport.

This module provides centralized logging configuration using Loguru.
It sets up logging to both file and console with proper formatting
and log rotation.
"""

import sys
from pathlib import Path

from loguru import logger

LOG_DIR = Path.home() / ".xport" / "logs"
LOG_DIR.mkdir(parents=True, exist_ok=True)
LOG_FILE = LOG_DIR / "xport.log"

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def configure_logging(debug: bool = False) -> None:
    """(Re)install the console and file sinks.

    Args:
        debug: Log DEBUG records to the console as well, not only to the file
    """
    logger.remove()
    logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level="DEBUG" if debug else "INFO",
        backtrace=True,
        diagnose=debug,
    )
    logger.add(
        LOG_FILE,
        rotation="10 MB",
        retention="1 week",
        compression="zip",
        format=FILE_FORMAT,
        level="DEBUG",
        backtrace=True,
        diagnose=True,
    )


configure_logging()

__all__ = ["configure_logging", "logger", "LOG_DIR", "LOG_FILE"]
