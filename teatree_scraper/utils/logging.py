"""
Logging configuration for the Tea Tree Gully scraper.

Provides a standardized logging setup with console and optional file output.
"""

import logging
import sys
from pathlib import Path
from typing import Optional


# Default logger name
LOGGER_NAME = "teatree_scraper"

# Cached logger instance
_logger: Optional[logging.Logger] = None


def get_logger() -> logging.Logger:
    """Get the scraper logger instance."""
    global _logger
    if _logger is None:
        _logger = logging.getLogger(LOGGER_NAME)
    return _logger


def setup_logging(log_file: Optional[Path] = None, verbose: bool = False) -> logging.Logger:
    """
    Configure logging with a console handler and an optional file handler.

    Args:
        log_file: Path of the log file, or None for console output only
        verbose: If True, set console log level to DEBUG

    Returns:
        Configured logger instance
    """
    logger = get_logger()
    log_level = logging.DEBUG if verbose else logging.INFO

    formatter = logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)

    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()
    logger.addHandler(console_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)  # Always log debug to file
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        logger.debug(f"Logging initialized. Log file: {log_file}")

    return logger
