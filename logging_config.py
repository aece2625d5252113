"""
Logging Configuration Module

Provides consistent logging setup for the chunking service, the quiz
generator and the pipeline CLI.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

ROOT_LOGGER_NAME = "pdf_quiz"


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    format_string: Optional[str] = None
) -> logging.Logger:
    """
    Configure logging for the application.

    The ``chunking``, ``pdf_pages`` and ``quiz`` package loggers are routed
    to the same handlers as the application logger.

    Args:
        level: Logging level (default: INFO)
        log_file: Optional path to log file
        format_string: Optional custom format string

    Returns:
        Configured application logger
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    formatter = logging.Formatter(format_string, datefmt="%Y-%m-%d %H:%M:%S")

    handlers: list[logging.Handler] = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for name in (ROOT_LOGGER_NAME, "chunking", "pdf_pages", "quiz"):
        package_logger = logging.getLogger(name)
        package_logger.setLevel(level)
        # Remove existing handlers to avoid duplicates
        package_logger.handlers.clear()
        for handler in handlers:
            package_logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
