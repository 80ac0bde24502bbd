"""
Structured logging utilities for Mushaf library.

Provides a configured logger and helper functions for consistent logging.
"""

import logging
import sys
from typing import Optional


# Default format for Mushaf logs
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str = "mushaf") -> logging.Logger:
    """
    Get a logger instance for the given name.

    Args:
        name: Logger name (default: "mushaf")

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def configure_logging(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    date_format: Optional[str] = None,
    stream: Optional[object] = None,
) -> logging.Logger:
    """
    Configure logging for the Mushaf library.

    Args:
        level: Logging level (default: INFO)
        format_string: Log format string (default: DEFAULT_FORMAT)
        date_format: Date format string (default: DEFAULT_DATE_FORMAT)
        stream: Output stream (default: sys.stderr)

    Returns:
        Configured root logger for mushaf
    """
    logger = logging.getLogger("mushaf")
    logger.setLevel(level)

    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)

    formatter = logging.Formatter(
        format_string or DEFAULT_FORMAT,
        datefmt=date_format or DEFAULT_DATE_FORMAT,
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)

    return logger


def enable_debug_logging() -> None:
    """Enable debug-level logging for the Mushaf library."""
    configure_logging(level=logging.DEBUG)


def disable_logging() -> None:
    """Disable all Mushaf logging."""
    logger = logging.getLogger("mushaf")
    logger.handlers.clear()
    logger.addHandler(logging.NullHandler())


_logger = get_logger()


def log_directory_loaded(chapter_count: int, duration: float) -> None:
    """Log directory fetch complete event."""
    _logger.info(f"Chapter directory loaded: {chapter_count} chapters in {duration:.2f}s")


def log_chapter_requested(chapter_number: int, sequence: int) -> None:
    """Log content fetch start event."""
    _logger.debug(f"Requesting chapter {chapter_number} (request #{sequence})")


def log_chapter_loaded(chapter_number: int, verse_count: int, duration: float) -> None:
    """Log content fetch complete event."""
    _logger.info(f"Chapter {chapter_number} loaded: {verse_count} verses in {duration:.2f}s")


def log_stale_response(chapter_number: int, sequence: int, latest: int) -> None:
    """Log a superseded content response being dropped."""
    _logger.debug(
        f"Dropping stale response for chapter {chapter_number} "
        f"(request #{sequence}, latest #{latest})"
    )


def log_fetch_failed(what: str, error: Exception) -> None:
    """Log a failed remote fetch."""
    _logger.error(f"Error fetching {what}: {error}")


def log_warning(message: str, **context) -> None:
    """Log a warning with optional context."""
    if context:
        ctx_str = ", ".join(f"{k}={v}" for k, v in context.items())
        _logger.warning(f"{message} ({ctx_str})")
    else:
        _logger.warning(message)

