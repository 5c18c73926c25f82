"""Logging setup for clictx, built on loguru.

Library use is silent: the package disables its own records on import and
only ``configure_logging`` (called by the CLI) turns them back on.
"""

import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger as _logger


def get_logger():
    """Get the shared loguru logger used by clictx modules."""
    return _logger


def configure_logging(level: str = "WARNING", log_file: Optional[Union[str, Path]] = None):
    """Enable clictx log records and route them to stderr (and optionally a file)."""
    _logger.remove()

    # Stderr handler at the requested level
    _logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        colorize=True,
    )

    if log_file is not None:
        _logger.add(
            log_file,
            level="DEBUG",
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{line} | {message}",
            rotation="10 MB",
            retention=5,
        )

    _logger.enable("clictx")
    return _logger


logger = get_logger()

__all__ = [
    "logger",
    "get_logger",
    "configure_logging",
]
