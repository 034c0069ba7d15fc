"""Utility modules."""

from .logging_config import (
    get_logger,
    setup_logging,
    MeasureFormatter,
    FileFormatter,
)

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    "MeasureFormatter",
    "FileFormatter",
]
