"""
Utility modules.
"""

from .logger import get_logger, setup_logger, ColoredFormatter, LOGGER_NAME

__all__ = [
    "get_logger",
    "setup_logger",
    "ColoredFormatter",
    "LOGGER_NAME",
]
