"""
Logging for the streaming methods library.

Provides a shared "tastream" logger with colored console output and an
optional dated log file. Streaming methods never log from update();
only construction, factories and audits do.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

LOGGER_NAME = "tastream"


# ANSI color codes for terminal output
class Colors:
    RESET = "\033[0m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"
    BOLD = "\033[1m"


class ColoredFormatter(logging.Formatter):
    """Custom formatter with colors for console output."""

    LEVEL_COLORS = {
        logging.DEBUG: Colors.CYAN,
        logging.INFO: Colors.GREEN,
        logging.WARNING: Colors.YELLOW,
        logging.ERROR: Colors.RED,
        logging.CRITICAL: Colors.BOLD + Colors.RED,
    }

    def format(self, record):
        color = self.LEVEL_COLORS.get(record.levelno, Colors.WHITE)
        # Format a copy so file handlers on the same record stay uncolored
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{Colors.RESET}"
        record.msg = f"{color}{record.msg}{Colors.RESET}"
        return super().format(record)


def _configure(logger: logging.Logger, log_level: str, log_dir: Optional[str]) -> None:
    """Attach console (and optionally file) handlers to `logger`."""
    level = getattr(logging, log_level.upper(), None)
    if not isinstance(level, int):
        raise ValueError(
            f"Unknown log level '{log_level}'\n"
            f"\n"
            f"Fix: TASTREAM_LOG_LEVEL=INFO  # DEBUG, INFO, WARNING, ERROR, CRITICAL"
        )
    logger.setLevel(level)
    logger.handlers.clear()
    logger.propagate = False

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(ColoredFormatter(
        "%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%H:%M:%S"
    ))
    logger.addHandler(console_handler)

    if log_dir:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        log_file = path / f"tastream_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))
        logger.addHandler(file_handler)


# Global logger instance
_logger: Optional[logging.Logger] = None


def get_logger() -> logging.Logger:
    """
    Get or create the shared library logger.

    On first use the level and log directory come from the environment
    configuration (TASTREAM_LOG_LEVEL, TASTREAM_LOG_DIR).
    """
    global _logger
    if _logger is None:
        from ..config import get_config

        log_config = get_config().log
        _logger = logging.getLogger(LOGGER_NAME)
        _configure(_logger, log_config.level, log_config.log_dir)
    return _logger


def setup_logger(log_level: str = "INFO", log_dir: Optional[str] = None) -> logging.Logger:
    """Reconfigure the shared logger with explicit settings."""
    global _logger
    _logger = logging.getLogger(LOGGER_NAME)
    _configure(_logger, log_level, log_dir)
    return _logger
