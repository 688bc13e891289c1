# File: playlog/utils/logger.py
"""
Diagnostic logging for playlog itself, and a bridge that lets host code
using the standard logging module write into the facility's log.
"""

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from playlog.core.logger import LevelGatedLogger

DIAGNOSTIC_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'


def setup_logger(name: str = "playlog", level: int = logging.INFO) -> logging.Logger:
    """
    Configure and return a logger that reports on standard error.

    Args:
        name: Logger name
        level: Logging level (default: INFO)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(DIAGNOSTIC_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    logger.addHandler(console_handler)

    return logger


class FacilityHandler(logging.Handler):
    """
    Route standard logging records into a LevelGatedLogger.

    ERROR and above go to ``error``, INFO and WARNING to ``info``, anything
    lower to ``log_at_level`` with ``debug_priority``. The logger name is
    used as the category.
    """

    def __init__(self, target: "LevelGatedLogger", level: int = logging.NOTSET, debug_priority: int = 1):
        super().__init__(level)
        self.target = target
        self.debug_priority = debug_priority

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
        except Exception:
            self.handleError(record)
            return

        # Already formatted: pass through as a plain message.
        if record.levelno >= logging.ERROR:
            self.target.error(record.name, message)
        elif record.levelno >= logging.INFO:
            self.target.info(record.name, message)
        else:
            self.target.log_at_level(self.debug_priority, record.name, message)
