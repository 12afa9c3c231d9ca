"""Logging configuration for the display switcher CLI.

Logs go to stderr so they never mix with the menu on stdout.
"""

import logging
import sys


DEFAULT_FORMAT = "%(levelname)s: %(message)s"
VERBOSE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEBUG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d: %(message)s"

LOGGER_NAME = "sway_display_switcher"


class ColoredFormatter(logging.Formatter):
    """Colored log formatter for terminal output."""

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
    }
    RESET = '\033[0m'

    def format(self, record):
        """Format log record with colors."""
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def setup_logging(verbose: bool = False, debug: bool = False) -> logging.Logger:
    """Configure logging for the switcher.

    Args:
        verbose: Enable verbose logging (INFO level)
        debug: Enable debug logging (DEBUG level)

    Returns:
        Configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()

    if debug:
        logger.setLevel(logging.DEBUG)
        log_format = DEBUG_FORMAT
    elif verbose:
        logger.setLevel(logging.INFO)
        log_format = VERBOSE_FORMAT
    else:
        logger.setLevel(logging.WARNING)
        log_format = DEFAULT_FORMAT

    handler = logging.StreamHandler(sys.stderr)
    if sys.stderr.isatty():
        handler.setFormatter(ColoredFormatter(log_format))
    else:
        handler.setFormatter(logging.Formatter(log_format))

    logger.addHandler(handler)

    return logger
