"""Logging setup - console output with a one-time initialization guard."""

import logging
import sys

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_logging_initialized = False


def setup_logging(log_level: str = "INFO", log_format: str = DEFAULT_FORMAT) -> None:
    """Attach a stdout handler to the package logger. Later calls only adjust the level."""
    global _logging_initialized

    package_logger = logging.getLogger("articleindex")
    package_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    if _logging_initialized:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(log_format))
    package_logger.addHandler(handler)

    _logging_initialized = True


def get_logger(name: str) -> logging.Logger:
    """Named logger, typically called with __name__."""
    return logging.getLogger(name)
