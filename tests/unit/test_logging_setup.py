"""Unit tests for logging setup."""

import logging

from articleindex.logging_setup import get_logger, setup_logging


def test_setup_logging_adds_single_handler() -> None:
    """Repeated setup only changes the level."""
    package_logger = logging.getLogger("articleindex")
    setup_logging("INFO")
    handlers = list(package_logger.handlers)

    setup_logging("DEBUG")

    assert package_logger.handlers == handlers
    assert package_logger.level == logging.DEBUG


def test_get_logger_returns_named_logger() -> None:
    name = "articleindex.application.use_cases.article_indexer"
    assert get_logger(name) is logging.getLogger(name)
