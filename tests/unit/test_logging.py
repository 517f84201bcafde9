"""Tests for the logging helper."""
import importlib
import logging

from storefront.infrastructure.logging import get_logger


def test_get_logger_installs_a_single_handler():
    logger = get_logger("storefront.tests.logging")
    again = get_logger("storefront.tests.logging")

    assert logger is again
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO
    assert "%(levelname)s" in logger.handlers[0].formatter._fmt


def test_importing_the_package_installs_no_handler(monkeypatch):
    import storefront

    root = logging.getLogger("storefront")
    monkeypatch.setattr(root, "handlers", [])

    importlib.reload(storefront)

    assert root.handlers == []
