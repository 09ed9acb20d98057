"""Fixtures for the CLI tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Remove handlers installed by the CLI so they never outlive a captured stream."""
    yield
    package_logger = logging.getLogger("delta2html")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
