"""
Pytest configuration and shared fixtures.

Puts the project root on sys.path so the flat layout packages
(models, services, utils) import without an install.
"""

import logging
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from models.cart import Cart
from utils.logger import LOGGER_NAME


@pytest.fixture
def cart():
    """Fresh, empty cart for each test."""
    return Cart()


def _drop_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def app_logger():
    """Give setup_logger() a clean "shopping_cart" logger and clean up after."""
    logger = logging.getLogger(LOGGER_NAME)
    _drop_handlers(logger)
    yield logger
    _drop_handlers(logger)
    logger.setLevel(logging.NOTSET)
