"""Shared test fixtures and configuration."""

import logging
from collections.abc import Generator

import pytest

from te_render.logging_setup import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_package_logger() -> Generator[None, None, None]:
    """Undo any handler the CLI installed so caplog sees package records."""
    yield

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
