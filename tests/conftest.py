"""Root conftest for all tests.

Every test pins "today" explicitly; nothing reads the wall clock.
"""

from datetime import date

import pytest
from loguru import logger


@pytest.fixture
def today() -> date:
    """A fixed Monday anchor day."""
    return date(2025, 1, 6)


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks added by a test (e.g. the CLI's setup_logger) once it finishes."""
    yield
    logger.remove()
    logger.add(lambda _: None, level="DEBUG")
