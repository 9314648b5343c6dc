"""Test configuration and fixtures.

Provides:
- Isolation of cached settings from environment changes
- Restoring the ``tagged_result`` logger after tests that configure it
"""

import logging
from collections.abc import Iterator

import pytest

from tagged_result.config import get_settings
from tagged_result.logging_config import LOGGER_NAME


@pytest.fixture
def clear_settings_cache(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop cached settings so each test sees its own environment."""
    monkeypatch.chdir("/")  # keep a local .env file out of the tests
    for name in ("LOG_LEVEL", "LOG_CAPTURED_EXCEPTIONS", "CAPTURED_LOG_LEVEL"):
        monkeypatch.delenv(f"TAGGED_RESULT_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def reset_library_logger() -> Iterator[None]:
    """Restore the library logger after tests that configure it."""
    logger = logging.getLogger(LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in logger.handlers:
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)
