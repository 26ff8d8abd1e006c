"""Shared fixtures for contrast tests."""

import pytest

from core.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate each test from CONTRAST_* variables and cached settings."""
    for name in (
        "CONTRAST_LOG_LEVEL",
        "CONTRAST_PRECISION",
        "CONTRAST_OUTPUT_FORMAT",
        "CONTRAST_ERROR_EXIT_CODE",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
