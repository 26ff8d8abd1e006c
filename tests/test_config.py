"""
Tests for settings loading.
"""

import pytest
from pydantic import ValidationError

from core.config import (
    ContrastSettings,
    LogLevel,
    OutputFormat,
    get_settings,
    get_settings_uncached,
)


class TestContrastSettings:
    """Tests for ContrastSettings."""

    def test_defaults(self):
        """Test default values."""
        settings = ContrastSettings(_env_file=None)

        assert settings.log_level == LogLevel.WARNING
        assert settings.precision is None
        assert settings.output_format == OutputFormat.TEXT
        assert settings.error_exit_code == 1

    def test_environment_overrides(self, monkeypatch):
        """Test CONTRAST_* variables are read."""
        monkeypatch.setenv("CONTRAST_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("CONTRAST_PRECISION", "3")
        monkeypatch.setenv("CONTRAST_OUTPUT_FORMAT", "json")
        monkeypatch.setenv("CONTRAST_ERROR_EXIT_CODE", "0")

        settings = get_settings_uncached()

        assert settings.log_level == LogLevel.DEBUG
        assert settings.precision == 3
        assert settings.output_format == OutputFormat.JSON
        assert settings.error_exit_code == 0

    def test_invalid_precision(self, monkeypatch):
        """Test out-of-range precision is rejected."""
        monkeypatch.setenv("CONTRAST_PRECISION", "-1")

        with pytest.raises(ValidationError):
            get_settings_uncached()

    def test_cached(self):
        """Test get_settings returns a cached instance."""
        assert get_settings() is get_settings()
