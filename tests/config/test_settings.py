"""
Tests for library settings.
"""

import pytest
from pydantic import ValidationError

from weatheralerts.config import Settings, get_settings, reload_settings


class TestSettings:
    """Tests for the Settings model."""

    def test_defaults(self):
        """Test default values."""
        settings = Settings()

        assert settings.log_level == "INFO"
        assert settings.log_json is False
        assert settings.log_file is None
        assert settings.vtec_century_pivot == 70
        assert settings.is_development

    def test_log_level_normalised(self):
        """Test that log level is upper-cased."""
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        """Test that unknown log levels are rejected."""
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")

    @pytest.mark.parametrize("pivot", [-1, 101])
    def test_invalid_century_pivot(self, pivot):
        """Test that the pivot must be a two-digit year boundary."""
        with pytest.raises(ValidationError):
            Settings(vtec_century_pivot=pivot)

    def test_environment_variables(self, monkeypatch):
        """Test loading values from the environment."""
        monkeypatch.setenv("VTEC_CENTURY_PIVOT", "50")
        monkeypatch.setenv("ENVIRONMENT", "production")

        settings = Settings()

        assert settings.vtec_century_pivot == 50
        assert settings.is_production

    def test_get_settings_cached(self):
        """Test that get_settings returns a cached instance."""
        assert get_settings() is get_settings()

    def test_reload_settings(self, monkeypatch):
        """Test that reload_settings picks up environment changes."""
        first = get_settings()
        monkeypatch.setenv("LOG_LEVEL", "ERROR")

        reloaded = reload_settings()

        assert reloaded is not first
        assert reloaded.log_level == "ERROR"
