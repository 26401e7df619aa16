"""Tests for configuration management and logging setup."""

import pytest
from loguru import logger
from pydantic import ValidationError

from weather_client.core.config import Settings
from weather_client.core.logging import setup_logging


class TestSettings:
    """Test configuration settings."""

    def test_default_values(self, monkeypatch):
        """Test that default values are loaded correctly."""
        monkeypatch.delenv("OPENWEATHERMAP_API_KEY", raising=False)
        settings = Settings(_env_file=None)

        assert settings.OPENWEATHERMAP_BASE_URL == "https://api.openweathermap.org/data/2.5"
        assert settings.OPENWEATHERMAP_API_KEY is None
        assert settings.UPSTREAM_TIMEOUT == 10.0
        assert settings.UNITS == "standard"
        assert settings.LOG_LEVEL == "INFO"

    def test_environment_override(self, monkeypatch):
        """Test that environment variables override defaults."""
        monkeypatch.setenv("OPENWEATHERMAP_API_KEY", "env-key")
        monkeypatch.setenv("UNITS", "METRIC")

        settings = Settings(_env_file=None)

        assert settings.OPENWEATHERMAP_API_KEY == "env-key"
        assert settings.UNITS == "metric"

    def test_log_level_validation(self):
        """Test that log level is validated and normalized."""
        assert Settings(LOG_LEVEL="DEBUG").LOG_LEVEL == "DEBUG"
        assert Settings(LOG_LEVEL="info").LOG_LEVEL == "INFO"
        assert Settings(LOG_LEVEL="error").LOG_LEVEL == "ERROR"

        with pytest.raises(ValidationError, match="LOG_LEVEL must be one of"):
            Settings(LOG_LEVEL="INVALID")

    def test_units_validation(self):
        """Test that units are validated and normalized."""
        assert Settings(UNITS="Imperial").UNITS == "imperial"

        with pytest.raises(ValidationError, match="UNITS must be one of"):
            Settings(UNITS="kelvin")

    def test_base_url_validation(self):
        """Test that base URL is validated and normalized."""
        settings = Settings(OPENWEATHERMAP_BASE_URL="https://api.example.com/")
        assert settings.OPENWEATHERMAP_BASE_URL == "https://api.example.com"

        settings = Settings(OPENWEATHERMAP_BASE_URL="http://localhost:8080")
        assert settings.OPENWEATHERMAP_BASE_URL == "http://localhost:8080"

        with pytest.raises(ValidationError, match="must start with http"):
            Settings(OPENWEATHERMAP_BASE_URL="api.example.com")

    def test_timeout_constraints(self):
        """Test that the timeout range is enforced."""
        Settings(UPSTREAM_TIMEOUT=0.5)

        with pytest.raises(ValidationError):
            Settings(UPSTREAM_TIMEOUT=0.05)  # Too low

        with pytest.raises(ValidationError):
            Settings(UPSTREAM_TIMEOUT=60)  # Too high


class TestLogging:
    """Test loguru setup."""

    def test_setup_installs_single_handler(self):
        """Test that setup returns a handler id that can be removed."""
        handler_id = setup_logging("debug")
        try:
            assert isinstance(handler_id, int)
        finally:
            logger.remove(handler_id)

    def test_setup_replaces_existing_handlers(self):
        """Test that previously installed sinks stop receiving messages."""
        messages = []
        logger.add(messages.append, format="{message}")

        handler_id = setup_logging("WARNING")
        try:
            logger.warning("after setup")
        finally:
            logger.remove(handler_id)

        assert messages == []

