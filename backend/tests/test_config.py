"""Tests for application settings."""

import pytest

from ayush_api.core.config import Settings


class TestSettings:
    """Tests for environment-driven configuration."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test default server settings."""
        for name in ("PORT", "API_PREFIX", "DEBUG"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings()
        assert settings.port == 3001
        assert settings.api_prefix == "/api"
        assert settings.debug is False

    def test_base_url(self) -> None:
        """Test the base URL combines port and prefix."""
        assert Settings(port=8080).base_url == "http://localhost:8080/api"

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test environment variables override defaults."""
        monkeypatch.setenv("PORT", "4000")
        monkeypatch.setenv("DEBUG", "true")
        settings = Settings()
        assert settings.port == 4000
        assert settings.debug is True
