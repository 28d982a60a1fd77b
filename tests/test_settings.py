"""
Tests for the Settings configuration.
"""

import pytest

from nospace.config.settings import Settings
from nospace.exceptions import ConfigurationError


class TestSettings:
    """Test cases for Settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("NOSPACE_LOG_LEVEL", raising=False)
        monkeypatch.delenv("NOSPACE_INPUT", raising=False)
        monkeypatch.delenv("NOSPACE_PRETTY", raising=False)

        settings = Settings()

        assert settings.log_level == "INFO"
        assert settings.input_path is None
        assert settings.pretty is False

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("NOSPACE_LOG_LEVEL", "debug")
        monkeypatch.setenv("NOSPACE_INPUT", "/data/input.txt")
        monkeypatch.setenv("NOSPACE_PRETTY", "yes")

        settings = Settings()

        assert settings.log_level == "DEBUG"
        assert settings.input_path == "/data/input.txt"
        assert settings.pretty is True

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("NOSPACE_LOG_LEVEL", "chatty")

        with pytest.raises(ConfigurationError, match="NOSPACE_LOG_LEVEL"):
            Settings()
