"""
Configuration settings for the application.
"""

import logging
import os

from dotenv import load_dotenv

from nospace.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.log_level: str = self._get_log_level("NOSPACE_LOG_LEVEL", "INFO")
        self.input_path: str | None = self._get_env("NOSPACE_INPUT", "") or None
        self.pretty: bool = self._get_flag("NOSPACE_PRETTY", False)

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_log_level(self, key: str, default: str) -> str:
        """Get a logging level name, raise error if it is not a standard level."""
        value = self._get_env(key, default).strip().upper()
        if value not in _VALID_LOG_LEVELS:
            raise ConfigurationError(
                f"Environment variable {key} must be one of {', '.join(_VALID_LOG_LEVELS)}, got '{value}'"
            )
        return value

    def _get_flag(self, key: str, default: bool) -> bool:
        value = os.getenv(key)
        if value is None:
            return default
        return value.strip().lower() in ("1", "true", "yes")


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format=LOG_FORMAT,
    )


# Global settings instance
settings = Settings()
