"""Configuration management using environment variables"""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings:
    """Application settings - YAGNI: Only what we need right now"""

    def __init__(self):
        # Environment
        self.environment = os.getenv("ENVIRONMENT", "development")

        # Currency used when the caller does not pick one
        if self.environment == "production":
            self.default_currency = self._get_required("DEFAULT_CURRENCY")
        else:
            self.default_currency = os.getenv("DEFAULT_CURRENCY", "USD")

        # Display settings for money and dates
        self.default_locale = os.getenv("DEFAULT_LOCALE", "en-US")
        self.display_timezone = os.getenv("DISPLAY_TIMEZONE", "UTC")

        # Logging
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        if self.log_level not in _VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid LOG_LEVEL: {self.log_level}. "
                f"Must be one of {sorted(_VALID_LOG_LEVELS)}"
            )

    def _get_required(self, key: str) -> str:
        """Get required environment variable or raise error."""
        value = os.getenv(key, "").strip()
        if not value:
            raise ValueError(
                f"Missing required environment variable: {key}. "
                f"Required in production mode."
            )
        return value


# Global settings instance
settings = Settings()
