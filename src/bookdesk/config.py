"""Configuration management for bookdesk.

Loads configuration from environment variables and provides defaults.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# Load .env file if present
load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Application configuration."""

    # Logging
    log_level: str

    # Notifications
    sender: str

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls(
            log_level=os.environ.get("BOOKDESK_LOG_LEVEL", "INFO").upper(),
            sender=os.environ.get("BOOKDESK_SENDER", "bookdesk"),
        )

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []

        if self.log_level not in LOG_LEVELS:
            errors.append(
                f"Unknown log level: {self.log_level} (expected one of {', '.join(LOG_LEVELS)})"
            )

        return errors

    @property
    def log_level_number(self) -> int:
        """Numeric logging level.

        Raises:
            ValueError: If the configured level is unknown
        """
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level}")
        return getattr(logging, self.log_level)


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the global config instance."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def reset_config() -> None:
    """Reset the global config instance. Used for testing."""
    global _config
    _config = None
