"""
Configuration management for the command framework.
Loads environment variables and provides configuration settings.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from utils.validation import ValidationUtils

# Load environment variables from .env file
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


def _parse_owner_id(value: Optional[str]) -> Optional[int]:
    """Parse OWNER_ID, treating blanks and non-numeric values as unset."""
    if not value:
        return None
    value = value.strip()
    if not value.isdigit():
        return None
    return int(value)


@dataclass(frozen=True)
class Config:
    """Bot configuration settings."""

    # Discord
    DISCORD_TOKEN: str

    # Identity allowed to run owner-only commands
    OWNER_ID: Optional[int] = None

    # Command prefix
    PREFIX: str = "."

    # Logging
    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls(
            DISCORD_TOKEN=os.getenv("DISCORD_TOKEN", ""),
            OWNER_ID=_parse_owner_id(os.getenv("OWNER_ID")),
            PREFIX=os.getenv("PREFIX", "."),
            LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO").upper(),
            DEBUG=os.getenv("DEBUG", "false").lower() == "true",
        )

    @property
    def log_level(self) -> int:
        """Numeric logging level; DEBUG=true always wins."""
        if self.DEBUG:
            return logging.DEBUG
        level = logging.getLevelName(self.LOG_LEVEL.upper())
        return level if isinstance(level, int) else logging.INFO

    def validate(self) -> None:
        """Validate required configuration."""
        if not self.DISCORD_TOKEN:
            raise ValueError("DISCORD_TOKEN is required")
        if self.OWNER_ID is not None and not ValidationUtils.is_valid_snowflake(self.OWNER_ID):
            raise ValueError("OWNER_ID must be a Discord snowflake ID")
        if not self.PREFIX or self.PREFIX.strip() != self.PREFIX:
            raise ValueError("PREFIX must be non-empty without surrounding whitespace")


# Global config instance
config = Config.from_env()
