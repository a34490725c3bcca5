"""
Centralized configuration management for the geocoding adapter.

All configuration is loaded from environment variables with sensible defaults.
Use the `settings` singleton for accessing configuration values.

Usage:
    from geocode_adapter.core.config import settings

    print(settings.GOOGLE_GEOCODING_URL)
    print(settings.GOOGLE_GEOCODING_TIMEOUT)
"""

import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
# Search in common locations
_env_paths = [
    Path(__file__).parent.parent.parent / ".env",  # project root
    Path.cwd() / ".env",  # Current working directory
]

for env_path in _env_paths:
    if env_path.exists():
        load_dotenv(env_path)
        break


def _optional_env(name: str) -> Optional[str]:
    value = os.getenv(name, "").strip()
    return value or None


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    # ==========================================================================
    # Google Geocoding API
    # ==========================================================================
    GOOGLE_GEOCODING_API_KEY: str = field(
        default_factory=lambda: os.getenv("GOOGLE_GEOCODING_API_KEY", "")
    )
    GOOGLE_GEOCODING_URL: str = field(
        default_factory=lambda: os.getenv(
            "GOOGLE_GEOCODING_URL",
            "https://maps.googleapis.com/maps/api/geocode/json"
        )
    )
    GOOGLE_GEOCODING_TIMEOUT: float = field(
        default_factory=lambda: float(os.getenv("GOOGLE_GEOCODING_TIMEOUT", "10"))
    )

    # Optional result biasing, passed through as `language` / `region`
    GOOGLE_GEOCODING_LANGUAGE: Optional[str] = field(
        default_factory=lambda: _optional_env("GOOGLE_GEOCODING_LANGUAGE")
    )
    GOOGLE_GEOCODING_REGION: Optional[str] = field(
        default_factory=lambda: _optional_env("GOOGLE_GEOCODING_REGION")
    )

    # ==========================================================================
    # Logging
    # ==========================================================================
    LOG_LEVEL: str = field(
        default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper()
    )

    def validate_google_geocoding(self) -> bool:
        """Check if Google Geocoding API key is configured."""
        return bool(self.GOOGLE_GEOCODING_API_KEY)


# Singleton settings instance
settings = Settings()
