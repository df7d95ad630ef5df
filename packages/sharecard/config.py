"""
Share card configuration using Pydantic Settings.

Values come from SHARECARD_* environment variables or a local .env file.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import PrivacyPreset


class ShareCardConfig(BaseSettings):
    """Share card settings with environment variable support."""

    # Preset selected when the share screen opens
    default_preset: PrivacyPreset = PrivacyPreset.SEMI

    # Demo roster used when the roster store has nothing to offer
    sample_roster_size: int = 15

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="SHARECARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache()
def get_config() -> ShareCardConfig:
    """Get cached config instance."""
    return ShareCardConfig()
