"""
Application settings - pydantic-settings configuration.

This module defines application configuration using pydantic-settings
for environment variable loading with validation and defaults.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Listener configuration
    host: str = "localhost"
    port: int = 3000
    log_level: str = "info"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
