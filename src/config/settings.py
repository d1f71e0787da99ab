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

    # Server configuration
    seed_fixture_user: bool = True  # Insert test@gmail.com at startup
    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"

    # Client configuration
    api_url: str = "http://localhost:3001"
    request_timeout_seconds: float = 10.0
    registered_email_hints: list[str] = ["test@gmail.com"]  # Stale client-side hint, server is authoritative


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
