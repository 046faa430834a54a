"""
Application settings - pydantic-settings configuration.

This module defines application configuration using pydantic-settings
for environment variable loading with validation and defaults.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Registrant storage
    storage_backend: Literal["local", "remote"] = "local"
    storage_path: Path = Path("registrations.json")
    storage_key: str = "registeredUsers"

    # Remote list endpoint
    api_url: str = "https://jsonplaceholder.typicode.com"
    api_token: str | None = None  # Sent as a bearer token when set
    api_timeout_seconds: float = 10.0

    # Eligibility policy, disabled when unset
    minimum_age: int | None = None


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
