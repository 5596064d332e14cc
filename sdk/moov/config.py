"""Client configuration using pydantic-settings."""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from ``MOOV_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MOOV_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Credentials: an access token takes precedence over the key pair
    PUBLIC_KEY: Optional[str] = None
    SECRET_KEY: Optional[str] = None
    ACCESS_TOKEN: Optional[str] = None

    BASE_URL: str = "https://api.moov.io"
    TIMEOUT: float = 30.0


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
