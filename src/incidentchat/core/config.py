"""
Incident Chat - Application Configuration
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Application
    # -------------------------------------------------------------------------
    APP_ENV: str = Field(default="development")
    APP_DEBUG: bool = Field(default=True)

    # -------------------------------------------------------------------------
    # Google Chat
    # -------------------------------------------------------------------------
    # Must already carry its query string (key/token), threadKey is appended
    INCIDENT_CHAT_WEBHOOK_URL: str = Field(default="")
    # Thread key, APP_ENV when unset
    INCIDENT_CHAT_THREAD: Optional[str] = Field(default=None)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
