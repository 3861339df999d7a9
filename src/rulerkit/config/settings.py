"""
Application settings using Pydantic.

Provides environment-based configuration loading with RULERKIT_ prefix.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Ruler API
    ruler_address: str | None = None
    ruler_tenant_id: str | None = None
    ruler_key: str | None = None

    # HTTP client settings
    http_timeout: float = 30.0

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "RULERKIT_"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
