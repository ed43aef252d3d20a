"""
Filter Criteria - Configuration Management
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings loaded from environment variables and an optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Application
    # -------------------------------------------------------------------------
    APP_ENV: str = Field(default="development", description="Environment name")
    DEBUG: bool = Field(default=False, description="Debug mode (pretty console logs)")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Reject level names the logging module does not know."""
        if not isinstance(logging.getLevelName(v.upper()), int):
            raise ValueError(f"Unknown log level: {v}")
        return v.upper()

    # -------------------------------------------------------------------------
    # Evaluation
    # -------------------------------------------------------------------------
    DEFAULT_CONCURRENCY: Optional[int] = Field(
        default=None,
        description="Max records evaluated at once by batch filtering (None or 0 = unbounded)",
    )
    NORMALIZE_CACHE_SIZE: int = Field(
        default=4096,
        ge=0,
        description="Entries kept by the text normalization cache (0 disables caching)",
    )
    GEO_DEFAULT_UNIT: str = Field(default="km", description="Distance unit when a GEO match value omits one")

    @field_validator("GEO_DEFAULT_UNIT")
    @classmethod
    def validate_geo_unit(cls, v: str) -> str:
        """Only kilometers and miles are supported."""
        if v not in ("km", "mi"):
            raise ValueError("GEO_DEFAULT_UNIT must be 'km' or 'mi'")
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
