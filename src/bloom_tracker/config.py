"""
Application settings.

Values come from ``BLOOM_TRACKER_*`` environment variables or a ``.env``
file in the working directory. Analysis functions never read settings;
the CLI and flows pass values in explicitly.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from bloom_tracker.datasources.vegetation.models import IndexType


class Settings(BaseSettings):
    """Runtime configuration."""

    model_config = SettingsConfigDict(
        env_prefix="BLOOM_TRACKER_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "bloom-tracker"
    app_env: Literal["development", "production", "test"] = "development"
    debug: bool = False

    # Default location: Anza-Borrego desert, a well-known superbloom site
    lat: float = Field(default=33.26, ge=-90, le=90)
    lon: float = Field(default=-116.40, ge=-180, le=180)

    index_type: IndexType = IndexType.NDVI
    data_source: Literal["synthetic", "composite", "modis"] = "synthetic"
    smoothing_window: int = Field(default=5, ge=1)

    data_dir: Path = Path("data")
    cache_ttl_hours: float = Field(default=1.0, gt=0)


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
