"""
Configuration settings for SortBench.

Uses Pydantic Settings to load environment variables for logging, the
benchmark size guard, and data generation defaults.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    json_logs: bool = Field(False, alias="JSON_LOGS")

    # Benchmark defaults
    size_guard_threshold: int = Field(1000, ge=0, alias="SORTBENCH_SIZE_GUARD")
    profile_memory: bool = Field(False, alias="SORTBENCH_PROFILE_MEMORY")

    # Data generation defaults
    default_rows: int = Field(100, gt=0, alias="SORTBENCH_ROWS")
    default_seed: Optional[int] = Field(None, alias="SORTBENCH_SEED")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
