"""Planner settings loaded from environment variables/.env."""

from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from day_planner.clock import normalize_time
from day_planner.constants import DEFAULT_DAY_START, DEFAULT_DURATION


class Settings(BaseSettings):
    """Project-level settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    day_start: str = Field(DEFAULT_DAY_START, alias="DAY_PLANNER_DAY_START")
    default_duration: int = Field(DEFAULT_DURATION, alias="DAY_PLANNER_DEFAULT_DURATION")
    log_level: str = Field("INFO", alias="DAY_PLANNER_LOG_LEVEL")

    @field_validator("day_start")
    @classmethod
    def _check_day_start(cls, value: str) -> str:
        return normalize_time(value)

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()


_SETTINGS: Optional[Settings] = None


def get_settings() -> Settings:
    """Return cached settings instance."""

    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings()
    return _SETTINGS


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""

    global _SETTINGS
    _SETTINGS = None


__all__ = ["Settings", "get_settings", "reset_settings"]
