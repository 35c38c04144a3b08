from __future__ import annotations
from functools import lru_cache
from pathlib import Path
from typing import Literal
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvironmentSettings(BaseSettings):
    """Process-wide knobs, read from PROJECT_ENVIRONMENT_* variables."""

    model_config = SettingsConfigDict(
        env_prefix="PROJECT_ENVIRONMENT_",
        case_sensitive=False,
        extra="ignore",
        env_ignore_empty=True,
    )

    root: Path | None = Field(default=None, description="explicit project root")
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


@lru_cache(maxsize=1)
def get_settings() -> EnvironmentSettings:
    return EnvironmentSettings()

def reload_settings() -> None:
    get_settings.cache_clear()

__all__ = ["EnvironmentSettings", "get_settings", "reload_settings"]
