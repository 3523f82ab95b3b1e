"""Environment-driven settings for typedenum."""

import os
from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator


class Settings(BaseModel):
    """Runtime settings read from ``TYPEDENUM_*`` environment variables."""

    model_config = ConfigDict(frozen=True)

    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "console"
    registry_mode: Literal["strict", "replace"] = "strict"

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("log_format", "registry_mode", mode="before")
    @classmethod
    def lowercase(cls, v: str) -> str:
        return v.strip().lower() if isinstance(v, str) else v


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Read settings from the environment once per process."""
    return Settings(
        log_level=os.getenv("TYPEDENUM_LOG_LEVEL", "INFO"),
        log_format=os.getenv("TYPEDENUM_LOG_FORMAT", "console"),
        registry_mode=os.getenv("TYPEDENUM_REGISTRY", "strict"),
    )


def reset_settings() -> None:
    """Drop cached settings so the environment is read again."""
    get_settings.cache_clear()
