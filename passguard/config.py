"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - Settings cover the logging layer only; validation rules are never configurable
    - get_settings() is cached (lru_cache) - single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - PASSGUARD_ prefix: avoids clashing with generic LOG_LEVEL in the caller's env
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMATS = ("json", "text")


class Settings(BaseSettings):
    """passguard settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PASSGUARD_", env_file=".env",
        case_sensitive=False, extra="ignore",
    )

    # Observability
    log_level: str = "WARNING"
    log_format: str = "text"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v

    @field_validator("log_format", mode="before")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        """Only json and text formatters exist."""
        if isinstance(v, str):
            v = v.lower()
        if v not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {LOG_FORMATS}, got {v!r}")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
