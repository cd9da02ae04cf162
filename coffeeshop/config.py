"""Environment-based settings for the coffee-shop user layer.

Values come from ``COFFEESHOP_*`` environment variables or a local ``.env`` file.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DB_URL = "sqlite+pysqlite:///./coffeeshop.db"

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class Settings(BaseSettings):
    """Settings that come from environment variables."""

    database_url: str = Field(default=DEFAULT_DB_URL, description="SQLAlchemy URL of the user database")
    echo_sql: bool = Field(default=False, description="Log every SQL statement the engine emits")
    log_level: LogLevel = Field(default="INFO", description="Root log level name")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    model_config = SettingsConfigDict(
        env_prefix="COFFEESHOP_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, loaded on first use."""
    return Settings()
