"""Generation defaults loaded from the environment."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pkce_kit.length import DEFAULT_LENGTH, MAX_LENGTH, MIN_LENGTH
from pkce_kit.method import Method


class Settings(BaseSettings):
    """PKCE generation settings loaded from `PKCE_*` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PKCE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    length: int = Field(default=DEFAULT_LENGTH, ge=MIN_LENGTH, le=MAX_LENGTH)
    method: Method = Method.S256


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
