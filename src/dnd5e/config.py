"""Configuration management for dnd5e using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DecodePolicy = Literal["strict", "clamp"]


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="DND5E_",
        extra="ignore",
    )

    # Decoding
    decode_policy: DecodePolicy = Field(
        default="strict",
        description="How decoders treat out-of-range integers: reject (strict) or saturate (clamp)",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: Literal["console", "json"] = Field(
        default="console", description="Log format (console or json)"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
