"""
Configuration and settings for the QuickEx backend.
"""

from __future__ import annotations

from functools import lru_cache
from typing import List, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-backed settings for the FastAPI service."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Stellar network the service talks about in docs and logs
    network: Literal["testnet", "mainnet"] = Field(default="testnet")

    # Supabase (required, startup fails without them)
    supabase_url: str
    supabase_anon_key: str

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=4000, ge=1, le=65535)
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])

    # Logging
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = Field(
        default="INFO"
    )

    @field_validator("network", mode="before")
    @classmethod
    def _lower_network(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("supabase_url")
    @classmethod
    def _check_supabase_url(cls, v: str) -> str:
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("SUPABASE_URL must be an http(s) URL")
        return v.rstrip("/")

    @field_validator("supabase_anon_key")
    @classmethod
    def _check_supabase_anon_key(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("SUPABASE_ANON_KEY must not be blank")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
