"""Application settings parsed from environment variables and defaults."""

import json
from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CORS_ORIGINS = ["http://localhost:5173", "http://127.0.0.1:5173"]


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    app_name: str = "Release Radar API"
    environment: str = "development"
    api_prefix: str = "/api"

    tmdb_bearer_token: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("TMDB_BEARER_TOKEN", "VITE_TMDB_BEARER_TOKEN", "tmdb_bearer_token"),
    )
    tmdb_api_base: str = "https://api.themoviedb.org/3"
    tmdb_image_base: str = "https://image.tmdb.org/t/p/w500"
    tmdb_backdrop_base: str = "https://image.tmdb.org/t/p/w780"
    tmdb_language: str = "en-US"
    upcoming_page_count: int = Field(default=5, ge=1)
    http_timeout_seconds: float = 15.0
    placeholder_image: str = "/no-image.png"

    session_cache_size: int = Field(default=256, ge=1)
    session_cookie_name: str = "radar_session"

    log_level: str = "INFO"
    cors_origins: list[str] | str = Field(default_factory=lambda: DEFAULT_CORS_ORIGINS.copy())

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_cors_origins(cls, value: str | list[str] | None) -> list[str]:
        """Normalize CORS origins from JSON, CSV, or list inputs."""
        if isinstance(value, list):
            cleaned = [origin.strip() for origin in value if isinstance(origin, str) and origin.strip()]
            return cleaned or DEFAULT_CORS_ORIGINS.copy()
        if isinstance(value, str):
            stripped = value.strip()
            if not stripped:
                return DEFAULT_CORS_ORIGINS.copy()
            try:
                parsed = json.loads(stripped)
            except json.JSONDecodeError:
                parsed = None
            if isinstance(parsed, list):
                cleaned = [str(origin).strip() for origin in parsed if str(origin).strip()]
                if cleaned:
                    return cleaned
            origins = [origin.strip() for origin in stripped.split(",") if origin.strip()]
            if origins:
                return origins
        return DEFAULT_CORS_ORIGINS.copy()

    @field_validator("tmdb_bearer_token", mode="before")
    @classmethod
    def _blank_token_is_missing(cls, value: str | None) -> str | None:
        """Treat empty or whitespace-only tokens as not configured."""
        if isinstance(value, str):
            stripped = value.strip()
            return stripped or None
        return value

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings to avoid re-parsing environment variables."""
    return Settings()


settings = get_settings()
