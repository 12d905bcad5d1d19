from functools import lru_cache
from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Artistly API"
    debug: bool = False
    api_v1_prefix: str = "/api/v1"
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Storage backend for onboarded artists and favorites
    storage_backend: Literal["memory", "file", "redis", "database"] = "file"
    storage_path: str = "data"
    redis_url: str = "redis://localhost:6379"
    database_url: str = "sqlite+aiosqlite:///./artistly.db"

    # Simulated latency (seconds)
    directory_delay_seconds: float = 1.0
    artist_delay_seconds: float = 0.5
    submit_delay_seconds: float = 2.0

    # Directory listing
    page_size: int = 12


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
