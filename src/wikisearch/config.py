from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseModel):
    """Application-specific configuration values."""

    name: str = "wikisearch"
    env: str = "development"
    port: int = 8000
    log_level: str = "INFO"
    # Transport settings for FastMCP: "stdio" (default), "http", or "sse"
    transport: Literal["stdio", "http", "sse"] = "stdio"
    host: str = "127.0.0.1"


class IndexConfig(BaseModel):
    """Term index configuration values."""

    backend: Literal["memory", "redis"] = "memory"
    # JSON file of {term: {url: count}} served by the memory backend
    counts_path: Optional[Path] = None
    redis_url: Optional[str] = None  # e.g. "redis://localhost:6379/0"
    key_prefix: str = ""
    socket_timeout: float = 5.0  # seconds


class SearchConfig(BaseModel):
    """Ranking/presentation defaults for search results."""

    # Ascending keeps the historical lowest-relevance-first presentation
    descending: bool = False
    default_limit: int = Field(default=20, ge=1)


class Settings(BaseSettings):
    """Top-level settings loaded from environment variables and .env only."""

    model_config = SettingsConfigDict(
        env_prefix="WIKISEARCH_",
        env_nested_delimiter="__",
        env_file=".env",
        extra="ignore",
    )

    app: AppConfig = AppConfig()
    index: IndexConfig = IndexConfig()
    search: SearchConfig = SearchConfig()


def load_settings() -> Settings:
    """Load settings from environment variables and .env only."""
    return Settings()  # type: ignore[call-arg]
