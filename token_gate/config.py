"""Application configuration objects based on Pydantic settings."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FastAPISettings(BaseModel):
    """Settings that control FastAPI specific behaviour."""

    title: str = "Token Gate"
    description: str = "Single-use Discord verification tokens."
    version: str = "0.1.0"
    docs_url: str | None = "/docs"
    redoc_url: str | None = "/redoc"
    openapi_url: str | None = "/openapi.json"


class StorageSettings(BaseModel):
    """File-system location of the token store."""

    tokens_path: Path = Path("tokens.json")


class TokenSettings(BaseModel):
    """Shape of generated tokens."""

    length: int = Field(default=25, ge=1, le=64)


class LoggingSettings(BaseModel):
    """Log level and destination directory."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    directory: Path = Path("logs")


class Settings(BaseSettings):
    """Aggregate settings for the application."""

    shared_secret: str = ""
    host: str = "0.0.0.0"
    port: int | None = None

    fastapi: FastAPISettings = Field(default_factory=FastAPISettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    token: TokenSettings = Field(default_factory=TokenSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(env_file=".env", env_nested_delimiter="__", case_sensitive=False)


@lru_cache()
def load_settings() -> Settings:
    """Load application settings with caching."""

    return Settings()


__all__ = [
    "Settings",
    "FastAPISettings",
    "StorageSettings",
    "TokenSettings",
    "LoggingSettings",
    "load_settings",
]
