"""Common dependency helpers."""
from __future__ import annotations

from functools import lru_cache

from fastapi import Request

from .config import Settings, load_settings
from .infrastructure.token_store import TokenStore


@lru_cache()
def get_settings() -> Settings:
    """Return cached settings instance."""

    return load_settings()


def get_app_settings(request: Request) -> Settings:
    """Return the settings the running application was built with."""

    return request.app.state.settings


def get_token_store(request: Request) -> TokenStore:
    """Return the store owned by the running application."""

    return request.app.state.token_store


__all__ = ["get_settings", "get_app_settings", "get_token_store"]
