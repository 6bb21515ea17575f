"""Dependencies for tokens module."""
from __future__ import annotations

from typing import Callable

from fastapi import Depends, Request

from ..config import Settings
from ..dependencies import get_app_settings, get_token_store
from ..infrastructure.token_store import TokenStore
from .service import TokenService


async def get_token_service(
    store: TokenStore = Depends(get_token_store),
    settings: Settings = Depends(get_app_settings),
) -> TokenService:
    return TokenService(store, settings)


def first_query_value(name: str) -> Callable[[Request], str]:
    """Return the first value of a repeated query parameter, or ``""`` when absent."""

    def dependency(request: Request) -> str:
        values = request.query_params.getlist(name)
        return values[0] if values else ""

    return dependency


__all__ = ["get_token_service", "first_query_value"]
