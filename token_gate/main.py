"""FastAPI application factory."""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from . import dependencies
from .config import Settings
from .exceptions import TokenGateError
from .infrastructure.token_store import TokenStore
from .logging import setup_logging
from .tokens.router import router as tokens_router

LOGGER = logging.getLogger(__name__)


async def _handle_token_gate_error(request: Request, exc: TokenGateError) -> PlainTextResponse:
    if exc.status_code >= 500:
        LOGGER.error("%s %s failed: %s", request.method, request.url.path, exc)
    return PlainTextResponse(f"{exc}\n", status_code=exc.status_code)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = settings or dependencies.get_settings()
    setup_logging(settings)

    if not settings.shared_secret:
        LOGGER.warning("SHARED_SECRET is empty; token issuance accepts requests without the auth header.")

    app = FastAPI(
        title=settings.fastapi.title,
        description=settings.fastapi.description,
        version=settings.fastapi.version,
        docs_url=settings.fastapi.docs_url,
        redoc_url=settings.fastapi.redoc_url,
        openapi_url=settings.fastapi.openapi_url,
    )
    app.state.settings = settings
    app.state.token_store = TokenStore(settings.storage.tokens_path)

    app.add_exception_handler(TokenGateError, _handle_token_gate_error)
    app.include_router(tokens_router, tags=["tokens"])

    async def health() -> dict[str, str]:
        return {"status": "ok"}

    app.add_api_route("/health", health, methods=["GET"], include_in_schema=False)

    LOGGER.info("Token store at %s", settings.storage.tokens_path)
    return app


__all__ = ["create_app"]
