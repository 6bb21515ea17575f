"""Token API routes."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Header
from fastapi.responses import PlainTextResponse

from .constants import (
    AUTH_HEADER,
    GUILD_ID_PARAM,
    ISSUED_MESSAGE,
    TOKEN_PARAM,
    USER_ID_PARAM,
    VERIFIED_MESSAGE,
)
from .dependencies import first_query_value, get_token_service
from .schemas import TokenResponse
from .service import TokenService

router = APIRouter()


@router.api_route("/generate-user-token", methods=["GET", "POST"], response_class=PlainTextResponse)
async def generate_user_token(
    user_id: str = Depends(first_query_value(USER_ID_PARAM)),
    guild_id: str = Depends(first_query_value(GUILD_ID_PARAM)),
    auth_header: str | None = Header(default=None, alias=AUTH_HEADER),
    service: TokenService = Depends(get_token_service),
) -> PlainTextResponse:
    """Issue a token for the user; the body is a status line followed by JSON."""

    token = await service.issue(user_id, guild_id, auth_header=auth_header)
    body = TokenResponse(token=token).model_dump_json()
    return PlainTextResponse(f"{ISSUED_MESSAGE}\n{body}\n")


@router.get("/verify", response_class=PlainTextResponse)
async def verify_token(
    user_id: str = Depends(first_query_value(USER_ID_PARAM)),
    token: str = Depends(first_query_value(TOKEN_PARAM)),
    service: TokenService = Depends(get_token_service),
) -> PlainTextResponse:
    """Consume the user's token when it matches."""

    await service.verify(user_id, token)
    return PlainTextResponse(f"{VERIFIED_MESSAGE}\n")


__all__ = ["router"]
