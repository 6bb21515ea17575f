"""Token issuance and verification service."""
from __future__ import annotations

import logging
import secrets

from ..config import Settings
from ..infrastructure.token_store import TokenRecord, TokenStore
from .exceptions import (
    AuthError,
    ConflictError,
    NotFoundError,
    TokenGenerationError,
    TokenMismatchError,
    ValidationError,
)

LOGGER = logging.getLogger(__name__)


def generate_token(length: int) -> str:
    """Return ``length`` lowercase hex characters from the system CSPRNG."""

    try:
        return secrets.token_hex((length + 1) // 2)[:length]
    except OSError as exc:
        LOGGER.error("Random source failed: %s", exc)
        raise TokenGenerationError() from exc


def _matches(supplied: bytes, expected: str) -> bool:
    return secrets.compare_digest(supplied, expected.encode("utf-8"))


def _header_bytes(value: str | None) -> bytes | None:
    """Recover the raw bytes of a header value decoded as latin-1 by the server."""

    try:
        return (value or "").encode("latin-1")
    except UnicodeEncodeError:
        return None


class TokenService:
    """Issues single-use tokens and consumes them on verification."""

    def __init__(self, store: TokenStore, settings: Settings) -> None:
        self.store = store
        self.settings = settings

    def authorize(self, auth_header: str | None) -> None:
        supplied = _header_bytes(auth_header)
        if supplied is None or not _matches(supplied, self.settings.shared_secret):
            raise AuthError()

    async def issue(self, user_id: str, guild_id: str, *, auth_header: str | None) -> str:
        """Create and persist a token for ``user_id``; one per user at a time."""

        self.authorize(auth_header)
        if not user_id or not guild_id:
            raise ValidationError()

        async with self.store.transaction() as records:
            if user_id in records:
                LOGGER.info("Rejected issuance for user %s: token already issued", user_id)
                raise ConflictError()
            token = generate_token(self.settings.token.length)
            records[user_id] = TokenRecord(token=token, guild_id=guild_id)

        LOGGER.info("Issued token for user %s in guild %s", user_id, guild_id)
        return token

    async def verify(self, user_id: str, token: str) -> TokenRecord:
        """Consume the token of ``user_id`` when ``token`` matches it."""

        if not user_id or not token:
            raise ValidationError()

        async with self.store.transaction() as records:
            record = records.get(user_id)
            if record is None:
                raise NotFoundError()
            if not _matches(token.encode("utf-8"), record.token):
                LOGGER.warning("Token mismatch for user %s", user_id)
                raise TokenMismatchError()
            del records[user_id]

        LOGGER.info("Verified user %s in guild %s", user_id, record.guild_id)
        return record


__all__ = ["TokenService", "generate_token"]
