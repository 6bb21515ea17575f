"""Constants used across the tokens package."""

AUTH_HEADER = "X-Custom-Auth"
USER_ID_PARAM = "user-discord-id"
GUILD_ID_PARAM = "guild-discord-id"
TOKEN_PARAM = "token"
ISSUED_MESSAGE = "Token generated successfully"
VERIFIED_MESSAGE = "Verification successful"

__all__ = [
    "AUTH_HEADER",
    "USER_ID_PARAM",
    "GUILD_ID_PARAM",
    "TOKEN_PARAM",
    "ISSUED_MESSAGE",
    "VERIFIED_MESSAGE",
]
