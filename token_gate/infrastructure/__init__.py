"""Infrastructure package exports."""

from .token_store import TokenMap, TokenRecord, TokenStore

__all__ = ["TokenMap", "TokenRecord", "TokenStore"]
