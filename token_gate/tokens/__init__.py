"""Tokens package exports."""

from .router import router
from .service import TokenService, generate_token

__all__ = ["router", "TokenService", "generate_token"]
