"""Pydantic schemas for token responses."""
from __future__ import annotations

from pydantic import BaseModel


class TokenResponse(BaseModel):
    token: str


__all__ = ["TokenResponse"]
