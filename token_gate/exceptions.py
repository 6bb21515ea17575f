"""Shared exception hierarchy for the token-gate service."""
from __future__ import annotations

from typing import Optional


class TokenGateError(Exception):
    """Base exception for domain specific failures.

    ``status_code`` is the HTTP status the API answers with and ``message`` the
    plain-text body sent to the client.
    """

    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class ConfigurationError(TokenGateError):
    """Raised when the process configuration cannot be used."""


class RepositoryError(TokenGateError):
    """Raised when data access fails."""

    def __init__(self, message: str | None = None, *, cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.cause = cause


class StorageError(RepositoryError):
    """Raised when the token file cannot be read, parsed or written."""

    message = "Storage failure"


class ServiceError(TokenGateError):
    """Raised when a service level operation fails."""


__all__ = [
    "TokenGateError",
    "ConfigurationError",
    "RepositoryError",
    "StorageError",
    "ServiceError",
]
