"""Token issuance and verification exceptions."""
from __future__ import annotations

from ..exceptions import ServiceError


class AuthError(ServiceError):
    """Raised when the shared-secret header is missing or wrong."""

    status_code = 401
    message = "Unauthorized"


class ValidationError(ServiceError):
    """Raised when a required query parameter is missing or empty."""

    status_code = 400
    message = "Missing parameters"


class ConflictError(ServiceError):
    """Raised when a user already holds an unverified token."""

    status_code = 409
    message = "User already has a token"


class NotFoundError(ServiceError):
    """Raised when no token was issued to the user."""

    status_code = 404
    message = "User not found"


class TokenMismatchError(ServiceError):
    """Raised when the submitted token differs from the stored one."""

    status_code = 401
    message = "Invalid token"


class TokenGenerationError(ServiceError):
    """Raised when the random source fails."""

    status_code = 500
    message = "Error generating token"


__all__ = [
    "AuthError",
    "ValidationError",
    "ConflictError",
    "NotFoundError",
    "TokenMismatchError",
    "TokenGenerationError",
]
