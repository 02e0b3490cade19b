from __future__ import annotations

from typing import Any


class AppError(Exception):
    """Base error for domain/application exceptions."""

    status_code: int = 500

    def __init__(self, message: str, *, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.errors = errors


class ValidationError(AppError):
    """Raised for domain-level validation beyond schema validation."""

    status_code = 400


class Unauthenticated(AppError):
    """Raised when the request carries no usable bearer token."""

    status_code = 401


class InvalidToken(AppError):
    """Raised when a token fails signature/expiry checks or its user is gone."""

    status_code = 401


class Forbidden(AppError):
    """Raised when the identity lacks the role or company access."""

    status_code = 403


class NotFound(AppError):
    """Raised when entity is missing."""

    status_code = 404
