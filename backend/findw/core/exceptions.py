"""Application error taxonomy and its mapping onto HTTP responses."""

from __future__ import annotations

import enum
from typing import Any, Dict, Optional


class ErrorKind(str, enum.Enum):
    identity_taken = "identity_taken"
    invalid_input = "invalid_input"
    unauthorized = "unauthorized"
    not_found = "not_found"
    internal = "internal"


class AppError(Exception):
    """Base exception for all application errors.

    Every subclass pins exactly one ``ErrorKind``; the transport layer only
    ever looks at the kind, never at the concrete class.
    """

    kind: ErrorKind = ErrorKind.internal
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, *, details: Optional[Dict[str, Any]] = None):
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)


class IdentityTakenError(AppError):
    """Raised when registering an email that already exists."""

    kind = ErrorKind.identity_taken
    default_message = "Email already exists"


class InvalidInputError(AppError):
    """Raised when a request payload or identifier fails validation."""

    kind = ErrorKind.invalid_input
    default_message = "Invalid request"


class UnauthorizedError(AppError):
    """Raised for bad credentials and invalid, expired, reused or absent tokens."""

    kind = ErrorKind.unauthorized
    default_message = "Invalid credentials"


class NotFoundError(AppError):
    """Raised when a resource is absent or not owned by the caller."""

    kind = ErrorKind.not_found
    default_message = "Resource not found"


class InternalError(AppError):
    """Raised when persistence or a cryptographic library fails."""

    kind = ErrorKind.internal
    default_message = "Internal server error"


# (HTTP status, stable machine-readable code) per kind.
_ERROR_RESPONSES: Dict[ErrorKind, tuple[int, str]] = {
    ErrorKind.identity_taken: (409, "EMAIL_TAKEN"),
    ErrorKind.invalid_input: (400, "BAD_REQUEST"),
    ErrorKind.unauthorized: (401, "UNAUTHORIZED"),
    ErrorKind.not_found: (404, "NOT_FOUND"),
    ErrorKind.internal: (500, "INTERNAL"),
}

if set(_ERROR_RESPONSES) != set(ErrorKind):  # pragma: no cover
    raise RuntimeError("every ErrorKind needs an HTTP mapping")


def error_response(error: AppError) -> tuple[int, Dict[str, Any]]:
    """Return ``(status_code, body)`` for an application error."""
    status_code, code = _ERROR_RESPONSES[error.kind]
    message = error.message if error.kind is not ErrorKind.internal else InternalError.default_message
    body: Dict[str, Any] = {"error": code, "message": message}
    if error.details and error.kind is not ErrorKind.internal:
        body["details"] = error.details
    return status_code, body
