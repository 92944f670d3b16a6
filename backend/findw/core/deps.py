"""Common FastAPI dependencies: the authorization gate and pagination."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from fastapi import Depends, Query, Request

from findw.core.exceptions import UnauthorizedError
from findw.core.security import SecurityContext


@dataclass(frozen=True)
class AuthenticatedUser:
    id: UUID


@dataclass(frozen=True)
class Page:
    limit: int
    offset: int


def get_security(request: Request) -> SecurityContext:
    return request.app.state.security


def parse_bearer(authorization: str | None) -> str | None:
    """Return the token from an ``Authorization`` value; the scheme name is case-insensitive."""
    scheme, _, token = (authorization or "").partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None


def get_current_user(request: Request, security: SecurityContext = Depends(get_security)) -> AuthenticatedUser:
    """Validate the bearer access token without touching the database."""
    token = parse_bearer(request.headers.get("Authorization"))
    if not token:
        raise UnauthorizedError()
    user_id = security.token_codec.verify_subject(token, security.clock.now())
    return AuthenticatedUser(id=user_id)


def get_page(
    limit: int | None = Query(default=None),
    offset: int | None = Query(default=None),
    security: SecurityContext = Depends(get_security),
) -> Page:
    settings = security.settings
    resolved_limit = settings.PAGE_DEFAULT_LIMIT if limit is None else limit
    resolved_limit = max(1, min(resolved_limit, settings.PAGE_MAX_LIMIT))
    resolved_offset = max(0, offset or 0)
    return Page(limit=resolved_limit, offset=resolved_offset)
