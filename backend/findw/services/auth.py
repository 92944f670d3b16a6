"""Session use-cases: register, login, refresh and logout."""

from __future__ import annotations

import logging
from uuid import UUID

from jose import JWTError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from findw.core.exceptions import IdentityTakenError, InternalError, InvalidInputError, UnauthorizedError
from findw.core.security import PasswordCheck, SecurityContext
from findw.models.user import User
from findw.services.refresh_tokens import (
    AuthTokens,
    issue_refresh_token,
    revoke_refresh_token,
    rotate_refresh_token,
)

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return (email or "").strip()


def find_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == normalize_email(email)).first()


def get_user(db: Session, user_id: UUID) -> User | None:
    try:
        return db.get(User, user_id)
    except SQLAlchemyError as exc:
        logger.exception("User lookup failed: %s", user_id)
        raise InternalError() from exc


def register_user(db: Session, ctx: SecurityContext, email: str, password: str) -> User:
    email = normalize_email(email)
    if not email:
        raise InvalidInputError("email is required")
    if not password:
        raise InvalidInputError("password is required")

    try:
        password_hash = ctx.password_hasher.hash(password)
    except (ValueError, TypeError) as exc:
        logger.exception("Password hashing failed")
        raise InternalError() from exc

    user = User(email=email, password_hash=password_hash, created_at=ctx.clock.now())
    db.add(user)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.info("Registration rejected, email taken: %s", email)
        raise IdentityTakenError() from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Registration failed: %s", email)
        raise InternalError() from exc

    logger.info("User registered: %s", user.id)
    return user


def authenticate_user(db: Session, ctx: SecurityContext, email: str, password: str) -> User:
    """Return the user for valid credentials.

    Unknown email, wrong password and a corrupted stored hash all raise the
    same ``UnauthorizedError`` so the response never reveals which one failed.
    """
    try:
        user = find_user_by_email(db, email)
    except SQLAlchemyError as exc:
        logger.exception("Login lookup failed")
        raise InternalError() from exc

    if user is None:
        ctx.password_hasher.burn(password)
        logger.warning("Login failed: user not found (%s)", normalize_email(email))
        raise UnauthorizedError()

    check = ctx.password_hasher.verify(password, user.password_hash)
    if check is PasswordCheck.malformed:
        logger.error("Login failed: stored password hash is malformed for user %s", user.id)
        raise UnauthorizedError()
    if check is PasswordCheck.mismatch:
        logger.warning("Login failed: invalid password (%s)", user.email)
        raise UnauthorizedError()
    return user


def login_user(db: Session, ctx: SecurityContext, email: str, password: str) -> AuthTokens:
    user = authenticate_user(db, ctx, email, password)
    user_id = user.id
    now = ctx.clock.now()
    try:
        access_token = ctx.token_codec.issue(str(user_id), now, ttl=ctx.login_access_ttl)
    except JWTError as exc:
        logger.exception("Access token signing failed")
        raise InternalError() from exc
    refresh_token = issue_refresh_token(db, ctx, user_id)
    logger.info("User logged in: %s", user_id)
    return AuthTokens(access_token=access_token, refresh_token=refresh_token, user_id=user_id)


def refresh_session(db: Session, ctx: SecurityContext, refresh_token: str) -> AuthTokens:
    return rotate_refresh_token(db, ctx, refresh_token)


def logout_user(db: Session, ctx: SecurityContext, refresh_token: str) -> None:
    if revoke_refresh_token(db, ctx, refresh_token):
        logger.info("Refresh token revoked on logout")
