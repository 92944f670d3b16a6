"""Refresh token store and rotation engine.

Refresh tokens are opaque random strings handed to the client exactly once;
only their SHA-256 digest is persisted. Every successful refresh consumes the
presented token and appends a successor to its chain:

    rt0 --replaced_by--> rt1 --replaced_by--> rt2 (live leaf)

A consumed token is never usable again, so presenting ``rt0`` after ``rt1``
exists is rejected (reuse detection). Racing rotations of the same token are
settled by the conditional ``UPDATE ... WHERE revoked_at IS NULL``: the loser
sees zero affected rows and its whole unit of work is rolled back.
"""

from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass
from uuid import UUID

from jose import JWTError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from findw.core.exceptions import InternalError, UnauthorizedError
from findw.core.security import SecurityContext, hash_refresh_token, new_refresh_token
from findw.models.refresh_token import RefreshToken

logger = logging.getLogger(__name__)

# Issued tokens are far shorter; anything longer cannot match a stored digest.
MAX_REFRESH_TOKEN_LEN = 512


@dataclass(frozen=True)
class AuthTokens:
    access_token: str
    refresh_token: str
    user_id: UUID


def _is_plausible(token: str) -> bool:
    return 0 < len(token) <= MAX_REFRESH_TOKEN_LEN


def find_by_token(db: Session, token: str) -> RefreshToken | None:
    token_hash = hash_refresh_token(token)
    # Bulk updates bypass the identity map, so always reload the row.
    return (
        db.query(RefreshToken)
        .populate_existing()
        .filter(RefreshToken.token_hash == token_hash)
        .first()
    )


def insert_refresh_token(db: Session, ctx: SecurityContext, user_id: UUID, now: dt.datetime) -> tuple[str, RefreshToken]:
    """Add a new chain link for ``user_id`` and flush it; the caller owns the commit."""
    token = new_refresh_token(ctx.random_source, ctx.settings.REFRESH_TOKEN_BYTES)
    row = RefreshToken(
        user_id=user_id,
        token_hash=hash_refresh_token(token),
        created_at=now,
        expires_at=now + ctx.refresh_token_ttl,
    )
    db.add(row)
    db.flush()
    return token, row


def mark_replaced(db: Session, token_id: UUID, successor_id: UUID, now: dt.datetime) -> int:
    return (
        db.query(RefreshToken)
        .filter(RefreshToken.id == token_id, RefreshToken.revoked_at.is_(None))
        .update(
            {RefreshToken.revoked_at: now, RefreshToken.replaced_by: successor_id},
            synchronize_session=False,
        )
    )


def revoke_by_hash(db: Session, token_hash: str, now: dt.datetime) -> int:
    return (
        db.query(RefreshToken)
        .filter(RefreshToken.token_hash == token_hash, RefreshToken.revoked_at.is_(None))
        .update({RefreshToken.revoked_at: now}, synchronize_session=False)
    )


def issue_refresh_token(db: Session, ctx: SecurityContext, user_id: UUID) -> str:
    """Start a new rotation chain for ``user_id`` and commit it."""
    now = ctx.clock.now()
    try:
        token, _ = insert_refresh_token(db, ctx, user_id, now)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Refresh token issue failed for user %s", user_id)
        raise InternalError() from exc
    return token


def rotate_refresh_token(db: Session, ctx: SecurityContext, presented: str) -> AuthTokens:
    if not _is_plausible(presented):
        raise UnauthorizedError()
    now = ctx.clock.now()
    try:
        current = find_by_token(db, presented)
        if current is None:
            db.rollback()
            raise UnauthorizedError()

        current_id = current.id
        user_id = current.user_id
        if not current.is_usable(now):
            if current.replaced_by is not None:
                logger.warning("Refresh token reuse detected: token=%s user=%s", current_id, user_id)
            db.rollback()
            raise UnauthorizedError()

        new_token, successor = insert_refresh_token(db, ctx, user_id, now)
        if mark_replaced(db, current_id, successor.id, now) != 1:
            db.rollback()
            logger.warning("Refresh token rotation lost a race: token=%s user=%s", current_id, user_id)
            raise UnauthorizedError()

        access_token = ctx.token_codec.issue(str(user_id), now, ttl=ctx.refresh_access_ttl)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Refresh token rotation failed")
        raise InternalError() from exc
    except JWTError as exc:
        db.rollback()
        logger.exception("Access token signing failed during rotation")
        raise InternalError() from exc

    return AuthTokens(access_token=access_token, refresh_token=new_token, user_id=user_id)


def revoke_refresh_token(db: Session, ctx: SecurityContext, presented: str) -> bool:
    """Revoke a live token. Unknown or already revoked tokens are a no-op."""
    if not _is_plausible(presented):
        return False
    now = ctx.clock.now()
    try:
        affected = revoke_by_hash(db, hash_refresh_token(presented), now)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Refresh token revoke failed")
        raise InternalError() from exc
    return affected == 1


def walk_chain(db: Session, token_id: UUID) -> list[RefreshToken]:
    """Return the chain starting at ``token_id``, following ``replaced_by`` to the leaf."""
    chain: list[RefreshToken] = []
    seen: set[UUID] = set()
    next_id: UUID | None = token_id
    while next_id is not None and next_id not in seen:
        row = db.get(RefreshToken, next_id, populate_existing=True)
        if row is None:
            break
        seen.add(next_id)
        chain.append(row)
        next_id = row.replaced_by
    return chain


def purge_dead_refresh_tokens(db: Session, now: dt.datetime, older_than: dt.timedelta) -> int:
    """Delete rows that expired before ``now - older_than``. Operator use only."""
    cutoff = now - older_than
    try:
        deleted = (
            db.query(RefreshToken)
            .filter(RefreshToken.expires_at < cutoff)
            .delete(synchronize_session=False)
        )
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Refresh token purge failed")
        raise InternalError() from exc
    logger.info("Purged %s refresh tokens expired before %s", deleted, cutoff.isoformat())
    return deleted
