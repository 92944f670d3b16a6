"""Service helpers for per-user search settings."""

from __future__ import annotations

import logging
from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from findw.core.clock import Clock
from findw.core.config import Settings
from findw.core.exceptions import InternalError, InvalidInputError, UnauthorizedError
from findw.models.user import User
from findw.models.user_settings import UserSettings

logger = logging.getLogger(__name__)


def get_or_create_settings(db: Session, *, user_id: UUID, settings: Settings, clock: Clock) -> UserSettings:
    record = db.get(UserSettings, user_id)
    if record is not None:
        return record
    if db.get(User, user_id) is None:
        # Token outlived its account.
        raise UnauthorizedError()

    record = UserSettings(
        user_id=user_id,
        search_interval_minutes=settings.DEFAULT_SEARCH_INTERVAL_MINUTES,
        updated_at=clock.now(),
    )
    db.add(record)
    try:
        db.commit()
    except IntegrityError:
        # A concurrent request created the row first.
        db.rollback()
        existing = db.get(UserSettings, user_id)
        if existing is None:
            logger.error("Settings create conflicted but no row exists for user %s", user_id)
            raise InternalError()
        return existing
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Settings create failed for user %s", user_id)
        raise InternalError() from exc
    return record


def update_settings(
    db: Session,
    *,
    user_id: UUID,
    search_interval_minutes: int | None,
    settings: Settings,
    clock: Clock,
) -> UserSettings:
    if search_interval_minutes is None:
        raise InvalidInputError("search_interval_minutes is required")
    if search_interval_minutes < settings.MIN_SEARCH_INTERVAL_MINUTES:
        raise InvalidInputError(
            f"search_interval_minutes must be at least {settings.MIN_SEARCH_INTERVAL_MINUTES}"
        )

    record = get_or_create_settings(db, user_id=user_id, settings=settings, clock=clock)
    record.search_interval_minutes = search_interval_minutes
    record.updated_at = clock.now()
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Settings update failed for user %s", user_id)
        raise InternalError() from exc
    return record
