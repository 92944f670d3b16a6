"""Per-user search settings endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from findw.core.deps import AuthenticatedUser, get_current_user, get_security
from findw.core.security import SecurityContext
from findw.db.session import get_db
from findw.schemas.user_settings import UserSettingsOut, UserSettingsPatch
from findw.services.user_settings import get_or_create_settings, update_settings

router = APIRouter()


@router.get("", response_model=UserSettingsOut)
def get_settings(
    db: Session = Depends(get_db),
    security: SecurityContext = Depends(get_security),
    current_user: AuthenticatedUser = Depends(get_current_user),
) -> UserSettingsOut:
    record = get_or_create_settings(db, user_id=current_user.id, settings=security.settings, clock=security.clock)
    return UserSettingsOut.model_validate(record)


@router.patch("", response_model=UserSettingsOut)
def patch_settings(
    payload: UserSettingsPatch,
    db: Session = Depends(get_db),
    security: SecurityContext = Depends(get_security),
    current_user: AuthenticatedUser = Depends(get_current_user),
) -> UserSettingsOut:
    record = update_settings(
        db,
        user_id=current_user.id,
        search_interval_minutes=payload.search_interval_minutes,
        settings=security.settings,
        clock=security.clock,
    )
    return UserSettingsOut.model_validate(record)
