"""Health probes and the current user's profile."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from findw.core.deps import AuthenticatedUser, get_current_user
from findw.core.exceptions import InternalError, UnauthorizedError
from findw.db.session import get_db
from findw.schemas.user import MeOut
from findw.services.auth import get_user

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health")
def health() -> str:
    return "ok"


@router.get("/db-health")
def db_health(db: Session = Depends(get_db)) -> str:
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.exception("Database health check failed")
        raise InternalError() from exc
    return "ok"


@router.get("/me", response_model=MeOut)
def me(
    db: Session = Depends(get_db),
    current_user: AuthenticatedUser = Depends(get_current_user),
) -> MeOut:
    user = get_user(db, current_user.id)
    if user is None:
        # Token outlived its account.
        raise UnauthorizedError()
    return MeOut.model_validate(user)
