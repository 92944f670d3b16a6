"""Service helpers for saved VK groups."""

from __future__ import annotations

import logging
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from findw.core.exceptions import InternalError, InvalidInputError, NotFoundError
from findw.models.group import Group
from findw.schemas.group import GroupSave

logger = logging.getLogger(__name__)


def _require_group_id(group_id: int) -> None:
    if group_id <= 0:
        raise InvalidInputError("group_id must be greater than 0")


def save_group(db: Session, *, user_id: UUID, payload: GroupSave) -> Group:
    """Insert the group or overwrite the stored fields of an existing one."""
    _require_group_id(payload.group_id)
    values = payload.model_dump(exclude={"group_id"})

    record = db.get(Group, {"user_id": user_id, "group_id": payload.group_id})
    if record is None:
        record = Group(user_id=user_id, group_id=payload.group_id, **values)
        db.add(record)
    else:
        for field, value in values.items():
            setattr(record, field, value)
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Group save failed for user %s", user_id)
        raise InternalError() from exc
    return record


def list_groups(db: Session, *, user_id: UUID, limit: int, offset: int) -> list[Group]:
    return (
        db.query(Group)
        .filter(Group.user_id == user_id)
        .order_by(Group.group_id.desc())
        .offset(offset)
        .limit(limit)
        .all()
    )


def delete_group(db: Session, *, user_id: UUID, group_id: int) -> None:
    _require_group_id(group_id)
    deleted = (
        db.query(Group)
        .filter(Group.user_id == user_id, Group.group_id == group_id)
        .delete(synchronize_session=False)
    )
    if not deleted:
        db.rollback()
        raise NotFoundError("group not found")
    db.commit()
