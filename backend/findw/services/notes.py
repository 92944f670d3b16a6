"""Service helpers for personal notes."""

from __future__ import annotations

import logging
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from findw.core.exceptions import InternalError, InvalidInputError, NotFoundError
from findw.core.sanitize import clean_multiline, clean_single_line
from findw.models.note import Note

logger = logging.getLogger(__name__)


def create_note(db: Session, *, user_id: UUID, title: str, body: str) -> Note:
    title = clean_single_line(title)
    body = clean_multiline(body)
    if not title:
        raise InvalidInputError("title is required")
    if not body:
        raise InvalidInputError("body is required")

    record = Note(user_id=user_id, title=title, body=body)
    db.add(record)
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Note create failed for user %s", user_id)
        raise InternalError() from exc
    return record


def list_notes(db: Session, *, user_id: UUID, limit: int, offset: int) -> list[Note]:
    return (
        db.query(Note)
        .filter(Note.user_id == user_id)
        .order_by(Note.created_at.desc(), Note.id.desc())
        .offset(offset)
        .limit(limit)
        .all()
    )


def get_note(db: Session, *, user_id: UUID, note_id: UUID) -> Note:
    record = db.get(Note, note_id)
    if record is None or record.user_id != user_id:
        raise NotFoundError("note not found")
    return record


def delete_note(db: Session, *, user_id: UUID, note_id: UUID) -> None:
    deleted = (
        db.query(Note)
        .filter(Note.id == note_id, Note.user_id == user_id)
        .delete(synchronize_session=False)
    )
    if not deleted:
        db.rollback()
        raise NotFoundError("note not found")
    db.commit()
