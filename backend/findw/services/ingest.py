"""Bulk helpers shared by the VK ingestion services.

Every ingested table is keyed by ``user_id`` plus a tuple of VK identifiers,
so upsert, delete and list only differ in the model, its key fields and its
ordering.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Sequence
from uuid import UUID

from sqlalchemy import and_, or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from findw.core.exceptions import InternalError, InvalidInputError
from findw.db.base import Base

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpsertResult:
    inserted: int
    updated: int


def _key_of(row: Mapping[str, Any], key_fields: Sequence[str]) -> tuple[Any, ...]:
    return tuple(row[field] for field in key_fields)


def upsert_rows(
    db: Session,
    model: type[Base],
    *,
    user_id: UUID,
    key_fields: Sequence[str],
    rows: Iterable[Mapping[str, Any]],
) -> UpsertResult:
    """Insert new rows and overwrite existing ones; a repeated key in ``rows`` keeps the last value."""
    unique: dict[tuple[Any, ...], Mapping[str, Any]] = {}
    for row in rows:
        unique[_key_of(row, key_fields)] = row

    inserted = updated = 0
    for key, row in unique.items():
        identity = {"user_id": user_id, **dict(zip(key_fields, key))}
        values = {field: value for field, value in row.items() if field not in identity}
        record = db.get(model, identity)
        if record is None:
            db.add(model(**identity, **values))
            inserted += 1
        else:
            for field, value in values.items():
                setattr(record, field, value)
            updated += 1

    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning("Upsert into %s rejected for user %s: %s", model.__tablename__, user_id, exc.orig)
        raise InvalidInputError("referenced record does not exist") from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Upsert into %s failed for user %s", model.__tablename__, user_id)
        raise InternalError() from exc
    return UpsertResult(inserted=inserted, updated=updated)


def delete_rows(
    db: Session,
    model: type[Base],
    *,
    user_id: UUID,
    keys: Iterable[Mapping[str, Any]],
) -> int:
    """Delete the caller's rows matching any of ``keys``; other users' rows are never touched."""
    clauses = [and_(*(getattr(model, field) == value for field, value in key.items())) for key in keys]
    if not clauses:
        return 0
    try:
        deleted = (
            db.query(model)
            .filter(model.user_id == user_id, or_(*clauses))
            .delete(synchronize_session=False)
        )
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Delete from %s failed for user %s", model.__tablename__, user_id)
        raise InternalError() from exc
    return int(deleted or 0)


def list_rows(
    db: Session,
    model: type[Base],
    *,
    user_id: UUID,
    order_by: Sequence[Any],
    limit: int,
    offset: int,
) -> list[Any]:
    return (
        db.query(model)
        .filter(model.user_id == user_id)
        .order_by(*order_by)
        .offset(offset)
        .limit(limit)
        .all()
    )
