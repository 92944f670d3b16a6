"""Comments under ingested posts."""

from __future__ import annotations

from typing import Sequence
from uuid import UUID

from sqlalchemy.orm import Session

from findw.models.vk_comment import VkComment
from findw.schemas.vk import VkCommentIn, VkCommentKey
from findw.services.ingest import UpsertResult, delete_rows, list_rows, upsert_rows

KEY_FIELDS = ("group_id", "post_id", "comment_id")


def upsert_vk_comments(db: Session, *, user_id: UUID, comments: Sequence[VkCommentIn]) -> UpsertResult:
    return upsert_rows(
        db,
        VkComment,
        user_id=user_id,
        key_fields=KEY_FIELDS,
        rows=[comment.model_dump() for comment in comments],
    )


def delete_vk_comments(db: Session, *, user_id: UUID, keys: Sequence[VkCommentKey]) -> int:
    return delete_rows(db, VkComment, user_id=user_id, keys=[key.model_dump() for key in keys])


def list_vk_comments(db: Session, *, user_id: UUID, limit: int, offset: int) -> list[VkComment]:
    return list_rows(
        db,
        VkComment,
        user_id=user_id,
        order_by=(VkComment.created_date.desc(), VkComment.comment_id.desc()),
        limit=limit,
        offset=offset,
    )
