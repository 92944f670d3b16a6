"""Wall posts ingested from saved groups."""

from __future__ import annotations

from typing import Sequence
from uuid import UUID

from sqlalchemy.orm import Session

from findw.models.vk_post import VkPost
from findw.schemas.vk import VkPostIn, VkPostKey
from findw.services.ingest import UpsertResult, delete_rows, list_rows, upsert_rows

KEY_FIELDS = ("group_id", "post_id")


def upsert_vk_posts(db: Session, *, user_id: UUID, posts: Sequence[VkPostIn]) -> UpsertResult:
    """Posts must belong to a group the user has saved; otherwise ``InvalidInputError``."""
    return upsert_rows(
        db,
        VkPost,
        user_id=user_id,
        key_fields=KEY_FIELDS,
        rows=[post.model_dump() for post in posts],
    )


def delete_vk_posts(db: Session, *, user_id: UUID, keys: Sequence[VkPostKey]) -> int:
    return delete_rows(db, VkPost, user_id=user_id, keys=[key.model_dump() for key in keys])


def list_vk_posts(db: Session, *, user_id: UUID, limit: int, offset: int) -> list[VkPost]:
    return list_rows(
        db,
        VkPost,
        user_id=user_id,
        order_by=(VkPost.created_date.desc(), VkPost.post_id.desc()),
        limit=limit,
        offset=offset,
    )
