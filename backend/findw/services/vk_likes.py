"""Likes left by tracked accounts on ingested posts and comments."""

from __future__ import annotations

from typing import Sequence
from uuid import UUID

from sqlalchemy.orm import Session

from findw.models.vk_comment_like import VkCommentLike
from findw.models.vk_post_like import VkPostLike
from findw.schemas.vk import VkCommentLikeIn, VkCommentLikeKey, VkPostLikeIn, VkPostLikeKey
from findw.services.ingest import UpsertResult, delete_rows, list_rows, upsert_rows

POST_LIKE_KEY_FIELDS = ("vk_user_id", "group_id", "post_id")
COMMENT_LIKE_KEY_FIELDS = ("vk_user_id", "group_id", "post_id", "comment_id")


def upsert_vk_post_likes(db: Session, *, user_id: UUID, likes: Sequence[VkPostLikeIn]) -> UpsertResult:
    return upsert_rows(
        db,
        VkPostLike,
        user_id=user_id,
        key_fields=POST_LIKE_KEY_FIELDS,
        rows=[like.model_dump() for like in likes],
    )


def delete_vk_post_likes(db: Session, *, user_id: UUID, keys: Sequence[VkPostLikeKey]) -> int:
    return delete_rows(db, VkPostLike, user_id=user_id, keys=[key.model_dump() for key in keys])


def list_vk_post_likes(db: Session, *, user_id: UUID, limit: int, offset: int) -> list[VkPostLike]:
    return list_rows(
        db,
        VkPostLike,
        user_id=user_id,
        order_by=(VkPostLike.found_date.desc(), VkPostLike.post_id.desc()),
        limit=limit,
        offset=offset,
    )


def upsert_vk_comment_likes(db: Session, *, user_id: UUID, likes: Sequence[VkCommentLikeIn]) -> UpsertResult:
    return upsert_rows(
        db,
        VkCommentLike,
        user_id=user_id,
        key_fields=COMMENT_LIKE_KEY_FIELDS,
        rows=[like.model_dump() for like in likes],
    )


def delete_vk_comment_likes(db: Session, *, user_id: UUID, keys: Sequence[VkCommentLikeKey]) -> int:
    return delete_rows(db, VkCommentLike, user_id=user_id, keys=[key.model_dump() for key in keys])


def list_vk_comment_likes(db: Session, *, user_id: UUID, limit: int, offset: int) -> list[VkCommentLike]:
    return list_rows(
        db,
        VkCommentLike,
        user_id=user_id,
        order_by=(VkCommentLike.found_date.desc(), VkCommentLike.comment_id.desc()),
        limit=limit,
        offset=offset,
    )
