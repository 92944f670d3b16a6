"""Tracked VK accounts found by the owner's searches."""

from __future__ import annotations

from typing import Sequence
from uuid import UUID

from sqlalchemy.orm import Session

from findw.models.vk_user import VkUser
from findw.schemas.vk import VkUserIn
from findw.services.ingest import UpsertResult, delete_rows, list_rows, upsert_rows

KEY_FIELDS = ("vk_user_id",)


def upsert_vk_users(db: Session, *, user_id: UUID, users: Sequence[VkUserIn]) -> UpsertResult:
    return upsert_rows(
        db,
        VkUser,
        user_id=user_id,
        key_fields=KEY_FIELDS,
        rows=[user.model_dump() for user in users],
    )


def delete_vk_users(db: Session, *, user_id: UUID, vk_user_ids: Sequence[int]) -> int:
    return delete_rows(db, VkUser, user_id=user_id, keys=[{"vk_user_id": vk_user_id} for vk_user_id in vk_user_ids])


def list_vk_users(db: Session, *, user_id: UUID, limit: int, offset: int) -> list[VkUser]:
    return list_rows(
        db,
        VkUser,
        user_id=user_id,
        order_by=(VkUser.finded_date.desc(), VkUser.vk_user_id.desc()),
        limit=limit,
        offset=offset,
    )
