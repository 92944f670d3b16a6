"""Tracked VK accounts endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from findw.core.deps import AuthenticatedUser, Page, get_current_user, get_page
from findw.db.session import get_db
from findw.schemas.vk import VkUserOut
from findw.services.vk_users import list_vk_users

router = APIRouter()


@router.get("", response_model=list[VkUserOut])
def get_vk_users(
    page: Page = Depends(get_page),
    db: Session = Depends(get_db),
    current_user: AuthenticatedUser = Depends(get_current_user),
) -> list[VkUserOut]:
    records = list_vk_users(db, user_id=current_user.id, limit=page.limit, offset=page.offset)
    return [VkUserOut.model_validate(record) for record in records]
