"""VK API token endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from findw.core.deps import AuthenticatedUser, get_current_user, get_security
from findw.core.security import SecurityContext
from findw.db.session import get_db
from findw.schemas.vk_token import VkTokensDeleteOut, VkTokensInsertOut, VkTokensRequest
from findw.services.vk_tokens import add_vk_tokens, delete_vk_tokens

router = APIRouter()


@router.post("", response_model=VkTokensInsertOut, status_code=status.HTTP_201_CREATED)
def post_vk_tokens(
    payload: VkTokensRequest,
    db: Session = Depends(get_db),
    security: SecurityContext = Depends(get_security),
    current_user: AuthenticatedUser = Depends(get_current_user),
) -> VkTokensInsertOut:
    result = add_vk_tokens(db, security.token_cipher, user_id=current_user.id, tokens=payload.tokens)
    return VkTokensInsertOut(inserted=result.inserted, skipped=result.skipped)


@router.delete("", response_model=VkTokensDeleteOut)
def remove_vk_tokens(
    payload: VkTokensRequest,
    db: Session = Depends(get_db),
    current_user: AuthenticatedUser = Depends(get_current_user),
) -> VkTokensDeleteOut:
    return VkTokensDeleteOut(deleted=delete_vk_tokens(db, user_id=current_user.id, tokens=payload.tokens))
