"""Saved VK groups API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.orm import Session

from findw.core.deps import AuthenticatedUser, Page, get_current_user, get_page
from findw.db.session import get_db
from findw.schemas.group import GroupOut, GroupSave
from findw.services.groups import delete_group, list_groups, save_group

router = APIRouter()


@router.post("", response_model=GroupOut, status_code=status.HTTP_201_CREATED)
def post_group(
    payload: GroupSave,
    db: Session = Depends(get_db),
    current_user: AuthenticatedUser = Depends(get_current_user),
) -> GroupOut:
    return GroupOut.model_validate(save_group(db, user_id=current_user.id, payload=payload))


@router.get("", response_model=list[GroupOut])
def get_groups(
    page: Page = Depends(get_page),
    db: Session = Depends(get_db),
    current_user: AuthenticatedUser = Depends(get_current_user),
) -> list[GroupOut]:
    records = list_groups(db, user_id=current_user.id, limit=page.limit, offset=page.offset)
    return [GroupOut.model_validate(record) for record in records]


@router.delete("/{group_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_group(
    group_id: int = Path(...),
    db: Session = Depends(get_db),
    current_user: AuthenticatedUser = Depends(get_current_user),
) -> Response:
    delete_group(db, user_id=current_user.id, group_id=group_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
