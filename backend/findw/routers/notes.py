"""Notes API endpoints."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.orm import Session

from findw.core.deps import AuthenticatedUser, Page, get_current_user, get_page
from findw.db.session import get_db
from findw.schemas.note import NoteCreate, NoteOut
from findw.services.notes import create_note, delete_note, get_note, list_notes

router = APIRouter()


@router.post("", response_model=NoteOut, status_code=status.HTTP_201_CREATED)
def post_note(
    payload: NoteCreate,
    db: Session = Depends(get_db),
    current_user: AuthenticatedUser = Depends(get_current_user),
) -> NoteOut:
    record = create_note(db, user_id=current_user.id, title=payload.title, body=payload.body)
    return NoteOut.model_validate(record)


@router.get("", response_model=list[NoteOut])
def get_notes(
    page: Page = Depends(get_page),
    db: Session = Depends(get_db),
    current_user: AuthenticatedUser = Depends(get_current_user),
) -> list[NoteOut]:
    records = list_notes(db, user_id=current_user.id, limit=page.limit, offset=page.offset)
    return [NoteOut.model_validate(record) for record in records]


@router.get("/{note_id}", response_model=NoteOut)
def get_note_by_id(
    note_id: UUID = Path(...),
    db: Session = Depends(get_db),
    current_user: AuthenticatedUser = Depends(get_current_user),
) -> NoteOut:
    return NoteOut.model_validate(get_note(db, user_id=current_user.id, note_id=note_id))


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_note(
    note_id: UUID = Path(...),
    db: Session = Depends(get_db),
    current_user: AuthenticatedUser = Depends(get_current_user),
) -> Response:
    delete_note(db, user_id=current_user.id, note_id=note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
