"""Pydantic schemas for notes."""

from __future__ import annotations

import datetime as dt
from uuid import UUID

from pydantic import BaseModel, Field


class NoteCreate(BaseModel):
    # Blank values are rejected by the service with a specific message.
    title: str = Field(default="", max_length=255)
    body: str = Field(default="", max_length=20000)


class NoteOut(BaseModel):
    id: UUID
    title: str
    body: str
    created_at: dt.datetime

    class Config:
        from_attributes = True
