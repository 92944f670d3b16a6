"""Schemas for the authenticated user's profile."""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel


class MeOut(BaseModel):
    id: UUID
    email: str

    class Config:
        from_attributes = True
