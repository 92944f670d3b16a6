"""Pydantic schemas for saved VK groups."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from findw.core.sanitize import clean_multiline, clean_optional


class GroupSave(BaseModel):
    group_id: int
    group_name: str | None = Field(default=None, max_length=255)
    screen_name: str | None = Field(default=None, max_length=255)
    is_closed: int | None = None
    public_type: str | None = Field(default=None, max_length=32)
    photo_200: str | None = Field(default=None, max_length=1024)
    description: str | None = None
    members_count: int | None = None

    @field_validator("group_name", "screen_name", "public_type", "photo_200", mode="before")
    @classmethod
    def normalize_optional(cls, value: str | None) -> str | None:
        return clean_optional(value)

    @field_validator("description", mode="before")
    @classmethod
    def normalize_description(cls, value: str | None) -> str | None:
        return clean_multiline(value) or None


class GroupOut(BaseModel):
    group_id: int
    group_name: str | None = None
    screen_name: str | None = None
    is_closed: int | None = None
    public_type: str | None = None
    photo_200: str | None = None
    description: str | None = None
    members_count: int | None = None

    class Config:
        from_attributes = True
