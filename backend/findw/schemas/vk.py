"""Schemas for ingested VK data: tracked users, posts, comments and likes."""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, Field, field_validator

from findw.core.sanitize import clean_multiline, clean_optional


class VkUserIn(BaseModel):
    vk_user_id: int
    sex: int | None = None
    first_name: str | None = Field(default=None, max_length=255)
    last_name: str | None = Field(default=None, max_length=255)
    city: str | None = Field(default=None, max_length=255)
    finded_date: dt.datetime
    is_closed: bool | None = None
    screen_name: str | None = Field(default=None, max_length=255)
    can_access_closed: bool | None = None
    about: str | None = None
    status: str | None = None
    bdate: str | None = Field(default=None, max_length=32)
    photo: str | None = Field(default=None, max_length=1024)

    @field_validator("first_name", "last_name", "city", "screen_name", "bdate", "photo", mode="before")
    @classmethod
    def normalize_optional(cls, value: str | None) -> str | None:
        return clean_optional(value)


class VkUserOut(VkUserIn):
    class Config:
        from_attributes = True


class VkUserKey(BaseModel):
    vk_user_id: int


class VkPostKey(BaseModel):
    group_id: int
    post_id: int


class VkPostIn(VkPostKey):
    from_id: int
    created_date: int
    post_type: str | None = Field(default=None, max_length=32)
    post_text: str | None = None

    @field_validator("post_text", mode="before")
    @classmethod
    def normalize_text(cls, value: str | None) -> str | None:
        return clean_multiline(value) or None


class VkPostOut(VkPostIn):
    class Config:
        from_attributes = True


class VkCommentKey(BaseModel):
    group_id: int
    post_id: int
    comment_id: int


class VkCommentIn(VkCommentKey):
    from_id: int
    created_date: int
    comment_text: str | None = None

    @field_validator("comment_text", mode="before")
    @classmethod
    def normalize_text(cls, value: str | None) -> str | None:
        return clean_multiline(value) or None


class VkCommentOut(VkCommentIn):
    class Config:
        from_attributes = True


class VkPostLikeKey(BaseModel):
    vk_user_id: int
    group_id: int
    post_id: int


class VkPostLikeIn(VkPostLikeKey):
    found_date: dt.datetime


class VkPostLikeOut(VkPostLikeIn):
    class Config:
        from_attributes = True


class VkCommentLikeKey(BaseModel):
    vk_user_id: int
    group_id: int
    post_id: int
    comment_id: int


class VkCommentLikeIn(VkCommentLikeKey):
    found_date: dt.datetime


class VkCommentLikeOut(VkCommentLikeIn):
    class Config:
        from_attributes = True


class UpsertOut(BaseModel):
    inserted: int
    updated: int
