"""Schemas for VK API token management."""

from __future__ import annotations

from pydantic import BaseModel, Field


class VkTokensRequest(BaseModel):
    tokens: list[str] = Field(default_factory=list)


class VkTokensInsertOut(BaseModel):
    inserted: int
    skipped: int


class VkTokensDeleteOut(BaseModel):
    deleted: int
