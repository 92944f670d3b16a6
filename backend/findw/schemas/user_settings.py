"""Schemas for per-user search settings."""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel


class UserSettingsPatch(BaseModel):
    search_interval_minutes: int | None = None


class UserSettingsOut(BaseModel):
    search_interval_minutes: int
    updated_at: dt.datetime

    class Config:
        from_attributes = True
