"""Tracked VK account found by one of the owner's searches."""

from __future__ import annotations

import datetime as dt
from uuid import UUID

from sqlalchemy import BigInteger, Boolean, DateTime, ForeignKey, SmallInteger, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from findw.db.base import Base


class VkUser(Base):
    __tablename__ = "vk_users"

    user_id: Mapped[UUID] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    vk_user_id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    sex: Mapped[int | None] = mapped_column(SmallInteger, nullable=True)
    first_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    city: Mapped[str | None] = mapped_column(String(255), nullable=True)
    finded_date: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    is_closed: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    screen_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    can_access_closed: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    about: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str | None] = mapped_column(Text, nullable=True)
    bdate: Mapped[str | None] = mapped_column(String(32), nullable=True)
    photo: Mapped[str | None] = mapped_column(String(1024), nullable=True)
