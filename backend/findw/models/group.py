"""Saved VK community, keyed by owner and VK group id."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import BigInteger, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from findw.db.base import Base


class Group(Base):
    __tablename__ = "groups"

    user_id: Mapped[UUID] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    group_id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    group_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    screen_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    is_closed: Mapped[int | None] = mapped_column(Integer, nullable=True)
    public_type: Mapped[str | None] = mapped_column(String(32), nullable=True)
    photo_200: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    members_count: Mapped[int | None] = mapped_column(Integer, nullable=True)
