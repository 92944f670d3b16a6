"""Like left by a tracked VK account on an ingested post."""

from __future__ import annotations

import datetime as dt
from uuid import UUID

from sqlalchemy import BigInteger, DateTime, ForeignKey, ForeignKeyConstraint
from sqlalchemy.orm import Mapped, mapped_column

from findw.db.base import Base


class VkPostLike(Base):
    __tablename__ = "vk_post_likes"
    __table_args__ = (
        ForeignKeyConstraint(
            ["user_id", "group_id", "post_id"],
            ["vk_posts.user_id", "vk_posts.group_id", "vk_posts.post_id"],
            ondelete="CASCADE",
            name="fk_vk_post_likes_post",
        ),
        ForeignKeyConstraint(
            ["user_id", "vk_user_id"],
            ["vk_users.user_id", "vk_users.vk_user_id"],
            ondelete="CASCADE",
            name="fk_vk_post_likes_vk_user",
        ),
    )

    user_id: Mapped[UUID] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    vk_user_id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    group_id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    post_id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    found_date: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), nullable=False)
