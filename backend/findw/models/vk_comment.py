"""Comment under an ingested wall post."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import BigInteger, ForeignKey, ForeignKeyConstraint, Text
from sqlalchemy.orm import Mapped, mapped_column

from findw.db.base import Base


class VkComment(Base):
    __tablename__ = "vk_comments"
    __table_args__ = (
        ForeignKeyConstraint(
            ["user_id", "group_id", "post_id"],
            ["vk_posts.user_id", "vk_posts.group_id", "vk_posts.post_id"],
            ondelete="CASCADE",
            name="fk_vk_comments_post",
        ),
    )

    user_id: Mapped[UUID] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    group_id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    post_id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    comment_id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    from_id: Mapped[int] = mapped_column(BigInteger, nullable=False)
    created_date: Mapped[int] = mapped_column(BigInteger, nullable=False)
    comment_text: Mapped[str | None] = mapped_column(Text, nullable=True)
