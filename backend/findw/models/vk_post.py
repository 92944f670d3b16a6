"""Wall post ingested from a saved group."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import BigInteger, ForeignKey, ForeignKeyConstraint, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from findw.db.base import Base


class VkPost(Base):
    __tablename__ = "vk_posts"
    __table_args__ = (
        ForeignKeyConstraint(
            ["user_id", "group_id"],
            ["groups.user_id", "groups.group_id"],
            ondelete="CASCADE",
            name="fk_vk_posts_group",
        ),
    )

    user_id: Mapped[UUID] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    group_id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    post_id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    from_id: Mapped[int] = mapped_column(BigInteger, nullable=False)
    created_date: Mapped[int] = mapped_column(BigInteger, nullable=False)
    post_type: Mapped[str | None] = mapped_column(String(32), nullable=True)
    post_text: Mapped[str | None] = mapped_column(Text, nullable=True)
