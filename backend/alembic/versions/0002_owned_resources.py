"""notes, groups, settings, vk tokens and ingested vk data

Revision ID: 0002_owned_resources
Revises: 0001_findw_auth
Create Date: 2026-10-01 00:10:00.000000

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision = "0002_owned_resources"
down_revision = "0001_findw_auth"
branch_labels = None
depends_on = None


def _owner_column() -> sa.Column:
    return sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False)


def _owner_fk(table: str) -> sa.ForeignKeyConstraint:
    return sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE", name=f"fk_{table}_user_id_users")


def upgrade() -> None:
    op.create_table(
        "notes",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        _owner_column(),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_notes"),
        _owner_fk("notes"),
    )
    op.create_index("ix_notes_user_id_created_at", "notes", ["user_id", "created_at"], unique=False)

    op.create_table(
        "groups",
        _owner_column(),
        sa.Column("group_id", sa.BigInteger(), nullable=False),
        sa.Column("group_name", sa.String(length=255), nullable=True),
        sa.Column("screen_name", sa.String(length=255), nullable=True),
        sa.Column("is_closed", sa.Integer(), nullable=True),
        sa.Column("public_type", sa.String(length=32), nullable=True),
        sa.Column("photo_200", sa.String(length=1024), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("members_count", sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint("user_id", "group_id", name="pk_groups"),
        _owner_fk("groups"),
    )

    op.create_table(
        "user_settings",
        _owner_column(),
        sa.Column("search_interval_minutes", sa.Integer(), nullable=False, server_default="60"),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("user_id", name="pk_user_settings"),
        _owner_fk("user_settings"),
    )

    op.create_table(
        "vk_tokens",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        _owner_column(),
        sa.Column("token_hash", sa.String(length=64), nullable=False),
        sa.Column("token_encrypted", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_vk_tokens"),
        _owner_fk("vk_tokens"),
        sa.UniqueConstraint("user_id", "token_hash", name="uq_vk_tokens_user_id_token_hash"),
    )
    op.create_index("ix_vk_tokens_user_id", "vk_tokens", ["user_id"], unique=False)

    op.create_table(
        "vk_users",
        _owner_column(),
        sa.Column("vk_user_id", sa.BigInteger(), nullable=False),
        sa.Column("sex", sa.SmallInteger(), nullable=True),
        sa.Column("first_name", sa.String(length=255), nullable=True),
        sa.Column("last_name", sa.String(length=255), nullable=True),
        sa.Column("city", sa.String(length=255), nullable=True),
        sa.Column("finded_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("is_closed", sa.Boolean(), nullable=True),
        sa.Column("screen_name", sa.String(length=255), nullable=True),
        sa.Column("can_access_closed", sa.Boolean(), nullable=True),
        sa.Column("about", sa.Text(), nullable=True),
        sa.Column("status", sa.Text(), nullable=True),
        sa.Column("bdate", sa.String(length=32), nullable=True),
        sa.Column("photo", sa.String(length=1024), nullable=True),
        sa.PrimaryKeyConstraint("user_id", "vk_user_id", name="pk_vk_users"),
        _owner_fk("vk_users"),
    )

    op.create_table(
        "vk_posts",
        _owner_column(),
        sa.Column("group_id", sa.BigInteger(), nullable=False),
        sa.Column("post_id", sa.BigInteger(), nullable=False),
        sa.Column("from_id", sa.BigInteger(), nullable=False),
        sa.Column("created_date", sa.BigInteger(), nullable=False),
        sa.Column("post_type", sa.String(length=32), nullable=True),
        sa.Column("post_text", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("user_id", "group_id", "post_id", name="pk_vk_posts"),
        _owner_fk("vk_posts"),
        sa.ForeignKeyConstraint(
            ["user_id", "group_id"],
            ["groups.user_id", "groups.group_id"],
            ondelete="CASCADE",
            name="fk_vk_posts_group",
        ),
    )

    op.create_table(
        "vk_comments",
        _owner_column(),
        sa.Column("group_id", sa.BigInteger(), nullable=False),
        sa.Column("post_id", sa.BigInteger(), nullable=False),
        sa.Column("comment_id", sa.BigInteger(), nullable=False),
        sa.Column("from_id", sa.BigInteger(), nullable=False),
        sa.Column("created_date", sa.BigInteger(), nullable=False),
        sa.Column("comment_text", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("user_id", "group_id", "post_id", "comment_id", name="pk_vk_comments"),
        _owner_fk("vk_comments"),
        sa.ForeignKeyConstraint(
            ["user_id", "group_id", "post_id"],
            ["vk_posts.user_id", "vk_posts.group_id", "vk_posts.post_id"],
            ondelete="CASCADE",
            name="fk_vk_comments_post",
        ),
    )

    op.create_table(
        "vk_post_likes",
        _owner_column(),
        sa.Column("vk_user_id", sa.BigInteger(), nullable=False),
        sa.Column("group_id", sa.BigInteger(), nullable=False),
        sa.Column("post_id", sa.BigInteger(), nullable=False),
        sa.Column("found_date", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("user_id", "vk_user_id", "group_id", "post_id", name="pk_vk_post_likes"),
        _owner_fk("vk_post_likes"),
        sa.ForeignKeyConstraint(
            ["user_id", "group_id", "post_id"],
            ["vk_posts.user_id", "vk_posts.group_id", "vk_posts.post_id"],
            ondelete="CASCADE",
            name="fk_vk_post_likes_post",
        ),
        sa.ForeignKeyConstraint(
            ["user_id", "vk_user_id"],
            ["vk_users.user_id", "vk_users.vk_user_id"],
            ondelete="CASCADE",
            name="fk_vk_post_likes_vk_user",
        ),
    )

    op.create_table(
        "vk_comment_likes",
        _owner_column(),
        sa.Column("vk_user_id", sa.BigInteger(), nullable=False),
        sa.Column("group_id", sa.BigInteger(), nullable=False),
        sa.Column("post_id", sa.BigInteger(), nullable=False),
        sa.Column("comment_id", sa.BigInteger(), nullable=False),
        sa.Column("found_date", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint(
            "user_id", "vk_user_id", "group_id", "post_id", "comment_id", name="pk_vk_comment_likes"
        ),
        _owner_fk("vk_comment_likes"),
        sa.ForeignKeyConstraint(
            ["user_id", "group_id", "post_id", "comment_id"],
            ["vk_comments.user_id", "vk_comments.group_id", "vk_comments.post_id", "vk_comments.comment_id"],
            ondelete="CASCADE",
            name="fk_vk_comment_likes_comment",
        ),
        sa.ForeignKeyConstraint(
            ["user_id", "vk_user_id"],
            ["vk_users.user_id", "vk_users.vk_user_id"],
            ondelete="CASCADE",
            name="fk_vk_comment_likes_vk_user",
        ),
    )


def downgrade() -> None:
    op.drop_table("vk_comment_likes")
    op.drop_table("vk_post_likes")
    op.drop_table("vk_comments")
    op.drop_table("vk_posts")
    op.drop_table("vk_users")
    op.drop_index("ix_vk_tokens_user_id", table_name="vk_tokens")
    op.drop_table("vk_tokens")
    op.drop_table("user_settings")
    op.drop_index("ix_notes_user_id_created_at", table_name="notes")
    op.drop_table("notes")
    op.drop_table("groups")
