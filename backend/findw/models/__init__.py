"""Convenience imports for Alembic metadata discovery."""

from findw.models.user import User
from findw.models.refresh_token import RefreshToken
from findw.models.note import Note
from findw.models.group import Group
from findw.models.user_settings import UserSettings
from findw.models.vk_token import VkToken
from findw.models.vk_user import VkUser
from findw.models.vk_post import VkPost
from findw.models.vk_comment import VkComment
from findw.models.vk_post_like import VkPostLike
from findw.models.vk_comment_like import VkCommentLike

__all__ = [
    "Group",
    "Note",
    "RefreshToken",
    "User",
    "UserSettings",
    "VkComment",
    "VkCommentLike",
    "VkPost",
    "VkPostLike",
    "VkToken",
    "VkUser",
]
