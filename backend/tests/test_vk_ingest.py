from __future__ import annotations

import datetime as dt

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from findw.core.exceptions import InvalidInputError
from findw.core.security import SecurityContext
from findw.models.user import User
from findw.models.vk_comment import VkComment
from findw.models.vk_post_like import VkPostLike
from findw.schemas.group import GroupSave
from findw.schemas.vk import (
    VkCommentIn,
    VkCommentKey,
    VkCommentLikeIn,
    VkPostIn,
    VkPostKey,
    VkPostLikeIn,
    VkPostLikeKey,
    VkUserIn,
)
from findw.services import vk_comments, vk_likes, vk_posts, vk_users
from findw.services.groups import delete_group, save_group

FOUND = dt.datetime(2026, 2, 1, tzinfo=dt.timezone.utc)


def _vk_user(vk_user_id: int, *, days: int = 0, first_name: str = "Ivan") -> VkUserIn:
    return VkUserIn(vk_user_id=vk_user_id, first_name=first_name, finded_date=FOUND + dt.timedelta(days=days))


def _post(post_id: int, *, group_id: int = 1, created: int = 100, text: str = "hello") -> VkPostIn:
    return VkPostIn(group_id=group_id, post_id=post_id, from_id=-group_id, created_date=created, post_text=text)


def _other_user(db: Session, security: SecurityContext) -> User:
    other = User(email="other@x.test", password_hash=security.password_hasher.hash("pw"))
    db.add(other)
    db.commit()
    return other


def test_upsert_vk_users_counts_inserts_and_updates(db: Session, user: User) -> None:
    first = vk_users.upsert_vk_users(db, user_id=user.id, users=[_vk_user(1), _vk_user(2)])
    second = vk_users.upsert_vk_users(
        db,
        user_id=user.id,
        users=[_vk_user(2, first_name="Petr"), _vk_user(3), _vk_user(3, first_name="Last")],
    )

    assert (first.inserted, first.updated) == (2, 0)
    assert (second.inserted, second.updated) == (1, 1)
    names = {row.vk_user_id: row.first_name for row in vk_users.list_vk_users(db, user_id=user.id, limit=50, offset=0)}
    assert names == {1: "Ivan", 2: "Petr", 3: "Last"}


def test_vk_users_are_listed_by_found_date_then_id(db: Session, user: User) -> None:
    vk_users.upsert_vk_users(db, user_id=user.id, users=[_vk_user(1, days=1), _vk_user(2), _vk_user(3, days=1)])

    listed = [row.vk_user_id for row in vk_users.list_vk_users(db, user_id=user.id, limit=50, offset=0)]

    assert listed == [3, 1, 2]


def test_delete_is_scoped_to_owner(db: Session, security: SecurityContext, user: User) -> None:
    other = _other_user(db, security)
    vk_users.upsert_vk_users(db, user_id=user.id, users=[_vk_user(1)])
    vk_users.upsert_vk_users(db, user_id=other.id, users=[_vk_user(1)])

    assert vk_users.delete_vk_users(db, user_id=user.id, vk_user_ids=[1, 99]) == 1
    assert vk_users.delete_vk_users(db, user_id=user.id, vk_user_ids=[]) == 0
    assert [row.vk_user_id for row in vk_users.list_vk_users(db, user_id=other.id, limit=50, offset=0)] == [1]


def test_post_requires_saved_group(db: Session, user: User) -> None:
    with pytest.raises(InvalidInputError):
        vk_posts.upsert_vk_posts(db, user_id=user.id, posts=[_post(1, group_id=404)])


def test_posts_and_comments_round_through_their_keys(db: Session, user: User) -> None:
    save_group(db, user_id=user.id, payload=GroupSave(group_id=1))
    vk_posts.upsert_vk_posts(db, user_id=user.id, posts=[_post(1, created=100), _post(2, created=200)])
    result = vk_comments.upsert_vk_comments(
        db,
        user_id=user.id,
        comments=[
            VkCommentIn(group_id=1, post_id=1, comment_id=10, from_id=5, created_date=150),
            VkCommentIn(group_id=1, post_id=2, comment_id=11, from_id=5, created_date=250, comment_text=" hi "),
        ],
    )

    assert (result.inserted, result.updated) == (2, 0)
    posts = vk_posts.list_vk_posts(db, user_id=user.id, limit=50, offset=0)
    assert [post.post_id for post in posts] == [2, 1]
    comments = vk_comments.list_vk_comments(db, user_id=user.id, limit=50, offset=0)
    assert [(c.comment_id, c.comment_text) for c in comments] == [(11, "hi"), (10, None)]

    assert vk_comments.delete_vk_comments(
        db, user_id=user.id, keys=[VkCommentKey(group_id=1, post_id=1, comment_id=10)]
    ) == 1
    assert vk_posts.delete_vk_posts(db, user_id=user.id, keys=[VkPostKey(group_id=1, post_id=2)]) == 1
    db.expire_all()
    assert db.query(VkComment).count() == 0


def test_deleting_group_cascades_to_posts_comments_and_likes(db: Session, user: User) -> None:
    save_group(db, user_id=user.id, payload=GroupSave(group_id=1))
    vk_users.upsert_vk_users(db, user_id=user.id, users=[_vk_user(7)])
    vk_posts.upsert_vk_posts(db, user_id=user.id, posts=[_post(1)])
    vk_comments.upsert_vk_comments(
        db,
        user_id=user.id,
        comments=[VkCommentIn(group_id=1, post_id=1, comment_id=10, from_id=7, created_date=150)],
    )
    vk_likes.upsert_vk_post_likes(
        db, user_id=user.id, likes=[VkPostLikeIn(vk_user_id=7, group_id=1, post_id=1, found_date=FOUND)]
    )
    vk_likes.upsert_vk_comment_likes(
        db,
        user_id=user.id,
        likes=[VkCommentLikeIn(vk_user_id=7, group_id=1, post_id=1, comment_id=10, found_date=FOUND)],
    )

    delete_group(db, user_id=user.id, group_id=1)

    db.expire_all()
    assert vk_posts.list_vk_posts(db, user_id=user.id, limit=50, offset=0) == []
    assert vk_comments.list_vk_comments(db, user_id=user.id, limit=50, offset=0) == []
    assert vk_likes.list_vk_post_likes(db, user_id=user.id, limit=50, offset=0) == []
    assert vk_likes.list_vk_comment_likes(db, user_id=user.id, limit=50, offset=0) == []
    assert len(vk_users.list_vk_users(db, user_id=user.id, limit=50, offset=0)) == 1


def test_like_upsert_refreshes_found_date_and_deletes_by_key(db: Session, user: User) -> None:
    save_group(db, user_id=user.id, payload=GroupSave(group_id=1))
    vk_users.upsert_vk_users(db, user_id=user.id, users=[_vk_user(7)])
    vk_posts.upsert_vk_posts(db, user_id=user.id, posts=[_post(1)])
    like = VkPostLikeIn(vk_user_id=7, group_id=1, post_id=1, found_date=FOUND)
    later = VkPostLikeIn(vk_user_id=7, group_id=1, post_id=1, found_date=FOUND + dt.timedelta(days=3))

    vk_likes.upsert_vk_post_likes(db, user_id=user.id, likes=[like])
    result = vk_likes.upsert_vk_post_likes(db, user_id=user.id, likes=[later])

    assert (result.inserted, result.updated) == (0, 1)
    stored = db.query(VkPostLike).one()
    assert stored.found_date.replace(tzinfo=None) == (FOUND + dt.timedelta(days=3)).replace(tzinfo=None)
    assert vk_likes.delete_vk_post_likes(
        db, user_id=user.id, keys=[VkPostLikeKey(vk_user_id=7, group_id=1, post_id=1)]
    ) == 1


def test_vk_users_api_lists_only_own_rows(client: TestClient, auth_headers, session_factory) -> None:  # noqa: ANN001
    alice = auth_headers("alice@x.test")
    bob = auth_headers("bob@x.test")
    db = session_factory()
    try:
        alice_id = db.query(User).filter(User.email == "alice@x.test").one().id
        vk_users.upsert_vk_users(db, user_id=alice_id, users=[_vk_user(1), _vk_user(2, days=1)])
    finally:
        db.close()

    listed = client.get("/vk-users", headers=alice)

    assert listed.status_code == 200
    assert [row["vk_user_id"] for row in listed.json()] == [2, 1]
    assert client.get("/vk-users", headers=bob).json() == []
    assert client.get("/vk-users", params={"limit": 1}, headers=alice).json()[0]["vk_user_id"] == 2
