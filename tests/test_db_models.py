"""Unit tests for the ORM models defined in devconnector.models.

These tests verify mapping details the service relies on: table names,
the ordering of embedded likes and comments, cascading deletes and the
optimistic version check on posts.
"""

import pytest
from sqlalchemy import update
from sqlalchemy.orm import attributes

from devconnector.models import Post, PostComment, PostLike, User
from devconnector.services.errors import ConflictError


def test_table_names():
    """Model classes expose expected __tablename__ values."""
    assert User.__tablename__ == "user_account"
    assert Post.__tablename__ == "post"
    assert PostLike.__tablename__ == "post_like"
    assert PostComment.__tablename__ == "post_comment"


def test_relationships_are_instrumented_attributes():
    for a in (Post.likes, Post.comments):
        assert isinstance(a, attributes.InstrumentedAttribute)


def test_like_unique_per_user():
    constraints = {c.name for c in PostLike.__table__.constraints}
    assert "uq_post_like_post_user" in constraints


def test_positions_follow_list_order(db_session, post_service, test_user, other_user, test_post):
    post_service.like_post(test_user.id, test_post.id)
    post_service.like_post(other_user.id, test_post.id)

    db_session.expire_all()
    post = db_session.get(Post, test_post.id)

    assert [like.position for like in post.likes] == [0, 1]
    assert [like.user_id for like in post.likes] == [other_user.id, test_user.id]


def test_delete_post_cascades(db_session, post_service, test_user, test_post):
    post_service.like_post(test_user.id, test_post.id)
    post_service.add_comment(test_user.id, test_post.id, "bye")

    post_service.delete_post(test_user.id, test_post.id)

    assert db_session.query(PostLike).count() == 0
    assert db_session.query(PostComment).count() == 0


def test_save_bumps_version(post_service, test_user, test_post):
    assert test_post.version == 1

    post_service.like_post(test_user.id, test_post.id)

    assert post_service.get_post(test_post.id).version == 2


def test_concurrent_update_is_a_conflict(db_session, post_service, test_user, test_post):
    """A save against a stale copy of the post is refused."""
    db_session.connection().execute(
        update(Post.__table__)
        .where(Post.__table__.c.id == test_post.id)
        .values(version=Post.__table__.c.version + 1)
    )

    with pytest.raises(ConflictError):
        post_service.like_post(test_user.id, test_post.id)
