"""Data access helpers for working with posts."""
from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.orm import Session

from devconnector.models.post import Post
from devconnector.models.user import User

__all__ = ["PostRepository"]


class PostRepository:
    """Thin wrapper around database access for post aggregates.

    The repository only loads and stores whole aggregates; authorization and
    list rules live in :class:`devconnector.services.post_service.PostService`.
    Failed commits are rolled back before the exception propagates.
    """

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def load_post(self, post_id: uuid.UUID) -> Post | None:
        """Return a post by identifier, likes and comments included."""
        return self.session.get(Post, post_id)

    def list_posts(self) -> list[Post]:
        """Return every post, newest first."""
        result = self.session.execute(select(Post).order_by(Post.date.desc()))
        return list(result.scalars())

    def load_user(self, user_id: uuid.UUID) -> User | None:
        """Return the user whose name and avatar get copied onto new content."""
        return self.session.get(User, user_id)

    def add_post(self, post: Post) -> Post:
        """Insert a new post and return the persisted ORM instance."""
        self.session.add(post)
        self._commit()
        self.session.refresh(post)
        return post

    def save_post(self, post: Post) -> Post:
        """Write the aggregate back, bumping its version.

        Raises:
            sqlalchemy.orm.exc.StaleDataError: If another request saved the
                post since it was loaded.
        """
        post.version += 1
        self._commit()
        return post

    def delete_post(self, post: Post) -> None:
        """Delete a post together with its likes and comments."""
        self.session.delete(post)
        self._commit()

    def _commit(self) -> None:
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
