"""Authorization and consistency rules for post aggregates.

Every mutation follows the same shape: load the post, check the actor may
perform the change, edit the embedded likes/comments list in memory, then
write the whole aggregate back. Saves carry an optimistic version check, so
two requests racing on the same post cannot silently overwrite each other.
"""
from __future__ import annotations

import logging
import uuid

from sqlalchemy.orm.exc import StaleDataError

from devconnector.models.post import Post, PostComment, PostLike
from devconnector.models.user import User
from devconnector.repositories.post_repo import PostRepository
from devconnector.services.errors import (
    AlreadyLikedError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    NotLikedError,
    ValidationError,
)

__all__ = ["PostService", "is_owner"]

logger = logging.getLogger(__name__)

POST_NOT_FOUND = "No Post found"
COMMENT_NOT_FOUND = "Comment does not exist"
NOT_AUTHORIZED = "User not authorized"
TEXT_REQUIRED = "Text is required"


def is_owner(actor_id: uuid.UUID, author_id: uuid.UUID) -> bool:
    """Return True if ``actor_id`` is the recorded author of a post or comment."""
    return actor_id == author_id


def _parse_id(value: uuid.UUID | str, not_found_message: str) -> uuid.UUID:
    # Malformed identifiers are indistinguishable from missing ones to callers.
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except ValueError as err:
        raise NotFoundError(not_found_message) from err


def _require_text(text: str | None) -> str:
    if text is None or not text.strip():
        raise ValidationError.for_field("text", TEXT_REQUIRED)
    return text


class PostService:
    """Service enforcing ownership and like/comment rules around a post."""

    def __init__(self, repo: PostRepository) -> None:
        self.repo = repo

    def create_post(self, author_id: uuid.UUID, text: str | None) -> Post:
        """Create a post authored by ``author_id``.

        Args:
            author_id: Authenticated user creating the post.
            text: Body text; must not be empty.

        Returns:
            The persisted post with empty like and comment lists.

        Raises:
            ValidationError: If ``text`` is missing or blank. Nothing is stored.
            NotFoundError: If the author account no longer exists.
        """
        body = _require_text(text)
        author = self._load_user(author_id)
        post = Post(
            user_id=author.id,
            name=author.name,
            avatar=author.avatar,
            text=body,
            version=1,
        )
        post = self.repo.add_post(post)
        logger.info("Post %s created by user %s", post.id, author.id)
        return post

    def list_posts(self) -> list[Post]:
        """Return all posts ordered by creation date, newest first.

        There is no pagination or filtering.
        """
        return self.repo.list_posts()

    def get_post(self, post_id: uuid.UUID | str) -> Post:
        """Return a post, or raise NotFoundError for missing or malformed ids."""
        post = self.repo.load_post(_parse_id(post_id, POST_NOT_FOUND))
        if post is None:
            raise NotFoundError(POST_NOT_FOUND)
        return post

    def delete_post(self, actor_id: uuid.UUID, post_id: uuid.UUID | str) -> str:
        """Delete a post and everything embedded in it.

        Raises:
            NotFoundError: If the post does not exist.
            ForbiddenError: If ``actor_id`` is not the author.
        """
        post = self.get_post(post_id)
        if not is_owner(actor_id, post.user_id):
            logger.warning("User %s refused deletion of post %s", actor_id, post.id)
            raise ForbiddenError(NOT_AUTHORIZED)

        deleted_id = post.id
        try:
            self.repo.delete_post(post)
        except StaleDataError as err:
            raise self._conflict(deleted_id) from err
        logger.info("Post %s deleted by user %s", deleted_id, actor_id)
        return "Post removed"

    def like_post(self, actor_id: uuid.UUID, post_id: uuid.UUID | str) -> list[PostLike]:
        """Add a like from ``actor_id`` at the front of the post's like list.

        Raises:
            NotFoundError: If the post does not exist.
            AlreadyLikedError: If the actor already likes the post.
        """
        post = self.get_post(post_id)
        if any(like.user_id == actor_id for like in post.likes):
            raise AlreadyLikedError("User already liked this post")

        post.likes.insert(0, PostLike(user_id=actor_id))
        self._save(post)
        logger.debug("User %s liked post %s", actor_id, post.id)
        return post.likes

    def unlike_post(self, actor_id: uuid.UUID, post_id: uuid.UUID | str) -> list[PostLike]:
        """Remove the first like by ``actor_id`` from the post.

        Raises:
            NotFoundError: If the post does not exist.
            NotLikedError: If the actor has not liked the post.
        """
        post = self.get_post(post_id)
        remove_index = next(
            (index for index, like in enumerate(post.likes) if like.user_id == actor_id),
            None,
        )
        if remove_index is None:
            raise NotLikedError("Cannot unlike a post you have not liked")

        post.likes.pop(remove_index)
        self._save(post)
        logger.debug("User %s unliked post %s", actor_id, post.id)
        return post.likes

    def add_comment(
        self,
        actor_id: uuid.UUID,
        post_id: uuid.UUID | str,
        text: str | None,
    ) -> list[PostComment]:
        """Prepend a comment by ``actor_id`` to the post.

        Raises:
            ValidationError: If ``text`` is missing or blank.
            NotFoundError: If the post or the commenting user does not exist.
        """
        body = _require_text(text)
        post = self.get_post(post_id)
        author = self._load_user(actor_id)

        post.comments.insert(
            0,
            PostComment(
                id=uuid.uuid4(),
                user_id=author.id,
                name=author.name,
                avatar=author.avatar,
                text=body,
            ),
        )
        self._save(post)
        logger.debug("User %s commented on post %s", actor_id, post.id)
        return post.comments

    def delete_comment(
        self,
        actor_id: uuid.UUID,
        post_id: uuid.UUID | str,
        comment_id: uuid.UUID | str,
    ) -> list[PostComment]:
        """Remove exactly the comment identified by ``comment_id``.

        Other comments by the same author are left in place.

        Raises:
            NotFoundError: If the post or the comment does not exist.
            ForbiddenError: If ``actor_id`` did not write the comment.
        """
        post = self.get_post(post_id)
        target_id = _parse_id(comment_id, COMMENT_NOT_FOUND)

        comment = next((c for c in post.comments if c.id == target_id), None)
        if comment is None:
            raise NotFoundError(COMMENT_NOT_FOUND)
        if not is_owner(actor_id, comment.user_id):
            logger.warning(
                "User %s refused deletion of comment %s on post %s",
                actor_id,
                target_id,
                post.id,
            )
            raise ForbiddenError(NOT_AUTHORIZED)

        post.comments.remove(comment)
        self._save(post)
        logger.debug("User %s deleted comment %s on post %s", actor_id, target_id, post.id)
        return post.comments

    def _load_user(self, user_id: uuid.UUID) -> User:
        user = self.repo.load_user(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    def _save(self, post: Post) -> None:
        post_id = post.id
        try:
            self.repo.save_post(post)
        except StaleDataError as err:
            raise self._conflict(post_id) from err

    @staticmethod
    def _conflict(post_id: uuid.UUID) -> ConflictError:
        logger.warning("Concurrent update detected on post %s", post_id)
        return ConflictError("Post was modified by another request, please retry")
