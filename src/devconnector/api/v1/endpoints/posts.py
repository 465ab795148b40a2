# src/devconnector/api/v1/endpoints/posts.py
"""Post, like and comment endpoints for the DevConnector API."""

from typing import Annotated

from fastapi import APIRouter, Body

from devconnector.api.v1.dependencies import CurrentUserDep, PostServiceDep
from devconnector.api.v1.errors import service_errors
from devconnector.models import Post, PostComment, PostLike
from devconnector.schemas.post import (
    CommentResponse,
    LikeResponse,
    MessageResponse,
    PostResponse,
    TextPayload,
)

router = APIRouter(prefix="/posts", tags=["posts"])

# A missing body is reported like empty text rather than as a schema failure.
OptionalTextPayload = Annotated[TextPayload | None, Body()]


def _text_of(payload: TextPayload | None) -> str | None:
    return payload.text if payload is not None else None


@router.post("", response_model=PostResponse)
def create_post(
    current_user: CurrentUserDep,
    service: PostServiceDep,
    payload: OptionalTextPayload = None,
) -> Post:
    """Create a post authored by the current user.

    Raises:
        HTTPException: 400 if the text is empty.
    """
    with service_errors("creating a post"):
        return service.create_post(current_user.id, _text_of(payload))


@router.get("", response_model=list[PostResponse])
def list_posts(current_user: CurrentUserDep, service: PostServiceDep) -> list[Post]:
    """List every post, newest first."""
    with service_errors("listing posts"):
        return service.list_posts()


@router.get("/{post_id}", response_model=PostResponse)
def get_post(post_id: str, current_user: CurrentUserDep, service: PostServiceDep) -> Post:
    """Get a specific post by ID.

    Raises:
        HTTPException: 404 if the post does not exist or the id is malformed.
    """
    with service_errors("loading a post"):
        return service.get_post(post_id)


@router.delete("/{post_id}", response_model=MessageResponse)
def delete_post(
    post_id: str,
    current_user: CurrentUserDep,
    service: PostServiceDep,
) -> MessageResponse:
    """Delete a post with its likes and comments.

    Raises:
        HTTPException: 404 if the post does not exist, 403 if the current user
            is not the author.
    """
    with service_errors("deleting a post"):
        message = service.delete_post(current_user.id, post_id)
    return MessageResponse(msg=message)


@router.put("/like/{post_id}", response_model=list[LikeResponse])
def like_post(
    post_id: str,
    current_user: CurrentUserDep,
    service: PostServiceDep,
) -> list[PostLike]:
    """Like a post; returns the updated like list, most recent first."""
    with service_errors("liking a post"):
        return service.like_post(current_user.id, post_id)


@router.put("/unlike/{post_id}", response_model=list[LikeResponse])
def unlike_post(
    post_id: str,
    current_user: CurrentUserDep,
    service: PostServiceDep,
) -> list[PostLike]:
    """Withdraw the current user's like from a post."""
    with service_errors("unliking a post"):
        return service.unlike_post(current_user.id, post_id)


@router.post("/comment/{post_id}", response_model=list[CommentResponse])
def add_comment(
    post_id: str,
    current_user: CurrentUserDep,
    service: PostServiceDep,
    payload: OptionalTextPayload = None,
) -> list[PostComment]:
    """Comment on a post; returns the updated comment list, most recent first."""
    with service_errors("adding a comment"):
        return service.add_comment(current_user.id, post_id, _text_of(payload))


@router.delete("/comment/{post_id}/{comment_id}", response_model=list[CommentResponse])
def delete_comment(
    post_id: str,
    comment_id: str,
    current_user: CurrentUserDep,
    service: PostServiceDep,
) -> list[PostComment]:
    """Delete one of the current user's comments.

    Raises:
        HTTPException: 404 if the post or comment does not exist, 403 if the
            current user did not write the comment.
    """
    with service_errors("deleting a comment"):
        return service.delete_comment(current_user.id, post_id, comment_id)
