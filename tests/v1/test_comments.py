# mypy: ignore-errors
# tests/v1/test_comments.py
"""Tests for comment endpoints."""

import uuid

from fastapi import status


def _comment(client, post_id, text, headers):
    return client.post(f"/api/posts/comment/{post_id}", json={"text": text}, headers=headers)


def test_add_comment(client, other_user, other_auth_token, test_post) -> None:
    response = _comment(client, test_post.id, "Great post", other_auth_token)

    assert response.status_code == status.HTTP_200_OK
    comments = response.json()
    assert len(comments) == 1
    assert comments[0]["text"] == "Great post"
    assert comments[0]["user"] == str(other_user.id)
    assert comments[0]["name"] == other_user.name
    assert comments[0]["avatar"] == other_user.avatar
    uuid.UUID(comments[0]["id"])


def test_add_comment_empty_text(client, auth_token, test_post) -> None:
    response = _comment(client, test_post.id, "", auth_token)

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"]["errors"][0]["param"] == "text"


def test_add_comment_missing_post(client, auth_token) -> None:
    response = _comment(client, uuid.uuid4(), "hello", auth_token)

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["detail"] == "No Post found"


def test_delete_comment_by_id(client, auth_token, test_post) -> None:
    """Deleting by id leaves the author's other comments untouched."""
    _comment(client, test_post.id, "keep me", auth_token)
    comments = _comment(client, test_post.id, "hello", auth_token).json()
    target, kept = comments[0]["id"], comments[1]["id"]

    response = client.delete(f"/api/posts/comment/{test_post.id}/{target}", headers=auth_token)

    assert response.status_code == status.HTTP_200_OK
    remaining = [c["id"] for c in response.json()]
    assert remaining == [kept]


def test_delete_older_comment(client, auth_token, test_post) -> None:
    older = _comment(client, test_post.id, "older", auth_token).json()[0]["id"]
    newer = _comment(client, test_post.id, "newer", auth_token).json()[0]["id"]

    response = client.delete(f"/api/posts/comment/{test_post.id}/{older}", headers=auth_token)

    assert [c["id"] for c in response.json()] == [newer]


def test_delete_comment_not_author(client, auth_token, other_auth_token, test_post) -> None:
    comment_id = _comment(client, test_post.id, "mine", auth_token).json()[0]["id"]

    response = client.delete(
        f"/api/posts/comment/{test_post.id}/{comment_id}", headers=other_auth_token
    )

    assert response.status_code == status.HTTP_403_FORBIDDEN
    post = client.get(f"/api/posts/{test_post.id}", headers=auth_token).json()
    assert [c["id"] for c in post["comments"]] == [comment_id]


def test_delete_missing_comment(client, auth_token, test_post) -> None:
    _comment(client, test_post.id, "present", auth_token)

    response = client.delete(
        f"/api/posts/comment/{test_post.id}/{uuid.uuid4()}", headers=auth_token
    )

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["detail"] == "Comment does not exist"


def test_delete_comment_on_missing_post(client, auth_token) -> None:
    response = client.delete(
        f"/api/posts/comment/{uuid.uuid4()}/{uuid.uuid4()}", headers=auth_token
    )
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["detail"] == "No Post found"


def test_add_comment_malformed_body(client, auth_token, test_post) -> None:
    missing = client.post(f"/api/posts/comment/{test_post.id}", headers=auth_token)
    wrong_type = client.post(
        f"/api/posts/comment/{test_post.id}", json={"text": 42}, headers=auth_token
    )

    assert missing.status_code == status.HTTP_400_BAD_REQUEST
    assert missing.json()["detail"]["errors"] == [{"param": "text", "msg": "Text is required"}]
    assert wrong_type.status_code == status.HTTP_400_BAD_REQUEST
    assert wrong_type.json()["detail"]["errors"][0]["param"] == "text"
