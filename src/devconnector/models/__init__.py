# src/devconnector/models/__init__.py
"""SQLAlchemy models for the DevConnector application."""

from .post import Post, PostComment, PostLike
from .user import User

__all__ = [
    "Post", "PostComment", "PostLike",
    "User",
]
