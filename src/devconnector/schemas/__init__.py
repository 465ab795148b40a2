# src/devconnector/schemas/__init__.py
"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .post import CommentResponse, LikeResponse, MessageResponse, PostResponse, TextPayload
from .user import LoginRequest, RegisterRequest, TokenResponse, UserResponse

__all__ = [
    "CommentResponse", "LikeResponse", "MessageResponse", "PostResponse", "TextPayload",
    "LoginRequest", "RegisterRequest", "TokenResponse", "UserResponse",
]
