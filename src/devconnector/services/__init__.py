# src/devconnector/services/__init__.py
"""Business logic services for the DevConnector application."""

from .errors import (
    AlreadyLikedError,
    ConflictError,
    ForbiddenError,
    InvalidCredentialsError,
    NotFoundError,
    NotLikedError,
    ServiceError,
    UserExistsError,
    ValidationError,
)
from .post_service import PostService, is_owner

__all__ = [
    "PostService",
    "is_owner",
    "ServiceError",
    "ValidationError",
    "NotFoundError",
    "ForbiddenError",
    "AlreadyLikedError",
    "NotLikedError",
    "ConflictError",
    "UserExistsError",
    "InvalidCredentialsError",
]
