"""Exceptions raised by the service layer.

Services never import FastAPI; endpoints translate these into HTTP responses.
"""

from __future__ import annotations


class ServiceError(RuntimeError):
    """Base exception for all service-level failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    """Raised when request input has the wrong shape, e.g. empty text.

    ``errors`` holds one ``{"param": ..., "msg": ...}`` entry per offending field.
    """

    def __init__(self, errors: list[dict[str, str]]) -> None:
        super().__init__("; ".join(error["msg"] for error in errors))
        self.errors = errors

    @classmethod
    def for_field(cls, param: str, msg: str) -> ValidationError:
        """Build an error reporting a single field."""
        return cls([{"param": param, "msg": msg}])


class NotFoundError(ServiceError):
    """Raised when a post, comment or user does not exist or the id is malformed."""


class ForbiddenError(ServiceError):
    """Raised when the actor does not own the resource being mutated."""


class AlreadyLikedError(ServiceError):
    """Raised when a user likes a post they already like."""


class NotLikedError(ServiceError):
    """Raised when a user unlikes a post they have not liked."""


class ConflictError(ServiceError):
    """Raised when a post was changed by another request while being updated."""


class UserExistsError(ServiceError):
    """Raised when registering an e-mail address that is already taken."""


class InvalidCredentialsError(ServiceError):
    """Raised when a login attempt does not match any account."""
