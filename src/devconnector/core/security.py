"""Password hashing, access tokens and avatar URLs."""
from __future__ import annotations

import hashlib
import uuid
from datetime import UTC, datetime, timedelta
from typing import Any
from urllib.parse import urlencode

from jose import JWTError, jwt
from passlib.context import CryptContext

from devconnector.core.settings import settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

GRAVATAR_OPTIONS = {"s": "200", "r": "pg", "d": "mm"}


def hash_password(password: str) -> str:
    """Return a salted bcrypt hash of ``password``."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Return True if ``plain_password`` matches the stored hash."""
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(subject: uuid.UUID | str) -> str:
    """Create JWT access token for user authentication."""
    to_encode: dict[str, object] = {"sub": str(subject)}
    expire = datetime.now(UTC) + timedelta(seconds=settings.access_token_expire_seconds)
    to_encode["exp"] = expire
    encoded_jwt: str = jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )
    return encoded_jwt


def decode_access_token(token: str) -> uuid.UUID:
    """Return the user id carried by ``token``.

    Raises:
        JWTError: If the token is invalid, expired, or has no usable subject.
    """
    payload: dict[str, Any] = jwt.decode(
        token,
        settings.secret_key,
        algorithms=[settings.jwt_algorithm],
    )
    subject = payload.get("sub")
    if subject is None:
        raise JWTError("Token has no subject")
    try:
        return uuid.UUID(str(subject))
    except ValueError as err:
        raise JWTError("Token subject is not a user id") from err


def gravatar_url(email: str) -> str:
    """Return the Gravatar image URL for ``email``."""
    digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
    return f"{settings.gravatar_base_url}/{digest}?{urlencode(GRAVATAR_OPTIONS)}"
