"""Account registration and login."""
from __future__ import annotations

import logging
import uuid

from sqlalchemy.orm import Session

from devconnector.core import security
from devconnector.models.user import User
from devconnector.schemas.user import LoginRequest, RegisterRequest
from devconnector.services.errors import InvalidCredentialsError, UserExistsError

__all__ = [
    "get_user",
    "get_user_by_email",
    "register_user",
    "authenticate_user",
]

logger = logging.getLogger(__name__)


def get_user(db: Session, user_id: uuid.UUID) -> User | None:
    """Return a single user by primary key."""
    return db.get(User, user_id)


def get_user_by_email(db: Session, email: str) -> User | None:
    """Return the user registered with ``email``, compared case-insensitively."""
    return db.query(User).filter(User.email == email.strip().lower()).first()


def register_user(db: Session, payload: RegisterRequest) -> User:
    """Create an account with a hashed password and a Gravatar avatar.

    Raises:
        UserExistsError: If the e-mail address is already registered.
    """
    email = payload.email.strip().lower()
    if get_user_by_email(db, email) is not None:
        raise UserExistsError("User already exists")

    user = User(
        name=payload.name,
        email=email,
        avatar=security.gravatar_url(email),
        password=security.hash_password(payload.password),
    )
    db.add(user)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(user)
    logger.info("Registered user %s", user.id)
    return user


def authenticate_user(db: Session, payload: LoginRequest) -> User:
    """Return the account matching the submitted credentials.

    Raises:
        InvalidCredentialsError: If the e-mail is unknown or the password is wrong.
    """
    user = get_user_by_email(db, payload.email)
    if user is None or not security.verify_password(payload.password, user.password):
        logger.info("Rejected login attempt for %s", payload.email)
        raise InvalidCredentialsError("Invalid credentials")
    return user
