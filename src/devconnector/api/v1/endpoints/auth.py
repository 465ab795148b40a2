# src/devconnector/api/v1/endpoints/auth.py
"""Authentication endpoints for the DevConnector API."""

from fastapi import APIRouter

from devconnector.api.v1.dependencies import CurrentUserDep, SessionDep
from devconnector.api.v1.errors import service_errors
from devconnector.core.security import create_access_token
from devconnector.models import User
from devconnector.schemas.user import LoginRequest, TokenResponse, UserResponse
from devconnector.services import user_service

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.get("", summary="Return the authenticated user", response_model=UserResponse)
def read_current_user(current_user: CurrentUserDep) -> User:
    """Return the account behind the bearer token, without its password."""
    return current_user


@router.post("", summary="Log in with e-mail and password", response_model=TokenResponse)
def login_user(payload: LoginRequest, db: SessionDep) -> TokenResponse:
    """Exchange valid credentials for an access token.

    Raises:
        HTTPException: 400 if the credentials do not match an account.
    """
    with service_errors("logging in"):
        user = user_service.authenticate_user(db, payload)
    return TokenResponse(token=create_access_token(user.id))
