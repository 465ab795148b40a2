# src/devconnector/api/v1/endpoints/users.py
"""Account registration endpoints."""

from fastapi import APIRouter

from devconnector.api.v1.dependencies import SessionDep
from devconnector.api.v1.errors import service_errors
from devconnector.core.security import create_access_token
from devconnector.schemas.user import RegisterRequest, TokenResponse
from devconnector.services import user_service

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", summary="Register a new account", response_model=TokenResponse)
def register_user(payload: RegisterRequest, db: SessionDep) -> TokenResponse:
    """Register an account and return a token for it.

    Raises:
        HTTPException: 400 if the e-mail address is already registered or the
            body is malformed.
    """
    with service_errors("registering a user"):
        user = user_service.register_user(db, payload)
    return TokenResponse(token=create_access_token(user.id))
