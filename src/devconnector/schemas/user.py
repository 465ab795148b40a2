"""User-related Pydantic schemas."""

import uuid

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from devconnector.schemas.post import UtcDateTime


class RegisterRequest(BaseModel):
    """Schema for account registration."""

    name: str = Field(..., min_length=1, max_length=100, description="Display name")
    email: EmailStr = Field(..., description="Login e-mail, unique per account")
    password: str = Field(
        ...,
        min_length=6,
        max_length=72,
        description="Password with 6 or more characters",
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject names made only of whitespace."""
        if not v.strip():
            raise ValueError("Name is required")
        return v.strip()


class LoginRequest(BaseModel):
    """Schema for login submissions."""

    email: EmailStr = Field(..., description="Account e-mail")
    password: str = Field(..., min_length=1, description="Account password")


class TokenResponse(BaseModel):
    """Bearer token issued after registration or login."""

    token: str = Field(..., description="JWT access token")


class UserResponse(BaseModel):
    """Public account data; the password hash is never exposed."""

    id: uuid.UUID
    name: str
    email: str
    avatar: str | None
    date: UtcDateTime

    model_config = ConfigDict(from_attributes=True)
