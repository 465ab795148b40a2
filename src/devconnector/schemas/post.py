# src/devconnector/schemas/post.py
"""Post-related Pydantic schemas."""

import uuid
from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator

from devconnector.db.time import as_utc

# Timestamps always leave the API with an explicit UTC offset.
UtcDateTime = Annotated[datetime, AfterValidator(as_utc)]


class TextPayload(BaseModel):
    """Body for creating a post or a comment.

    Emptiness is checked by the service; the body itself may be omitted and
    is then treated as having no text.
    """

    text: str | None = Field(None, max_length=5000, description="Body text")


class LikeResponse(BaseModel):
    """A single like: the referenced user only."""

    user: uuid.UUID

    model_config = ConfigDict(from_attributes=True)

    @model_validator(mode="before")
    @classmethod
    def _map_author(cls, data: object) -> object:
        if not isinstance(data, dict):
            return {"user": getattr(data, "user_id", None)}
        return data


class CommentResponse(BaseModel):
    """A comment embedded in a post."""

    id: uuid.UUID
    user: uuid.UUID
    name: str
    avatar: str | None
    text: str
    date: UtcDateTime

    model_config = ConfigDict(from_attributes=True)

    @model_validator(mode="before")
    @classmethod
    def _map_author(cls, data: object) -> object:
        if not isinstance(data, dict):
            extracted: dict[str, object | None] = {
                field_name: getattr(data, field_name, None)
                for field_name in cls.model_fields
                if field_name != "user"
            }
            extracted["user"] = getattr(data, "user_id", None)
            data = extracted
        return data


class PostResponse(BaseModel):
    """Schema for post information returned by the API."""

    id: uuid.UUID
    user: uuid.UUID
    name: str
    avatar: str | None
    text: str
    date: UtcDateTime
    likes: list[LikeResponse]
    comments: list[CommentResponse]

    model_config = ConfigDict(from_attributes=True)

    @model_validator(mode="before")
    @classmethod
    def _map_author(cls, data: object) -> object:
        if not isinstance(data, dict):
            extracted: dict[str, object | None] = {
                field_name: getattr(data, field_name, None)
                for field_name in cls.model_fields
                if field_name != "user"
            }
            extracted["user"] = getattr(data, "user_id", None)
            data = extracted
        return data


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    msg: str
