"""Translation of service exceptions into HTTP responses."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from devconnector.services.errors import (
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

logger = logging.getLogger(__name__)

# Ownership violations are always 403, whichever resource is involved.
STATUS_BY_ERROR: dict[type[ServiceError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    AlreadyLikedError: status.HTTP_400_BAD_REQUEST,
    NotLikedError: status.HTTP_400_BAD_REQUEST,
    ConflictError: status.HTTP_409_CONFLICT,
    UserExistsError: status.HTTP_400_BAD_REQUEST,
    InvalidCredentialsError: status.HTTP_400_BAD_REQUEST,
}


def to_http_exception(err: ServiceError) -> HTTPException:
    """Return the HTTPException matching a service error."""
    if isinstance(err, ValidationError):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"errors": err.errors},
        )
    for error_type, status_code in STATUS_BY_ERROR.items():
        if isinstance(err, error_type):
            return HTTPException(status_code=status_code, detail=err.message)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Server error",
    )


@contextmanager
def service_errors(action: str) -> Iterator[None]:
    """Map service and storage failures raised inside the block to HTTP errors.

    Storage failures are logged with their traceback; the caller only ever
    sees an opaque 500.
    """
    try:
        yield
    except ServiceError as err:
        raise to_http_exception(err) from err
    except SQLAlchemyError as err:
        logger.exception("Storage failure while %s", action)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error",
        ) from err


def _field_error(error: dict[str, Any]) -> dict[str, str]:
    # The last string in the location names the field; a bare "body" means
    # the whole body was missing or not an object.
    names = [part for part in error.get("loc", ()) if isinstance(part, str)]
    param = names[-1] if names else "body"
    cause = error.get("ctx", {}).get("error")
    msg = str(cause) if isinstance(cause, ValueError) else error.get("msg", "Invalid value")
    return {"param": param, "msg": msg}


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies as 400 with one entry per field.

    The payload has the same shape as a service ``ValidationError`` so clients
    handle both the same way.
    """
    errors = [_field_error(error) for error in exc.errors()]
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": {"errors": errors}},
    )
