"""Mapping of domain errors onto HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from quest.domain.error import (
    ConflictError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    SelfFollowError,
    StorageUnavailableError,
    ValidationError,
)

# First match wins, so subclasses come before their bases
ERROR_STATUS: list[tuple[type[DomainError], int]] = [
    (StorageUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (ConflictError, status.HTTP_409_CONFLICT),
    (SelfFollowError, status.HTTP_400_BAD_REQUEST),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
]


def status_for(error: DomainError) -> int:
    """HTTP status code for a domain error; unknown domain errors are 400."""
    for error_type, code in ERROR_STATUS:
        if isinstance(error, error_type):
            return code
    return status.HTTP_400_BAD_REQUEST


async def domain_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Answer a domain error with ``{"detail": message}``."""
    assert isinstance(exc, DomainError)
    code = status_for(exc)
    if code >= 500:
        logfire.error(
            "Request failed", path=request.url.path, error=type(exc).__name__
        )
    else:
        logfire.info(
            "Request rejected",
            path=request.url.path,
            status=code,
            error=type(exc).__name__,
        )
    return JSONResponse(status_code=code, content={"detail": str(exc)})


def register_error_handlers(app: FastAPI) -> None:
    """Install the domain error handler on the application."""
    app.add_exception_handler(DomainError, domain_error_handler)
