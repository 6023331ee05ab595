"""Translate domain and infrastructure errors into HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from feed.domain.error import (
    AlreadyLikedError,
    AuthorizationError,
    CommentNotFoundError,
    NotFoundError,
    NotLikedError,
)
from feed.persistence.error import StoreUnavailableError
from feed.util.jwt import InvalidCredentialError

# Domain errors are expected outcomes: status code and the detail shown
_DOMAIN_ERRORS: dict[type[Exception], tuple[int, str | None]] = {
    NotFoundError: (status.HTTP_404_NOT_FOUND, None),
    CommentNotFoundError: (status.HTTP_404_NOT_FOUND, "Comment does not exist"),
    AuthorizationError: (status.HTTP_401_UNAUTHORIZED, "User not authorized"),
    AlreadyLikedError: (status.HTTP_400_BAD_REQUEST, "User already liked this post"),
    NotLikedError: (status.HTTP_400_BAD_REQUEST, "User has not yet liked this post"),
    InvalidCredentialError: (status.HTTP_401_UNAUTHORIZED, None),
}


async def _domain_error_handler(request: Request, exc: Exception) -> JSONResponse:
    status_code, detail = next(
        value for error_type, value in _DOMAIN_ERRORS.items() if isinstance(exc, error_type)
    )
    logfire.warn(
        "Request rejected",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
        status_code=status_code,
    )
    return JSONResponse(status_code=status_code, content={"detail": detail or str(exc)})


async def _store_unavailable_handler(request: Request, exc: Exception) -> JSONResponse:
    logfire.error(
        "Document store unavailable",
        path=request.url.path,
        error=str(exc),
    )
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Service temporarily unavailable"},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers on the app.

    Args:
        app: FastAPI application
    """
    for error_type in _DOMAIN_ERRORS:
        app.add_exception_handler(error_type, _domain_error_handler)
    app.add_exception_handler(StoreUnavailableError, _store_unavailable_handler)
