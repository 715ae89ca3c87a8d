"""Mapping of domain errors onto HTTP responses."""

import logfire
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from devnovate.domain.error import (
    ConflictError,
    DomainError,
    ForbiddenError,
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)
from devnovate.util.jwt import JWTError

# Order matters: first match wins
_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (InvalidTransitionError, status.HTTP_409_CONFLICT),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
]


def to_http_exception(error: DomainError) -> HTTPException:
    """Convert a domain error to an HTTPException.

    Args:
        error: Domain error raised by a use case

    Returns:
        HTTPException with the matching status code
    """
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            headers = {"Retry-After": "1"} if isinstance(error, ConflictError) else None
            return HTTPException(
                status_code=status_code, detail=str(error), headers=headers
            )
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))


def register_exception_handlers(app: FastAPI) -> None:
    """Install handlers for domain errors, token errors and anything unexpected.

    The catch-all runs in Starlette's outermost middleware, which re-raises
    after responding so the server still sees the failure.
    """

    @app.exception_handler(DomainError)
    async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
        http_exc = to_http_exception(exc)
        logfire.info(
            "Domain error",
            path=request.url.path,
            error_type=type(exc).__name__,
            status_code=http_exc.status_code,
            error=str(exc),
        )
        return JSONResponse(
            status_code=http_exc.status_code,
            content={"detail": http_exc.detail},
            headers=http_exc.headers,
        )

    @app.exception_handler(JWTError)
    async def handle_jwt_error(request: Request, exc: JWTError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED, content={"detail": str(exc)}
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logfire.error(
            "Unhandled error",
            path=request.url.path,
            method=request.method,
            error_type=type(exc).__name__,
            _exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )
