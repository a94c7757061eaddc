"""Interface layer error handling.

Maps domain errors to HTTP status codes with an ``{"error": message}`` body.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from satya.domain.error import (
    DependencyError,
    DomainError,
    NotAuthenticatedError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)

# Most specific first
STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotAuthenticatedError, status.HTTP_401_UNAUTHORIZED),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (DependencyError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def status_for(error: DomainError) -> int:
    """HTTP status code for a domain error."""
    for error_type, code in STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=code, content={"error": message})


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Render a domain error."""
    code = status_for(exc)
    if code >= 500:
        logfire.error(
            "Request failed",
            path=request.url.path,
            error_type=type(exc).__name__,
            error=str(exc),
        )
    else:
        logfire.info(
            "Request rejected",
            path=request.url.path,
            status_code=code,
            error=str(exc),
        )
    return error_response(code, str(exc))


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render a malformed request body or parameter as 400."""
    message = "; ".join(
        f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg')}"
        for err in exc.errors()
    )
    logfire.info("Request validation failed", path=request.url.path, error=message)
    return error_response(status.HTTP_400_BAD_REQUEST, message or "invalid request")


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers on the application.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(DomainError, handle_domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(
        RequestValidationError,
        handle_request_validation_error,  # type: ignore[arg-type]
    )
