"""Exception handlers turning errors into the ``{success: false}`` envelope."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from hunt.adapter.error import StorageError
from hunt.domain.error import (
    ConflictError,
    NotAuthorizedError,
    NotFoundError,
    UnauthenticatedError,
    ValidationError,
)
from hunt.interface.api.schemas import ErrorResponse

# Domain and adapter errors with the status they map to
ERROR_STATUS: dict[type[Exception], int] = {
    UnauthenticatedError: status.HTTP_401_UNAUTHORIZED,
    NotAuthorizedError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ValidationError: status.HTTP_400_BAD_REQUEST,
    ConflictError: status.HTTP_409_CONFLICT,
    StorageError: status.HTTP_502_BAD_GATEWAY,
}

# Messages that are safe to show for each mapped error
PUBLIC_MESSAGES: dict[type[Exception], str] = {
    NotAuthorizedError: "Not authorized to modify this resource",
    StorageError: "Image storage is unavailable",
}


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build an error envelope response."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message).model_dump(),
    )


async def handle_known_error(request: Request, exc: Exception) -> JSONResponse:
    """Map a domain or adapter error to its status code."""
    exc_type = next(t for t in ERROR_STATUS if isinstance(exc, t))
    status_code = ERROR_STATUS[exc_type]
    message = PUBLIC_MESSAGES.get(exc_type, str(exc))

    if isinstance(exc, NotFoundError):
        message = f"{exc.resource} not found"

    logfire.warn(
        "Request failed",
        path=request.url.path,
        status_code=status_code,
        error_type=type(exc).__name__,
        error=str(exc),
    )
    return error_response(status_code, message)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies, paths and queries."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    detail = first.get("msg", "Invalid request")
    message = f"{location}: {detail}" if location else detail

    logfire.warn("Request validation failed", path=request.url.path, errors=str(errors))
    return error_response(422, message)


async def handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Wrap framework HTTP errors (unknown route, wrong method) in the envelope."""
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Last resort: log and hide the details."""
    logfire.error(
        "Unexpected error",
        path=request.url.path,
        error_type=type(exc).__name__,
        error=str(exc),
        _exc_info=exc,
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Server error")


def register_error_handlers(app: FastAPI) -> None:
    """Install the exception handlers on the app.

    Args:
        app: FastAPI application
    """
    for exc_type in ERROR_STATUS:
        app.add_exception_handler(exc_type, handle_known_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)
