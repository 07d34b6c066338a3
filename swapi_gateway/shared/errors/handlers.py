"""
Centralized error handlers for FastAPI.

Maps domain errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses share the {"type", "message"} shape.
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from swapi_gateway.domain.starwars.errors import (
    ErrorKind,
    InternalError,
    StarWarsDomainError,
)

logger = logging.getLogger(__name__)

ERROR_STATUS: dict[ErrorKind, int] = {
    ErrorKind.BAD_REQUEST: HTTPStatus.BAD_REQUEST,
    ErrorKind.NOT_FOUND: HTTPStatus.NOT_FOUND,
    ErrorKind.INTERNAL: HTTPStatus.INTERNAL_SERVER_ERROR,
}

INTERNAL_MESSAGE = "Internal server error."


class UnmappedErrorKindError(RuntimeError):
    """Raised when an error kind has no HTTP status. Always a programming bug."""

    def __init__(self, kind: object) -> None:
        super().__init__(f"No HTTP status mapped for error kind: {kind!r}")
        self.kind = kind


def status_for(kind: ErrorKind) -> int:
    """Return the HTTP status code for an error kind.

    Raises:
        UnmappedErrorKindError: If the kind is not in ERROR_STATUS.
    """
    try:
        return int(ERROR_STATUS[kind])
    except KeyError:
        raise UnmappedErrorKindError(kind) from None


def translate_error(exc: StarWarsDomainError) -> tuple[int, dict[str, str]]:
    """Translate a domain error into a status code and response body."""
    status_code = status_for(exc.kind)
    return status_code, {"type": exc.kind.value, "message": exc.message}


def _error_response(status_code: int, error_type: str, message: str, headers=None) -> JSONResponse:
    """Build a consistent JSON error response."""
    return JSONResponse(
        status_code=status_code,
        content={"type": error_type, "message": message},
        headers=headers,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(StarWarsDomainError)
    async def handle_domain_error(
        request: Request, exc: StarWarsDomainError
    ) -> JSONResponse:
        """Translate any Star Wars domain error by its kind."""
        status_code, body = translate_error(exc)
        if isinstance(exc, InternalError):
            logger.error("Upstream failure on %s: %s", request.url.path, exc.cause)
        else:
            logger.warning("%s on %s: %s", exc.kind.value, request.url.path, exc.message)
        return _error_response(status_code, body["type"], body["message"])

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        _request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Reshape framework errors (unknown route, wrong method) into the error schema."""
        try:
            error_type = HTTPStatus(exc.status_code).name
        except ValueError:
            error_type = "HTTP_ERROR"
        return _error_response(
            exc.status_code, error_type, str(exc.detail), headers=exc.headers
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(
            HTTPStatus.INTERNAL_SERVER_ERROR,
            ErrorKind.INTERNAL.value,
            INTERNAL_MESSAGE,
        )
