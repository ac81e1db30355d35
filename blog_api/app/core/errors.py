"""
API error types and their JSON rendering.

Endpoints translate store outcomes and bad input into subclasses of
:class:`ApiError`.  ``register_exception_handlers`` installs handlers
that turn those, Starlette's own HTTP errors (unknown route, wrong
method) and any unexpected exception into the ``{"Message", "Status"}``
envelope, so no raw exception ever reaches the client.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..schemas.ack import AckResponse

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base class for errors rendered as an envelope response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MalformedInputError(ApiError):
    """The request body could not be decoded into the expected entity."""

    status_code = status.HTTP_400_BAD_REQUEST


class InvalidPathVariableError(ApiError):
    """The trailing path segment is not an unsigned 64-bit integer."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, raw: str) -> None:
        super().__init__(f"wrong id path variable: {raw}")
        self.raw = raw


class AlreadyExistsApiError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundApiError(ApiError):
    status_code = status.HTTP_404_NOT_FOUND


class InternalStoreError(ApiError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def envelope_response(status_code: int, message: str) -> JSONResponse:
    """Build a JSON envelope response whose ``Status`` mirrors the HTTP code."""
    body = AckResponse(message=message, status=status_code)
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return envelope_response(exc.status_code, exc.message)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return envelope_response(exc.status_code, str(exc.detail))


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error while serving %s %s", request.method, request.url.path)
    return envelope_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the envelope-rendering handlers to ``app``."""
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
