"""
Error types and exception handlers.

Services raise the typed errors defined here instead of returning
sentinel values; ``register_exception_handlers`` installs FastAPI
handlers that turn them into a small JSON envelope::

    {"status": "Resource not found.", "error": "meter 42 not found"}

``status`` is a fixed, human-readable text per error kind and ``error``
carries the detail (it may be ``null``).  Request bodies that FastAPI
cannot decode or validate are reported the same way as a failed bind,
with HTTP 400.  Any other exception ends up in the catch-all handler,
which logs the traceback and answers 500.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel


logger = logging.getLogger(__name__)


class ErrorResponse(BaseModel):
    """Schema of every error body returned by the API."""

    status: str
    error: Optional[str] = None


class MeterAPIError(Exception):
    """Base class for errors that map to an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    status_text: str = "Internal server error."

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.status_text)
        self.message = message

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(status=self.status_text, error=self.message)


class MeterNotFoundError(MeterAPIError):
    """Lookup by ID or slug did not match any stored meter."""

    status_code = status.HTTP_404_NOT_FOUND
    status_text = "Resource not found."


class InvalidRequestError(MeterAPIError):
    """The request could not be bound, or its target vanished before the write."""

    status_code = status.HTTP_400_BAD_REQUEST
    status_text = "Invalid request."


class RenderError(MeterAPIError):
    """A stored record could not be turned into a response payload."""

    status_code = 422
    status_text = "Error rendering response."


def _envelope(status_code: int, payload: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=payload.model_dump())


async def meter_api_error_handler(request: Request, exc: MeterAPIError) -> JSONResponse:
    logger.warning(
        "%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message or exc.status_text
    )
    return _envelope(exc.status_code, exc.to_response())


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report undecodable or mistyped bodies as an invalid request."""
    messages = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error.get("loc", ())[1:])  # skip 'body'/'path'
        messages.append(f"{field}: {error.get('msg')}" if field else str(error.get("msg")))
    err = InvalidRequestError("; ".join(messages) or "malformed request")
    return await meter_api_error_handler(request, err)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error while serving %s %s", request.method, request.url.path, exc_info=exc)
    return _envelope(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorResponse(status=MeterAPIError.status_text),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error handlers above to ``app``."""
    app.add_exception_handler(MeterAPIError, meter_api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
