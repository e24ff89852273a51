"""
Error taxonomy and HTTP error mapping for the Jobly backend.

The access layer raises the named errors below; it never retries or recovers
locally. The handlers registered by register_exception_handlers() are the
single place where an error kind becomes a status code, and every error
response shares one envelope:

    {"error": {"message": <str or list of str>, "status": <int>}}

Kinds:
- BadRequestError (400): caller input is invalid (empty update, duplicate,
  unknown reference, min > max, unknown update field)
- UnauthorizedError (401): missing or insufficient identity
- NotFoundError (404): no matching row for get/update/remove/search

Anything else is logged with its traceback and reported as 500.
"""

import logging
from typing import Any, List, Union

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)


class JoblyError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: Union[str, List[str]]):
        super().__init__(message if isinstance(message, str) else "; ".join(message))
        self.message = message


class BadRequestError(JoblyError):
    """Raised when caller input is structurally or semantically invalid."""

    status_code = status.HTTP_400_BAD_REQUEST


class UnauthorizedError(JoblyError):
    """Raised when the request identity is missing or insufficient."""

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: Union[str, List[str]] = "Unauthorized"):
        super().__init__(message)


class NotFoundError(JoblyError):
    """Raised when no row matches a get, update, remove or search."""

    status_code = status.HTTP_404_NOT_FOUND


def error_envelope(message: Any, status_code: int) -> dict:
    return {"error": {"message": message, "status": status_code}}


async def jobly_error_handler(request: Request, exc: JoblyError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    else:
        logger.warning(f"{request.method} {request.url.path} rejected ({exc.status_code}): {exc}")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_envelope(exc.message, exc.status_code),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report body/query validation failures as 400 with one message per problem."""
    messages = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        messages.append(f"{location}: {err.get('msg')}" if location else err.get("msg"))
    logger.warning(f"{request.method} {request.url.path} rejected (400): {messages}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_envelope(messages, status.HTTP_400_BAD_REQUEST),
    )


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_envelope("Internal server error", status.HTTP_500_INTERNAL_SERVER_ERROR),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error-envelope handlers to an application."""
    app.add_exception_handler(JoblyError, jobly_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)


__all__ = [
    "JoblyError",
    "BadRequestError",
    "UnauthorizedError",
    "NotFoundError",
    "error_envelope",
    "register_exception_handlers",
]
