# storefront/core/errors.py
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class StorefrontError(Exception):
    """
    Base class for errors raised by the services.

    Services never raise HTTPException; each subclass carries the
    status code the API answers with.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(StorefrontError):
    """Missing or malformed input (missing product id, empty cart at checkout)."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(StorefrontError):
    """Unknown product, cart or cart item."""

    status_code = status.HTTP_404_NOT_FOUND


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _describe_validation_error(exc: RequestValidationError) -> str:
    """
    Turn the first pydantic error into a short message.

    loc looks like ("body", "quantity"); the leading "body"/"path"
    part is dropped.
    """
    errors = exc.errors()
    if not errors:
        return "Invalid request"

    first = errors[0]
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "path", "query")]
    msg = first.get("msg", "Invalid value")
    if loc:
        return f"{'.'.join(loc)}: {msg}"
    return msg


async def storefront_error_handler(request: Request, exc: StorefrontError) -> JSONResponse:
    return _error_response(exc.status_code, exc.message)


async def request_validation_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        _describe_validation_error(exc),
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    return _error_response(exc.status_code, str(exc.detail))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal server error",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map every error the API can produce onto the {"error": ...} body.
    """
    app.add_exception_handler(StorefrontError, storefront_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
