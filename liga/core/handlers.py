"""Render API errors and register the FastAPI exception handlers.

:func:`render_api_error` is the only place an :class:`ApiError` becomes an HTTP
response. Every handler below converts its failure into the taxonomy first
and then funnels into it, so each error is logged exactly once.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable
from collections.abc import Callable

from fastapi import FastAPI
from fastapi import Request
from fastapi import Response
from fastapi import status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from liga.core.conversions import from_data_store_error
from liga.core.conversions import from_serialization_error
from liga.core.conversions import from_validation_errors
from liga.core.errors import ApiError
from liga.core.errors import AuthenticationError
from liga.core.errors import AuthorizationError
from liga.core.errors import BadRequestError
from liga.core.errors import ConflictError
from liga.core.errors import InternalError
from liga.core.errors import NotFoundError
from liga.core.errors import RateLimitError
from liga.core.validation import ValidationErrors
from liga.schemas.error import ApiErrorResponse

logger = logging.getLogger(__name__)


def build_error_response(error: ApiError, request_id: str | None = None) -> ApiErrorResponse:
    """Build the wire body for ``error`` without side effects."""
    return ApiErrorResponse(
        message=str(error),
        error_code=error.error_code(),
        details=error.details(),
        request_id=request_id,
    )


def render_api_error(error: ApiError, request_id: str | None = None) -> JSONResponse:
    """Log ``error`` once at its severity and return its JSON response."""
    if error.should_log_as_error():
        logger.error("API Error: %s", error, exc_info=error.__cause__)
    else:
        logger.warning("API Warning: %s", error)

    payload = build_error_response(error, request_id)
    return JSONResponse(status_code=error.status_code(), content=payload.model_dump(mode="json"))


def _from_http_exception(exc: StarletteHTTPException, path: str) -> ApiError:
    message = exc.detail if isinstance(exc.detail, str) and exc.detail else "Request failed"

    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        return AuthenticationError(message=message)
    if exc.status_code == status.HTTP_403_FORBIDDEN:
        return AuthorizationError(message=message)
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return NotFoundError(resource="route", id=path)
    if exc.status_code == status.HTTP_409_CONFLICT:
        return ConflictError(message=message)
    if exc.status_code == status.HTTP_429_TOO_MANY_REQUESTS:
        return RateLimitError(message=message)
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        return InternalError(message=message)
    return BadRequestError(message=message)


async def api_error_handler(_: Request, exc: ApiError) -> JSONResponse:
    """Render taxonomy errors raised by services and routes."""
    return render_api_error(exc)


async def validation_errors_handler(_: Request, exc: ValidationErrors) -> JSONResponse:
    """Render an accumulated validation pass as a single validation error."""
    return render_api_error(from_validation_errors(exc))


async def request_validation_exception_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    """Normalize FastAPI body/query parsing failures to a JSON parsing error."""
    return render_api_error(from_serialization_error(exc))


async def serialization_exception_handler(
    _: Request,
    exc: PydanticValidationError | json.JSONDecodeError,
) -> JSONResponse:
    return render_api_error(from_serialization_error(exc))


async def data_store_exception_handler(_: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Classify database driver failures that escaped the service layer."""
    return render_api_error(from_data_store_error(exc))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Re-express framework HTTP errors (unknown routes, bad methods) in the taxonomy."""
    return render_api_error(_from_http_exception(exc, request.url.path))


async def unhandled_exception_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Render exceptions that escaped every handler as an opaque internal error.

    This runs inside the app instead of as an ``Exception`` handler, which
    Starlette's ``ServerErrorMiddleware`` would re-raise to the server after
    responding, logging the same failure a second time.
    """
    try:
        return await call_next(request)
    except Exception as exc:
        error = InternalError(message="Unexpected error")
        error.__cause__ = exc
        return render_api_error(error)


def register_error_handlers(app: FastAPI) -> None:
    """Attach all error handlers to a FastAPI app instance."""

    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(ValidationErrors, validation_errors_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(PydanticValidationError, serialization_exception_handler)
    app.add_exception_handler(json.JSONDecodeError, serialization_exception_handler)
    app.add_exception_handler(SQLAlchemyError, data_store_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.middleware("http")(unhandled_exception_middleware)
