"""Translate foreign failures into the API error taxonomy.

Data-store failures are classified by substring matching on the driver's error
text. The match is case-sensitive and deliberately literal; keep the keywords
as they are, callers and tests depend on the exact substrings.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError as PydanticValidationError

from liga.core.errors import ApiError
from liga.core.errors import ConflictError
from liga.core.errors import DatabaseError
from liga.core.errors import FieldValidationError
from liga.core.errors import JsonParsingError
from liga.core.errors import NotFoundError
from liga.core.validation import ValidationError
from liga.core.validation import ValidationErrors

CONNECTION_MARKERS = ("Connection", "timeout")
DUPLICATE_MARKERS = ("duplicate", "already exists")
MISSING_MARKERS = ("not found", "No record")

SerializationFailure = json.JSONDecodeError | PydanticValidationError | RequestValidationError

_LOCATION_PREFIXES = frozenset({"body", "query", "path", "header", "cookie"})


def classify_data_store_message(text: str) -> ApiError:
    """Map a data-store error description onto a taxonomy variant."""
    if any(marker in text for marker in CONNECTION_MARKERS):
        return DatabaseError(message="Database connection error")
    if any(marker in text for marker in DUPLICATE_MARKERS):
        return ConflictError(message="Resource already exists")
    if any(marker in text for marker in MISSING_MARKERS):
        return NotFoundError(resource="record", id="unknown")
    return DatabaseError(message=text)


def from_data_store_error(error: BaseException) -> ApiError:
    return classify_data_store_message(str(error))


def from_serialization_error(error: SerializationFailure) -> JsonParsingError:
    if isinstance(error, RequestValidationError):
        return JsonParsingError(message=_request_validation_message(error.errors()))
    return JsonParsingError(message=str(error))


def from_validation_error(error: ValidationError) -> FieldValidationError:
    return FieldValidationError(message=error.message, field=error.field)


def from_validation_errors(errors: ValidationErrors) -> FieldValidationError:
    """Keep the first failure as the headline and carry every field's messages."""
    first = errors.first()
    if first is None:
        return FieldValidationError(message="Validation failed")
    return FieldValidationError(
        message=first.message,
        field=first.field,
        field_errors=errors.to_field_map(),
    )


def _request_validation_message(issues: Sequence[Any]) -> str:
    parts = []
    for issue in issues:
        field = _format_location(issue.get("loc", ()))
        message = str(issue.get("msg", "Invalid value"))
        parts.append(f"{field}: {message}")
    return "; ".join(parts) or "Invalid request payload"


def _format_location(location: tuple[Any, ...] | list[Any] | Any) -> str:
    if not isinstance(location, (tuple, list)):
        return str(location)

    filtered = [str(part) for part in location if part not in _LOCATION_PREFIXES]
    if filtered:
        return ".".join(filtered)

    if not location:
        return "request"

    return str(location[0])
