"""Closed API error taxonomy.

Every failure that reaches a client is one of the :class:`ErrorKind` variants
below. The HTTP status and machine-readable code depend on the kind alone,
never on the payload, and are looked up from tables that cover every kind.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum
from typing import Any
from typing import ClassVar

from fastapi import status

from liga.core.validation import ValidationErrors


class ErrorKind(str, Enum):
    DATABASE = "database"
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    RATE_LIMIT = "rate_limit"
    EXTERNAL_SERVICE = "external_service"
    INTERNAL = "internal"
    BAD_REQUEST = "bad_request"
    JSON_PARSING = "json_parsing"
    TOURNAMENT = "tournament"
    USER = "user"


STATUS_CODES: dict[ErrorKind, int] = {
    ErrorKind.DATABASE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.AUTHENTICATION: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.AUTHORIZATION: status.HTTP_403_FORBIDDEN,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.RATE_LIMIT: status.HTTP_429_TOO_MANY_REQUESTS,
    ErrorKind.EXTERNAL_SERVICE: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.BAD_REQUEST: status.HTTP_400_BAD_REQUEST,
    ErrorKind.JSON_PARSING: status.HTTP_400_BAD_REQUEST,
    ErrorKind.TOURNAMENT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.USER: status.HTTP_400_BAD_REQUEST,
}

ERROR_CODES: dict[ErrorKind, str] = {
    ErrorKind.DATABASE: "DATABASE_ERROR",
    ErrorKind.VALIDATION: "VALIDATION_ERROR",
    ErrorKind.AUTHENTICATION: "AUTHENTICATION_ERROR",
    ErrorKind.AUTHORIZATION: "AUTHORIZATION_ERROR",
    ErrorKind.NOT_FOUND: "NOT_FOUND",
    ErrorKind.CONFLICT: "CONFLICT",
    ErrorKind.RATE_LIMIT: "RATE_LIMIT_EXCEEDED",
    ErrorKind.EXTERNAL_SERVICE: "EXTERNAL_SERVICE_ERROR",
    ErrorKind.INTERNAL: "INTERNAL_SERVER_ERROR",
    ErrorKind.BAD_REQUEST: "BAD_REQUEST",
    ErrorKind.JSON_PARSING: "JSON_PARSING_ERROR",
    ErrorKind.TOURNAMENT: "TOURNAMENT_ERROR",
    ErrorKind.USER: "USER_ERROR",
}

# Server-side failures; everything else is client-caused and logged as a warning.
SERVER_FAULT_KINDS = frozenset({ErrorKind.DATABASE, ErrorKind.INTERNAL, ErrorKind.EXTERNAL_SERVICE})

_VARIANTS: dict[ErrorKind, type[ApiError]] = {}


class ApiError(Exception):
    """Base of the closed error taxonomy.

    Concrete variants bind exactly one :class:`ErrorKind`, a message template
    and their payload field names. Instances are read-only and compare by
    variant and payload.
    """

    kind: ClassVar[ErrorKind]
    template: ClassVar[str]
    fields: ClassVar[tuple[str, ...]]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.kind in _VARIANTS:
            raise TypeError(f"{cls.kind.value} already has a variant: {_VARIANTS[cls.kind].__name__}")
        _VARIANTS[cls.kind] = cls

    def __init__(self, **payload: Any) -> None:
        if type(self) is ApiError:
            raise TypeError("ApiError is abstract; raise one of its variants")
        for name in self.fields:
            object.__setattr__(self, name, payload.get(name))
        super().__init__(self.template.format(**payload))

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self.fields:
            raise AttributeError(f"{type(self).__name__}.{name} is read-only")
        super().__setattr__(name, value)

    def __str__(self) -> str:
        return str(self.args[0])

    def __repr__(self) -> str:
        rendered = ", ".join(f"{name}={getattr(self, name)!r}" for name in self.fields)
        return f"{type(self).__name__}({rendered})"

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.payload() == other.payload()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), str(self)))

    def payload(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in self.fields}

    def status_code(self) -> int:
        return STATUS_CODES[self.kind]

    def error_code(self) -> str:
        return ERROR_CODES[self.kind]

    def details(self) -> dict[str, Any] | None:
        return None

    def should_log_as_error(self) -> bool:
        return self.kind in SERVER_FAULT_KINDS

    @classmethod
    def validation(cls, message: str, field: str | None = None) -> FieldValidationError:
        return FieldValidationError(message=message, field=field)

    @classmethod
    def not_found(cls, resource: str, id: str) -> NotFoundError:
        return NotFoundError(resource=resource, id=id)

    @classmethod
    def authentication(cls, message: str) -> AuthenticationError:
        return AuthenticationError(message=message)

    @classmethod
    def authorization(cls, message: str) -> AuthorizationError:
        return AuthorizationError(message=message)

    @classmethod
    def conflict(cls, message: str) -> ConflictError:
        return ConflictError(message=message)

    @classmethod
    def bad_request(cls, message: str) -> BadRequestError:
        return BadRequestError(message=message)

    @classmethod
    def internal(cls, message: str) -> InternalError:
        return InternalError(message=message)

    @classmethod
    def tournament(cls, message: str, tournament_id: str | None = None) -> TournamentError:
        return TournamentError(message=message, tournament_id=tournament_id)

    @classmethod
    def user(cls, message: str, user_id: str | None = None) -> UserError:
        return UserError(message=message, user_id=user_id)


class DatabaseError(ApiError):
    kind = ErrorKind.DATABASE
    template = "Database error: {message}"
    fields = ("message",)

    def __init__(self, *, message: str) -> None:
        super().__init__(message=message)


class FieldValidationError(ApiError):
    """Invalid input, optionally pinned to a field.

    ``field_errors`` carries the full field-to-messages map when the error was
    built from an accumulated validation pass.
    """

    kind = ErrorKind.VALIDATION
    template = "Validation error: {message}"
    fields = ("message", "field", "field_errors")

    def __init__(
        self,
        *,
        message: str,
        field: str | None = None,
        field_errors: dict[str, list[str]] | None = None,
    ) -> None:
        super().__init__(message=message, field=field, field_errors=field_errors)

    def details(self) -> dict[str, Any] | None:
        details: dict[str, Any] = {}
        if self.field is not None:
            details["field"] = self.field
        if self.field_errors:
            details["fields"] = {name: list(messages) for name, messages in self.field_errors.items()}
        return details or None


class AuthenticationError(ApiError):
    kind = ErrorKind.AUTHENTICATION
    template = "Authentication error: {message}"
    fields = ("message",)

    def __init__(self, *, message: str) -> None:
        super().__init__(message=message)


class AuthorizationError(ApiError):
    kind = ErrorKind.AUTHORIZATION
    template = "Authorization error: {message}"
    fields = ("message",)

    def __init__(self, *, message: str) -> None:
        super().__init__(message=message)


class NotFoundError(ApiError):
    kind = ErrorKind.NOT_FOUND
    template = "Resource not found: {resource} with id {id}"
    fields = ("resource", "id")

    def __init__(self, *, resource: str, id: str) -> None:
        super().__init__(resource=resource, id=id)

    def details(self) -> dict[str, Any] | None:
        return {"resource": self.resource, "id": self.id}


class ConflictError(ApiError):
    kind = ErrorKind.CONFLICT
    template = "Conflict: {message}"
    fields = ("message",)

    def __init__(self, *, message: str) -> None:
        super().__init__(message=message)


class RateLimitError(ApiError):
    kind = ErrorKind.RATE_LIMIT
    template = "Rate limit exceeded: {message}"
    fields = ("message",)

    def __init__(self, *, message: str) -> None:
        super().__init__(message=message)


class ExternalServiceError(ApiError):
    kind = ErrorKind.EXTERNAL_SERVICE
    template = "External service error: {service} - {message}"
    fields = ("service", "message")

    def __init__(self, *, service: str, message: str) -> None:
        super().__init__(service=service, message=message)

    def details(self) -> dict[str, Any] | None:
        return {"service": self.service}


class InternalError(ApiError):
    kind = ErrorKind.INTERNAL
    template = "Internal server error: {message}"
    fields = ("message",)

    def __init__(self, *, message: str) -> None:
        super().__init__(message=message)


class BadRequestError(ApiError):
    kind = ErrorKind.BAD_REQUEST
    template = "Bad request: {message}"
    fields = ("message",)

    def __init__(self, *, message: str) -> None:
        super().__init__(message=message)


class JsonParsingError(ApiError):
    kind = ErrorKind.JSON_PARSING
    template = "JSON parsing error: {message}"
    fields = ("message",)

    def __init__(self, *, message: str) -> None:
        super().__init__(message=message)


class TournamentError(ApiError):
    kind = ErrorKind.TOURNAMENT
    template = "Tournament error: {message}"
    fields = ("message", "tournament_id")

    def __init__(self, *, message: str, tournament_id: str | None = None) -> None:
        super().__init__(message=message, tournament_id=tournament_id)

    def details(self) -> dict[str, Any] | None:
        if self.tournament_id is None:
            return None
        return {"tournament_id": self.tournament_id}


class UserError(ApiError):
    kind = ErrorKind.USER
    template = "User error: {message}"
    fields = ("message", "user_id")

    def __init__(self, *, message: str, user_id: str | None = None) -> None:
        super().__init__(message=message, user_id=user_id)

    def details(self) -> dict[str, Any] | None:
        if self.user_id is None:
            return None
        return {"user_id": self.user_id}


def variant_for(kind: ErrorKind) -> type[ApiError]:
    """Return the variant class bound to ``kind``."""
    return _VARIANTS[kind]


@contextmanager
def error_context(context: str) -> Iterator[None]:
    """Re-raise unexpected failures inside the block as ``InternalError``."""
    try:
        yield
    except (ApiError, ValidationErrors):
        raise
    except Exception as exc:
        raise InternalError(message=f"{context}: {exc}") from exc


@contextmanager
def not_found_on_error(
    resource: str,
    id: str,
    *exc_types: type[BaseException],
) -> Iterator[None]:
    """Re-raise the given failures (default: ``LookupError``) as ``NotFoundError``."""
    caught = exc_types or (LookupError,)
    try:
        yield
    except ApiError:
        raise
    except caught as exc:
        raise NotFoundError(resource=resource, id=id) from exc


@contextmanager
def field_error(field: str, *exc_types: type[BaseException]) -> Iterator[None]:
    """Re-raise the given failures (default: ``ValueError``) as a field validation error."""
    caught = exc_types or (ValueError,)
    try:
        yield
    except ApiError:
        raise
    except caught as exc:
        raise FieldValidationError(message=str(exc), field=field) from exc
