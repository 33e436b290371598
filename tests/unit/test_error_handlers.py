"""Unit tests for error rendering and exception handler registration."""

from __future__ import annotations

import logging

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError
from sqlalchemy.exc import OperationalError
from starlette.exceptions import HTTPException as StarletteHTTPException

from liga.core.errors import ApiError
from liga.core.errors import AuthenticationError
from liga.core.errors import AuthorizationError
from liga.core.errors import BadRequestError
from liga.core.errors import ConflictError
from liga.core.errors import DatabaseError
from liga.core.errors import ErrorKind
from liga.core.errors import ExternalServiceError
from liga.core.errors import FieldValidationError
from liga.core.errors import InternalError
from liga.core.errors import JsonParsingError
from liga.core.errors import NotFoundError
from liga.core.errors import RateLimitError
from liga.core.errors import TournamentError
from liga.core.errors import UserError
from liga.core.handlers import build_error_response
from liga.core.handlers import register_error_handlers
from liga.core.handlers import render_api_error
from liga.core.validation import ValidationBuilder
from liga.core.validators import email
from liga.core.validators import required
from liga.schemas.error import ApiErrorResponse

HANDLER_LOGGER = "liga.core.handlers"


class _Item(BaseModel):
    count: int


def _build_client(*, raise_server_exceptions: bool = False) -> TestClient:
    app = FastAPI()
    register_error_handlers(app)

    @app.post("/items")
    def create_item(item: _Item) -> dict[str, int]:
        return {"count": item.count}

    @app.get("/not-found")
    def not_found() -> None:
        raise NotFoundError(resource="tournament", id="123")

    @app.get("/validation")
    def validation() -> None:
        (
            ValidationBuilder()
            .check(lambda: required(None, "username"))
            .check(lambda: email("nope", "email"))
            .build_unit()
        )

    @app.get("/duplicate")
    def duplicate() -> None:
        raise IntegrityError("INSERT INTO users", {}, Exception("duplicate key value violates unique constraint"))

    @app.get("/db-down")
    def db_down() -> None:
        raise OperationalError("SELECT 1", {}, Exception("connection timeout expired"))

    @app.get("/http")
    def http_error() -> None:
        raise StarletteHTTPException(status_code=403, detail="Organisers only")

    @app.get("/boom")
    def boom() -> None:
        raise RuntimeError("secret internals")

    return TestClient(app, raise_server_exceptions=raise_server_exceptions)


def _assert_envelope(payload: dict) -> None:
    assert set(payload) == {"success", "message", "error_code", "details", "request_id"}
    assert payload["success"] is False
    assert payload["request_id"] is None


def test_api_errors_render_the_wire_envelope() -> None:
    client = _build_client()

    response = client.get("/not-found")

    assert response.status_code == 404
    assert response.json() == {
        "success": False,
        "message": "Resource not found: tournament with id 123",
        "error_code": "NOT_FOUND",
        "details": {"resource": "tournament", "id": "123"},
        "request_id": None,
    }


def test_accumulated_validation_errors_render_every_field() -> None:
    client = _build_client()

    response = client.get("/validation")

    assert response.status_code == 400
    payload = response.json()
    _assert_envelope(payload)
    assert payload["error_code"] == "VALIDATION_ERROR"
    assert payload["message"] == "Validation error: username is required"
    assert payload["details"] == {
        "field": "username",
        "fields": {"username": ["username is required"], "email": ["Invalid email format"]},
    }


def test_request_validation_errors_become_json_parsing_errors() -> None:
    client = _build_client()

    response = client.post("/items", json={"count": "many"})

    assert response.status_code == 400
    payload = response.json()
    _assert_envelope(payload)
    assert payload["error_code"] == "JSON_PARSING_ERROR"
    assert payload["message"].startswith("JSON parsing error: count: ")


def test_malformed_json_becomes_json_parsing_error() -> None:
    client = _build_client()

    response = client.post("/items", content=b"{not json", headers={"Content-Type": "application/json"})

    assert response.status_code == 400
    assert response.json()["error_code"] == "JSON_PARSING_ERROR"


def test_data_store_errors_are_classified() -> None:
    client = _build_client()

    duplicate = client.get("/duplicate")
    db_down = client.get("/db-down")

    assert duplicate.status_code == 409
    assert duplicate.json()["message"] == "Conflict: Resource already exists"
    assert db_down.status_code == 500
    assert db_down.json()["error_code"] == "DATABASE_ERROR"
    assert db_down.json()["message"] == "Database error: Database connection error"


def test_http_exceptions_are_mapped_into_the_taxonomy() -> None:
    client = _build_client()

    forbidden = client.get("/http")
    missing_route = client.get("/no-such-route")

    assert forbidden.status_code == 403
    assert forbidden.json()["error_code"] == "AUTHORIZATION_ERROR"
    assert forbidden.json()["message"] == "Authorization error: Organisers only"
    assert missing_route.status_code == 404
    assert missing_route.json()["details"] == {"resource": "route", "id": "/no-such-route"}


def test_unhandled_exceptions_do_not_leak_internals() -> None:
    client = _build_client()

    response = client.get("/boom")

    assert response.status_code == 500
    payload = response.json()
    _assert_envelope(payload)
    assert payload["error_code"] == "INTERNAL_SERVER_ERROR"
    assert payload["message"] == "Internal server error: Unexpected error"
    assert "secret" not in response.text


def test_unhandled_exceptions_are_not_re_raised_to_the_server(caplog: pytest.LogCaptureFixture) -> None:
    client = _build_client(raise_server_exceptions=True)

    with caplog.at_level(logging.DEBUG):
        response = client.get("/boom")

    assert response.status_code == 500
    assert response.json()["error_code"] == "INTERNAL_SERVER_ERROR"
    error_records = [record for record in caplog.records if record.levelno >= logging.ERROR]
    assert len(error_records) == 1
    assert error_records[0].name == HANDLER_LOGGER
    assert isinstance(error_records[0].exc_info[1], RuntimeError)


@pytest.mark.parametrize(
    ("error", "level", "prefix"),
    [
        (DatabaseError(message="down"), logging.ERROR, "API Error: "),
        (InternalError(message="boom"), logging.ERROR, "API Error: "),
        (ExternalServiceError(service="mail", message="down"), logging.ERROR, "API Error: "),
        (FieldValidationError(message="bad", field="email"), logging.WARNING, "API Warning: "),
        (NotFoundError(resource="user", id="1"), logging.WARNING, "API Warning: "),
        (ConflictError(message="dup"), logging.WARNING, "API Warning: "),
    ],
)
def test_render_logs_exactly_once_at_the_variant_severity(
    caplog: pytest.LogCaptureFixture,
    error: ApiError,
    level: int,
    prefix: str,
) -> None:
    with caplog.at_level(logging.DEBUG, logger=HANDLER_LOGGER):
        response = render_api_error(error)

    records = [record for record in caplog.records if record.name == HANDLER_LOGGER]
    assert len(records) == 1
    assert records[0].levelno == level
    assert records[0].getMessage() == f"{prefix}{error}"
    assert response.status_code == error.status_code()


def test_render_passes_request_id_through() -> None:
    response = render_api_error(ConflictError(message="dup"), request_id="req-42")

    assert b'"request_id":"req-42"' in response.body


ROUND_TRIP_ERRORS = [
    DatabaseError(message="down"),
    FieldValidationError(message="bad"),
    FieldValidationError(message="bad", field="email", field_errors={"email": ["bad"]}),
    AuthenticationError(message="no token"),
    AuthorizationError(message="organisers only"),
    NotFoundError(resource="tournament", id="123"),
    ConflictError(message="dup"),
    RateLimitError(message="slow down"),
    ExternalServiceError(service="mail", message="down"),
    InternalError(message="boom"),
    BadRequestError(message="nope"),
    JsonParsingError(message="eof"),
    TournamentError(message="closed"),
    TournamentError(message="closed", tournament_id="t1"),
    UserError(message="banned"),
    UserError(message="banned", user_id="u1"),
]


@pytest.mark.parametrize("error", ROUND_TRIP_ERRORS)
def test_error_response_serialization_round_trip(error: ApiError) -> None:
    response = build_error_response(error)

    restored = ApiErrorResponse.model_validate_json(response.model_dump_json())

    assert restored == response
    assert restored.details == error.details()


def test_round_trip_cases_cover_every_variant() -> None:
    assert {error.kind for error in ROUND_TRIP_ERRORS} == set(ErrorKind)


def test_error_response_builders() -> None:
    response = ApiErrorResponse(message="Test error", error_code="TEST_ERROR")

    assert response.success is False
    assert response.details is None
    assert response.request_id is None
    assert response.with_details({"field": "x"}).details == {"field": "x"}
    assert response.with_request_id("abc").request_id == "abc"
