"""Unit tests for single-constraint validator primitives."""

from __future__ import annotations

import pytest

from liga.core import validators
from liga.core.validation import ValidationError


def test_required_returns_trimmed_value() -> None:
    assert validators.required("  test  ", "field") == "test"


@pytest.mark.parametrize("value", [None, "", "   "])
def test_required_rejects_absent_or_blank(value: str | None) -> None:
    error = validators.required(value, "username")

    assert isinstance(error, ValidationError)
    assert error.code == "REQUIRED"
    assert error.field == "username"
    assert error.message == "username is required"


def test_length_bounds_are_inclusive() -> None:
    assert validators.length("abc", 3, 3, "f") is None
    assert validators.length("hello", 3, 10, "f") is None

    too_short = validators.length("ab", 3, 3, "f")
    too_long = validators.length("this is too long for the limit", 3, 10, "f")

    assert too_short is not None and too_short.code == "LENGTH"
    assert too_long is not None and too_long.code == "LENGTH"
    assert too_short.message == "f must be between 3 and 3 characters"


def test_length_counts_characters_not_bytes() -> None:
    assert validators.length("ñçé", 3, 3, "f") is None
    assert validators.length("日本語です", 1, 5, "f") is None


@pytest.mark.parametrize(
    "value",
    ["a@b.co", "user@example.com", "test.user+tag@domain.co.uk", "a@bc"],
)
def test_email_accepts_coarse_valid_addresses(value: str) -> None:
    assert validators.email(value, "email") is None


@pytest.mark.parametrize(
    "value",
    ["@b.co", "a@", "", "invalid-email", "a@b", "a@b@c.com", "usér@example.com", "tab\t@example.com"],
)
def test_email_rejects_malformed_addresses(value: str) -> None:
    error = validators.email(value, "email")

    assert error is not None
    assert error.code == "INVALID_EMAIL"
    assert error.message == "Invalid email format"


def test_email_length_limit_is_exclusive() -> None:
    local = "a" * 250
    assert validators.email(f"{local}@b.c", "email") is None  # 254 characters
    assert validators.email(f"{local}@bc.d", "email") is not None  # 255 characters


@pytest.mark.parametrize("value", ["user123", "test-user", "user_name", "ñandú", "a" * 50])
def test_username_accepts_valid_names(value: str) -> None:
    assert validators.username(value, "username") is None


@pytest.mark.parametrize("value", ["us", "-user", "_user", "user@name", "user name", "a" * 51])
def test_username_rejects_invalid_names(value: str) -> None:
    error = validators.username(value, "username")

    assert error is not None
    assert error.code == "INVALID_USERNAME"


@pytest.mark.parametrize("value", ["Password123", "MyStr0ngP@ss"])
def test_password_accepts_strong_passwords(value: str) -> None:
    assert validators.password(value, "password") is None


@pytest.mark.parametrize(
    "value",
    ["password123", "PASSWORD", "Pass1", "PasswordOnly", "PASSWORD123", "Aa1" + "x" * 126],
)
def test_password_rejects_weak_passwords(value: str) -> None:
    error = validators.password(value, "password")

    assert error is not None
    assert error.code == "WEAK_PASSWORD"


@pytest.mark.parametrize("value", ["My Tournament", "Spring Championship 2024", "abc", "x" * 100])
def test_tournament_name_accepts_valid_names(value: str) -> None:
    assert validators.tournament_name(value, "name") is None


@pytest.mark.parametrize("value", ["", "  ", "ab", "     ", "x" * 101])
def test_tournament_name_rejects_invalid_names(value: str) -> None:
    error = validators.tournament_name(value, "name")

    assert error is not None
    assert error.code == "INVALID_TOURNAMENT_NAME"


def test_uuid_format_is_a_shape_check() -> None:
    assert validators.uuid_format("123e4567-e89b-12d3-a456-426614174000", "id") is None

    error = validators.uuid_format("not-a-uuid", "id")
    assert error is not None and error.code == "INVALID_UUID"


def test_positive_integer() -> None:
    assert validators.positive_integer(5, "count") is None

    for value in (0, -1):
        error = validators.positive_integer(value, "count")
        assert error is not None
        assert error.code == "NOT_POSITIVE"
        assert error.message == "count must be a positive integer"


def test_in_range_is_inclusive() -> None:
    assert validators.in_range(5, 1, 10, "seats") is None
    assert validators.in_range(1, 1, 10, "seats") is None
    assert validators.in_range(10, 1, 10, "seats") is None

    for value in (0, 11):
        error = validators.in_range(value, 1, 10, "seats")
        assert error is not None
        assert error.code == "OUT_OF_RANGE"
        assert error.message == "seats must be between 1 and 10"


def test_missing_required_fields_keeps_input_order() -> None:
    fields = [("username", "neo"), ("email", None), ("name", "   "), ("bio", "hi")]

    assert validators.missing_required_fields(fields) == ["email", "name"]
