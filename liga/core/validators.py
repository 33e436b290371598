"""Single-constraint validator primitives.

Every primitive returns ``None`` on success (``required`` returns the trimmed
value) and a :class:`ValidationError` on failure. Nothing here raises.

The format checks are intentionally coarse heuristics. ``is_valid_email`` in
particular is a syntactic sanity check, not RFC 5322: it accepts any printable
ASCII around a single ``@``.
"""

from __future__ import annotations

from collections.abc import Iterable

from liga.core.validation import ValidationError

EMAIL_MIN_EXCLUSIVE = 3
EMAIL_MAX_EXCLUSIVE = 255
USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 50
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 128
TOURNAMENT_NAME_MIN_LENGTH = 3
TOURNAMENT_NAME_MAX_LENGTH = 100
UUID_LENGTH = 36

_PRINTABLE_ASCII = frozenset(chr(code) for code in range(0x20, 0x7F))
_ASCII_DIGITS = frozenset("0123456789")


def is_valid_email(email: str) -> bool:
    return (
        email.count("@") == 1
        and EMAIL_MIN_EXCLUSIVE < len(email) < EMAIL_MAX_EXCLUSIVE
        and not email.startswith("@")
        and not email.endswith("@")
        and all(char in _PRINTABLE_ASCII for char in email)
    )


def is_valid_username(username: str) -> bool:
    if not USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH:
        return False
    if not username[0].isalnum():
        return False
    return all(char.isalnum() or char in "-_" for char in username)


def is_valid_tournament_name(name: str) -> bool:
    if not TOURNAMENT_NAME_MIN_LENGTH <= len(name) <= TOURNAMENT_NAME_MAX_LENGTH:
        return False
    return bool(name.strip())


def is_valid_password(password: str) -> bool:
    if not PASSWORD_MIN_LENGTH <= len(password) <= PASSWORD_MAX_LENGTH:
        return False
    has_lowercase = any(char.islower() for char in password)
    has_uppercase = any(char.isupper() for char in password)
    has_digit = any(char in _ASCII_DIGITS for char in password)
    return has_lowercase and has_uppercase and has_digit


def missing_required_fields(fields: Iterable[tuple[str, str | None]]) -> list[str]:
    """Return the names of absent or blank fields, in input order."""
    return [name for name, value in fields if value is None or not value.strip()]


def required(value: str | None, field: str) -> str | ValidationError:
    if value is not None and value.strip():
        return value.strip()
    return ValidationError.with_field(f"{field} is required", field, "REQUIRED")


def length(value: str, min_length: int, max_length: int, field: str) -> ValidationError | None:
    # len() counts code points, so multi-byte text is measured correctly.
    if min_length <= len(value) <= max_length:
        return None
    return ValidationError.with_field(
        f"{field} must be between {min_length} and {max_length} characters",
        field,
        "LENGTH",
    )


def email(value: str, field: str) -> ValidationError | None:
    if is_valid_email(value):
        return None
    return ValidationError.with_field("Invalid email format", field, "INVALID_EMAIL")


def username(value: str, field: str) -> ValidationError | None:
    if is_valid_username(value):
        return None
    return ValidationError.with_field(
        "Username must be 3-50 characters, start with alphanumeric, "
        "and contain only alphanumeric, hyphens, or underscores",
        field,
        "INVALID_USERNAME",
    )


def password(value: str, field: str) -> ValidationError | None:
    if is_valid_password(value):
        return None
    return ValidationError.with_field(
        "Password must be 8-128 characters with at least one lowercase, uppercase, and digit",
        field,
        "WEAK_PASSWORD",
    )


def tournament_name(value: str, field: str) -> ValidationError | None:
    if is_valid_tournament_name(value):
        return None
    return ValidationError.with_field(
        "Tournament name must be 3-100 characters and not empty",
        field,
        "INVALID_TOURNAMENT_NAME",
    )


def uuid_format(value: str, field: str) -> ValidationError | None:
    if len(value) == UUID_LENGTH and value.count("-") == 4:
        return None
    return ValidationError.with_field("Invalid UUID format", field, "INVALID_UUID")


def positive_integer(value: int, field: str) -> ValidationError | None:
    if value > 0:
        return None
    return ValidationError.with_field(f"{field} must be a positive integer", field, "NOT_POSITIVE")


def in_range(value: int, minimum: int, maximum: int, field: str) -> ValidationError | None:
    if minimum <= value <= maximum:
        return None
    return ValidationError.with_field(
        f"{field} must be between {minimum} and {maximum}",
        field,
        "OUT_OF_RANGE",
    )

