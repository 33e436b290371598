"""Field-level validation errors and the accumulating validation builder."""

from __future__ import annotations

from collections.abc import Callable
from collections.abc import Iterable
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any
from typing import TypeVar

T = TypeVar("T")

GENERAL_FIELD = "_general"


@dataclass(frozen=True)
class ValidationError:
    """One failed constraint on an input field."""

    message: str
    code: str
    field: str | None = None

    @classmethod
    def with_field(cls, message: str, field: str, code: str) -> ValidationError:
        return cls(message=message, code=code, field=field)

    def __str__(self) -> str:
        return f"Validation error: {self.message}"


class ValidationErrors(Exception):
    """Ordered failures collected during one validation pass.

    Raised by :meth:`ValidationBuilder.build` when at least one check failed.
    """

    def __init__(self, errors: Iterable[ValidationError] | None = None) -> None:
        self.errors: list[ValidationError] = list(errors) if errors else []
        super().__init__(self.errors)

    def add(self, error: ValidationError) -> None:
        self.errors.append(error)

    def add_error(self, message: str, field: str, code: str) -> None:
        self.add(ValidationError.with_field(message, field, code))

    def has_errors(self) -> bool:
        return bool(self.errors)

    def first(self) -> ValidationError | None:
        return self.errors[0] if self.errors else None

    def to_field_map(self) -> dict[str, list[str]]:
        """Group messages by field name, keeping validator order per field."""
        field_map: dict[str, list[str]] = {}
        for error in self.errors:
            field_map.setdefault(error.field or GENERAL_FIELD, []).append(error.message)
        return field_map

    def __iter__(self) -> Iterator[ValidationError]:
        return iter(self.errors)

    def __str__(self) -> str:
        return "; ".join(error.message for error in self.errors) or "No validation errors"


class ValidationBuilder:
    """Run independent checks and collect every failure.

    Each check is a zero-argument callable wrapping one validator call. A check
    fails only when it returns a :class:`ValidationError`; any other return
    value (``None``, a trimmed string) counts as success.
    """

    def __init__(self) -> None:
        self._errors = ValidationErrors()

    def check(self, validation: Callable[[], Any]) -> ValidationBuilder:
        outcome = validation()
        if isinstance(outcome, ValidationError):
            self._errors.add(outcome)
        return self

    @property
    def errors(self) -> ValidationErrors:
        return self._errors

    def build(self, success_value: T) -> T:
        if self._errors.has_errors():
            raise self._errors
        return success_value

    def build_unit(self) -> None:
        self.build(None)


def validate(*validations: Callable[[], Any]) -> None:
    """Run all checks in order and raise :class:`ValidationErrors` if any failed."""
    builder = ValidationBuilder()
    for validation in validations:
        builder.check(validation)
    builder.build_unit()
