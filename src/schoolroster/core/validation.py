"""Field validation for teacher, student and book payloads.

Each validator takes a plain dict and returns a ValidationResult holding
either the cleaned fields or the list of problems. Validators never touch
the store; references and uniqueness are checked separately.

With partial=True (updates) only the keys present in the payload are
validated and returned, so callers can tell "absent" from "set to None".
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from schoolroster.core.errors import ValidationError

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+\.[a-zA-Z0-9-.]+$")

MAX_YEAR = 9999


@dataclass
class ValidationResult:
    """Outcome of validating a payload."""

    value: dict[str, Any] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.errors

    def unwrap(self) -> dict[str, Any]:
        """Return the cleaned fields or raise ValidationError."""
        if self.errors:
            raise ValidationError(self.errors)
        return self.value


def validate_email(email: str) -> bool:
    """Validate email format. Empty string is valid (optional field)."""
    if not email:
        return True
    return bool(EMAIL_PATTERN.match(email))


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class _Checker:
    """Accumulates cleaned fields and errors for one payload."""

    def __init__(self, data: dict[str, Any], partial: bool):
        self.data = data
        self.partial = partial
        self.result = ValidationResult()

    def _skip(self, key: str) -> bool:
        return self.partial and key not in self.data

    def required_str(self, key: str) -> None:
        if self._skip(key):
            return
        value = self.data.get(key)
        if not isinstance(value, str) or not value.strip():
            self.result.errors.append(f"{key} is required")
            return
        self.result.value[key] = value.strip()

    def optional_int(
        self,
        key: str,
        minimum: int = 0,
        maximum: int | None = None,
        default: int | None = None,
    ) -> None:
        if self._skip(key):
            return
        value = self.data.get(key)
        if value is None:
            # An update never resets a defaulted field; null keeps the stored value.
            if not (self.partial and default is not None):
                self.result.value[key] = default
            return
        if not _is_int(value) or value < minimum or (
            maximum is not None and value > maximum
        ):
            bound = f"between {minimum} and {maximum}" if maximum else f">= {minimum}"
            self.result.errors.append(f"{key} must be an integer {bound}")
            return
        self.result.value[key] = value

    def email(self, key: str) -> None:
        if self._skip(key):
            return
        value = self.data.get(key)
        if value is None or (isinstance(value, str) and not value.strip()):
            self.result.value[key] = None
            return
        if not isinstance(value, str) or not validate_email(value.strip()):
            self.result.errors.append(f"{key} has an invalid format")
            return
        self.result.value[key] = value.strip().lower()

    def optional_ref(self, key: str) -> None:
        if self._skip(key):
            return
        value = self.data.get(key)
        if value is not None and not isinstance(value, str):
            self.result.errors.append(f"{key} must be an identifier or null")
            return
        self.result.value[key] = value

    def ref_list(self, key: str) -> None:
        if self._skip(key):
            return
        value = self.data.get(key)
        if value is None:
            self.result.value[key] = []
            return
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            self.result.errors.append(f"{key} must be a list of identifiers")
            return
        self.result.value[key] = list(value)


def validate_teacher(data: dict[str, Any], partial: bool = False) -> ValidationResult:
    """Validate a teacher payload (name, subject, experience_years, email)."""
    check = _Checker(data, partial)
    check.required_str("name")
    check.required_str("subject")
    check.optional_int("experience_years", default=0)
    check.email("email")
    return check.result


def validate_student(data: dict[str, Any], partial: bool = False) -> ValidationResult:
    """Validate a student payload (name, grade, roll_number, age, teacher_id)."""
    check = _Checker(data, partial)
    check.required_str("name")
    check.required_str("grade")
    check.required_str("roll_number")
    check.optional_int("age")
    check.optional_ref("teacher_id")
    return check.result


def validate_book(data: dict[str, Any], partial: bool = False) -> ValidationResult:
    """Validate a book payload.

    Fields: title, author, isbn, published_year, assigned_students.
    """
    check = _Checker(data, partial)
    check.required_str("title")
    check.required_str("author")
    check.required_str("isbn")
    check.optional_int("published_year", minimum=1, maximum=MAX_YEAR)
    check.ref_list("assigned_students")
    return check.result
