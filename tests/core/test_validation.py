"""Tests for payload validation."""

import pytest

from schoolroster.core.errors import ValidationError
from schoolroster.core.validation import (
    ValidationResult,
    validate_book,
    validate_email,
    validate_student,
    validate_teacher,
)


class TestValidationResult:
    """Tests for ValidationResult."""

    def test_success_unwraps_value(self):
        result = ValidationResult(value={"name": "Ana"})
        assert result.success is True
        assert result.unwrap() == {"name": "Ana"}

    def test_errors_raise_on_unwrap(self):
        result = ValidationResult(errors=["name is required"])
        assert result.success is False
        with pytest.raises(ValidationError) as exc_info:
            result.unwrap()
        assert exc_info.value.errors == ["name is required"]


class TestValidateStudent:
    """Tests for validate_student."""

    def test_trims_strings(self):
        result = validate_student({"name": " Ana ", "grade": " 5 ", "roll_number": " R1 "})

        assert result.success
        assert result.value == {
            "name": "Ana",
            "grade": "5",
            "roll_number": "R1",
            "age": None,
            "teacher_id": None,
        }

    def test_blank_required_field(self):
        result = validate_student({"name": "   ", "grade": "5", "roll_number": "R1"})
        assert result.errors == ["name is required"]

    def test_rejects_bool_age(self):
        result = validate_student({"name": "A", "grade": "5", "roll_number": "R1", "age": True})
        assert not result.success

    def test_partial_only_returns_present_keys(self):
        result = validate_student({"teacher_id": None}, partial=True)

        assert result.success
        assert result.value == {"teacher_id": None}

    def test_partial_rejects_null_required(self):
        result = validate_student({"grade": None}, partial=True)
        assert result.errors == ["grade is required"]


class TestValidateTeacher:
    """Tests for validate_teacher."""

    def test_experience_defaults_to_zero(self):
        result = validate_teacher({"name": "T", "subject": "Art"})
        assert result.value["experience_years"] == 0

    @pytest.mark.parametrize("email", ["", None, "   "])
    def test_empty_email_is_none(self, email):
        result = validate_teacher({"name": "T", "subject": "Art", "email": email})
        assert result.value["email"] is None


class TestValidateBook:
    """Tests for validate_book."""

    def test_assigned_students_must_be_strings(self):
        result = validate_book(
            {"title": "T", "author": "A", "isbn": "1", "assigned_students": [1, 2]}
        )
        assert result.errors == ["assigned_students must be a list of identifiers"]

    def test_year_bounds(self):
        result = validate_book({"title": "T", "author": "A", "isbn": "1", "published_year": 10000})
        assert not result.success

    def test_collects_all_errors(self):
        result = validate_book({})
        assert result.errors == [
            "title is required",
            "author is required",
            "isbn is required",
        ]


class TestValidateEmail:
    """Tests for validate_email."""

    def test_valid(self):
        assert validate_email("a.b+c@school.org")

    def test_invalid(self):
        assert not validate_email("a@b")

    def test_empty_is_valid(self):
        assert validate_email("")
