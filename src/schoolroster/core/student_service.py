"""Student operations."""

from __future__ import annotations

from dataclasses import replace
from typing import Any

import structlog

from schoolroster.core import cascade
from schoolroster.core.errors import NotFound
from schoolroster.core.references import require_key, resolve_teacher_reference
from schoolroster.core.uniqueness import ensure_roll_number_unique
from schoolroster.core.validation import validate_student
from schoolroster.db import students_repository
from schoolroster.db.students_repository import StudentRecord

logger = structlog.get_logger(__name__)


def list_students(teacher_id: str | None = None) -> list[StudentRecord]:
    """List students, optionally filtered by teacher.

    Raises:
        InvalidKey: If the teacher filter is malformed
    """
    if teacher_id is not None:
        require_key(teacher_id, "teacher")
    return students_repository.get_students(teacher_id=teacher_id)


def get_student(student_id: str) -> StudentRecord:
    """Get a student or raise InvalidKey / NotFound."""
    require_key(student_id, "student")
    student = students_repository.get_student_by_id(student_id)
    if student is None:
        raise NotFound("student", student_id)
    return student


def create_student(data: dict[str, Any]) -> StudentRecord:
    """Validate and create a student.

    Order of checks: fields, roll number uniqueness, teacher reference.
    Nothing is written unless all of them pass.

    Raises:
        ValidationError: If required fields are missing or malformed
        Conflict: If the roll number is already taken
        InvalidKey / NotFound: If the teacher reference is bad
    """
    fields = validate_student(data).unwrap()
    ensure_roll_number_unique(fields["roll_number"])
    teacher_id = resolve_teacher_reference(fields["teacher_id"])

    student = students_repository.insert_student(
        name=fields["name"],
        grade=fields["grade"],
        roll_number=fields["roll_number"],
        age=fields["age"],
        teacher_id=teacher_id,
    )
    logger.info(
        "student.created", student_id=student.student_id, teacher_id=teacher_id
    )
    return student


def update_student(student_id: str, data: dict[str, Any]) -> StudentRecord:
    """Apply a partial update to a student.

    An explicit teacher_id of None unassigns the teacher; an absent
    teacher_id keeps the current one.
    """
    student = get_student(student_id)
    fields = validate_student(data, partial=True).unwrap()

    if "roll_number" in fields and fields["roll_number"] != student.roll_number:
        ensure_roll_number_unique(fields["roll_number"], current_id=student_id)

    if "teacher_id" in fields:
        fields["teacher_id"] = resolve_teacher_reference(fields["teacher_id"])

    updated = students_repository.update_student(replace(student, **fields))
    logger.info("student.updated", student_id=student_id, fields=sorted(fields))
    return updated


def delete_student(student_id: str) -> cascade.CascadeReport:
    """Delete a student, removing them from all book assignments first."""
    return cascade.delete_student(student_id)
