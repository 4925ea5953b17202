"""Teacher operations."""

from __future__ import annotations

from dataclasses import replace
from typing import Any

import structlog

from schoolroster.core import cascade
from schoolroster.core.errors import NotFound
from schoolroster.core.references import require_key
from schoolroster.core.uniqueness import ensure_email_unique
from schoolroster.core.validation import validate_teacher
from schoolroster.db import students_repository, teachers_repository
from schoolroster.db.students_repository import StudentRecord
from schoolroster.db.teachers_repository import TeacherRecord

logger = structlog.get_logger(__name__)


def list_teachers() -> list[TeacherRecord]:
    return teachers_repository.get_all_teachers()


def get_teacher(teacher_id: str) -> TeacherRecord:
    """Get a teacher or raise InvalidKey / NotFound."""
    require_key(teacher_id, "teacher")
    teacher = teachers_repository.get_teacher_by_id(teacher_id)
    if teacher is None:
        raise NotFound("teacher", teacher_id)
    return teacher


def list_students_for_teacher(teacher_id: str) -> list[StudentRecord]:
    """Students currently assigned to an existing teacher."""
    get_teacher(teacher_id)
    return students_repository.get_students(teacher_id=teacher_id)


def create_teacher(data: dict[str, Any]) -> TeacherRecord:
    """Validate and create a teacher.

    Raises:
        ValidationError: If required fields are missing or malformed
        Conflict: If the email is already taken
    """
    fields = validate_teacher(data).unwrap()
    ensure_email_unique(fields["email"])

    teacher = teachers_repository.insert_teacher(
        name=fields["name"],
        subject=fields["subject"],
        experience_years=fields["experience_years"],
        email=fields["email"],
    )
    logger.info("teacher.created", teacher_id=teacher.teacher_id)
    return teacher


def update_teacher(teacher_id: str, data: dict[str, Any]) -> TeacherRecord:
    """Apply a partial update to a teacher.

    Only keys present in data are changed.
    """
    teacher = get_teacher(teacher_id)
    fields = validate_teacher(data, partial=True).unwrap()

    if "email" in fields and fields["email"] != teacher.email:
        ensure_email_unique(fields["email"], current_id=teacher_id)

    updated = teachers_repository.update_teacher(replace(teacher, **fields))
    logger.info("teacher.updated", teacher_id=teacher_id, fields=sorted(fields))
    return updated


def delete_teacher(teacher_id: str) -> cascade.CascadeReport:
    """Delete a teacher, unassigning all of their students first."""
    return cascade.delete_teacher(teacher_id)
