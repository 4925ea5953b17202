"""Reference validation for foreign keys.

Confirms that a teacher reference or a list of student references names
existing records before a write is committed. All checks are read-only.
"""

from __future__ import annotations

from schoolroster.core.errors import InvalidKey, NotFound
from schoolroster.db import students_repository, teachers_repository
from schoolroster.db.database import is_valid_key


def require_key(value: object, entity: str) -> str:
    """Check that a value is syntactically a store key.

    Raises:
        InvalidKey: If the value is malformed
    """
    if not is_valid_key(value):
        raise InvalidKey(entity, value)
    return value  # type: ignore[return-value]


def resolve_teacher_reference(teacher_id: str | None) -> str | None:
    """Validate an optional teacher reference.

    Returns:
        The teacher ID, or None when no teacher is referenced

    Raises:
        InvalidKey: If the ID is malformed
        NotFound: If no teacher has that ID
    """
    if teacher_id is None:
        return None

    require_key(teacher_id, "teacher")
    if teachers_repository.get_teacher_by_id(teacher_id) is None:
        raise NotFound("teacher", teacher_id)
    return teacher_id


def resolve_student_references(student_ids: list[str]) -> list[str]:
    """Validate a list of student references.

    Every identifier is checked for shape first, then for existence. The
    first bad reference fails the whole list, so nothing is ever partially
    applied.

    Returns:
        De-duplicated IDs in order of first occurrence

    Raises:
        InvalidKey: If any ID is malformed
        NotFound: If any ID names no student
    """
    unique_ids = list(dict.fromkeys(student_ids))

    for student_id in unique_ids:
        require_key(student_id, "student")

    for student_id in unique_ids:
        if students_repository.get_student_by_id(student_id) is None:
            raise NotFound("student", student_id)

    return unique_ids
