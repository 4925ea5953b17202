"""Cascade coordinator for teacher and student deletion.

Deleting a teacher unassigns them from their students; deleting a student
removes them from every book's assignment set. Dependent repair always runs
first and the target is deleted only after it succeeds, so a caller listing
dependents after a successful delete never sees the deleted ID.

Two commit modes are supported (see CascadeConfig):
- sequential: repair and delete are separate transactions. If the repair
  fails nothing is deleted; if the delete fails the repair stays applied,
  which leaves no dangling reference.
- atomic: repair and delete share one transaction.
"""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Generator

import structlog

from schoolroster.config.app_config import load_app_config
from schoolroster.core.errors import NotFound
from schoolroster.core.references import require_key
from schoolroster.db import books_repository, students_repository, teachers_repository
from schoolroster.db.database import get_db

logger = structlog.get_logger(__name__)


@dataclass
class CascadeReport:
    """Outcome of a cascading delete."""

    entity: str
    deleted_id: str
    repaired: int


@contextmanager
def _transaction_scope(
    mode: str,
) -> Generator[Callable[[], sqlite3.Connection | None], None, None]:
    """Yield a factory for the connection each cascade step should use.

    In atomic mode every step shares one open transaction; in sequential
    mode each step opens (and commits) its own.
    """
    if mode == "atomic":
        with get_db() as conn:
            yield lambda: conn
    else:
        yield lambda: None


def _resolve_mode(mode: str | None) -> str:
    return mode or load_app_config().cascade.mode


def delete_teacher(teacher_id: str, mode: str | None = None) -> CascadeReport:
    """Unassign a teacher from all students, then delete the teacher.

    Args:
        teacher_id: ID of the teacher to delete
        mode: "sequential" or "atomic"; defaults to the configured mode

    Returns:
        CascadeReport with the number of students unassigned

    Raises:
        InvalidKey: If the ID is malformed
        NotFound: If the teacher does not exist
        StoreUnavailable: If the store fails; nothing is deleted when the
            repair step fails
    """
    require_key(teacher_id, "teacher")
    mode = _resolve_mode(mode)

    with _transaction_scope(mode) as connection:
        if teachers_repository.get_teacher_by_id(teacher_id, conn=connection()) is None:
            raise NotFound("teacher", teacher_id)

        repaired = students_repository.clear_teacher(teacher_id, conn=connection())
        if not teachers_repository.delete_teacher(teacher_id, conn=connection()):
            raise NotFound("teacher", teacher_id)

    logger.info(
        "cascade.teacher_deleted",
        teacher_id=teacher_id,
        students_unassigned=repaired,
        mode=mode,
    )
    return CascadeReport(entity="teacher", deleted_id=teacher_id, repaired=repaired)


def delete_student(student_id: str, mode: str | None = None) -> CascadeReport:
    """Remove a student from all book assignments, then delete the student.

    Args:
        student_id: ID of the student to delete
        mode: "sequential" or "atomic"; defaults to the configured mode

    Returns:
        CascadeReport with the number of books repaired

    Raises:
        InvalidKey: If the ID is malformed
        NotFound: If the student does not exist
        StoreUnavailable: If the store fails; nothing is deleted when the
            repair step fails
    """
    require_key(student_id, "student")
    mode = _resolve_mode(mode)

    with _transaction_scope(mode) as connection:
        if students_repository.get_student_by_id(student_id, conn=connection()) is None:
            raise NotFound("student", student_id)

        repaired = books_repository.remove_student_from_books(
            student_id, conn=connection()
        )
        if not students_repository.delete_student(student_id, conn=connection()):
            raise NotFound("student", student_id)

    logger.info(
        "cascade.student_deleted",
        student_id=student_id,
        books_repaired=repaired,
        mode=mode,
    )
    return CascadeReport(entity="student", deleted_id=student_id, repaired=repaired)
