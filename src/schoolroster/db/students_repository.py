"""Repository functions for students table.

Provides CRUD operations for the students table, plus the bulk
teacher-unassignment used when a teacher is deleted.
"""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass

import structlog

from schoolroster.core.errors import Conflict, NotFound
from schoolroster.db.database import new_id, use_connection

logger = structlog.get_logger(__name__)


@dataclass
class StudentRecord:
    """Student record from database."""

    student_id: str
    name: str
    grade: str
    roll_number: str
    age: int | None
    teacher_id: str | None
    created_at: str


def insert_student(
    name: str,
    grade: str,
    roll_number: str,
    age: int | None = None,
    teacher_id: str | None = None,
) -> StudentRecord:
    """Insert a new student record.

    Args:
        name: Student name
        grade: Grade or class label
        roll_number: Unique roll number
        age: Optional age
        teacher_id: Optional reference to an existing teacher

    Returns:
        The stored StudentRecord with its assigned ID

    Raises:
        Conflict: If roll_number already exists
    """
    student_id = new_id()

    try:
        with use_connection() as db:
            db.execute(
                """
                INSERT INTO students (student_id, name, grade, roll_number, age, teacher_id)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (student_id, name, grade, roll_number, age, teacher_id),
            )
            row = db.execute(
                "SELECT * FROM students WHERE student_id = ?", (student_id,)
            ).fetchone()
    except sqlite3.IntegrityError as e:
        raise Conflict("roll_number", roll_number) from e

    logger.debug("students.inserted", student_id=student_id)
    return _row_to_record(row)


def get_student_by_id(
    student_id: str, conn: sqlite3.Connection | None = None
) -> StudentRecord | None:
    """Get student by ID.

    Returns:
        StudentRecord if found, None otherwise
    """
    with use_connection(conn) as db:
        row = db.execute(
            "SELECT * FROM students WHERE student_id = ?", (student_id,)
        ).fetchone()

    return _row_to_record(row) if row else None


def get_student_by_roll_number(roll_number: str) -> StudentRecord | None:
    """Get student by roll number."""
    with use_connection() as db:
        row = db.execute(
            "SELECT * FROM students WHERE roll_number = ?", (roll_number,)
        ).fetchone()

    return _row_to_record(row) if row else None


def get_students(teacher_id: str | None = None) -> list[StudentRecord]:
    """Get all students, optionally only those of one teacher."""
    with use_connection() as db:
        if teacher_id is None:
            rows = db.execute(
                "SELECT * FROM students ORDER BY created_at, rowid"
            ).fetchall()
        else:
            rows = db.execute(
                "SELECT * FROM students WHERE teacher_id = ? ORDER BY created_at, rowid",
                (teacher_id,),
            ).fetchall()

    return [_row_to_record(row) for row in rows]


def update_student(record: StudentRecord) -> StudentRecord:
    """Persist all mutable fields of an existing student.

    Raises:
        NotFound: If the student no longer exists
        Conflict: If the new roll number is already taken
    """
    try:
        with use_connection() as db:
            cursor = db.execute(
                """
                UPDATE students SET
                    name = ?,
                    grade = ?,
                    roll_number = ?,
                    age = ?,
                    teacher_id = ?
                WHERE student_id = ?
                """,
                (
                    record.name,
                    record.grade,
                    record.roll_number,
                    record.age,
                    record.teacher_id,
                    record.student_id,
                ),
            )
    except sqlite3.IntegrityError as e:
        raise Conflict("roll_number", record.roll_number) from e

    if cursor.rowcount == 0:
        raise NotFound("student", record.student_id)

    logger.debug("students.updated", student_id=record.student_id)
    return record


def clear_teacher(teacher_id: str, conn: sqlite3.Connection | None = None) -> int:
    """Set teacher_id to NULL on every student of a teacher.

    Returns:
        Number of students unassigned (0 is a normal outcome)
    """
    with use_connection(conn) as db:
        cursor = db.execute(
            "UPDATE students SET teacher_id = NULL WHERE teacher_id = ?",
            (teacher_id,),
        )

    logger.debug(
        "students.teacher_cleared", teacher_id=teacher_id, count=cursor.rowcount
    )
    return cursor.rowcount


def delete_student(
    student_id: str, conn: sqlite3.Connection | None = None
) -> bool:
    """Delete student by ID.

    Returns:
        True if deleted, False if not found
    """
    with use_connection(conn) as db:
        cursor = db.execute(
            "DELETE FROM students WHERE student_id = ?", (student_id,)
        )

    deleted = cursor.rowcount > 0
    if deleted:
        logger.debug("students.deleted", student_id=student_id)

    return deleted


def _row_to_record(row) -> StudentRecord:
    """Convert database row to StudentRecord."""
    return StudentRecord(
        student_id=row["student_id"],
        name=row["name"],
        grade=row["grade"],
        roll_number=row["roll_number"],
        age=row["age"],
        teacher_id=row["teacher_id"],
        created_at=row["created_at"],
    )
