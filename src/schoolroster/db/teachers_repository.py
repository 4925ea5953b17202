"""Repository functions for teachers table.

Provides CRUD operations for the teachers table.
"""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass

import structlog

from schoolroster.core.errors import Conflict, NotFound
from schoolroster.db.database import new_id, use_connection

logger = structlog.get_logger(__name__)


@dataclass
class TeacherRecord:
    """Teacher record from database."""

    teacher_id: str
    name: str
    subject: str
    experience_years: int
    email: str | None
    created_at: str


def insert_teacher(
    name: str,
    subject: str,
    experience_years: int = 0,
    email: str | None = None,
    conn: sqlite3.Connection | None = None,
) -> TeacherRecord:
    """Insert a new teacher record.

    Args:
        name: Teacher name
        subject: Subject taught
        experience_years: Years of experience
        email: Optional email, already normalized
        conn: Open connection to join an existing transaction

    Returns:
        The stored TeacherRecord with its assigned ID

    Raises:
        Conflict: If email is already taken
    """
    teacher_id = new_id()

    try:
        with use_connection(conn) as db:
            db.execute(
                """
                INSERT INTO teachers (teacher_id, name, subject, experience_years, email)
                VALUES (?, ?, ?, ?, ?)
                """,
                (teacher_id, name, subject, experience_years, email),
            )
            row = db.execute(
                "SELECT * FROM teachers WHERE teacher_id = ?", (teacher_id,)
            ).fetchone()
    except sqlite3.IntegrityError as e:
        raise Conflict("email", email) from e

    logger.debug("teachers.inserted", teacher_id=teacher_id)
    return _row_to_record(row)


def get_teacher_by_id(
    teacher_id: str, conn: sqlite3.Connection | None = None
) -> TeacherRecord | None:
    """Get teacher by ID.

    Returns:
        TeacherRecord if found, None otherwise
    """
    with use_connection(conn) as db:
        row = db.execute(
            "SELECT * FROM teachers WHERE teacher_id = ?", (teacher_id,)
        ).fetchone()

    return _row_to_record(row) if row else None


def get_teacher_by_email(email: str) -> TeacherRecord | None:
    """Get teacher by (normalized) email."""
    with use_connection() as db:
        row = db.execute(
            "SELECT * FROM teachers WHERE email = ?", (email,)
        ).fetchone()

    return _row_to_record(row) if row else None


def get_all_teachers() -> list[TeacherRecord]:
    """Get all teachers, oldest first."""
    with use_connection() as db:
        rows = db.execute(
            "SELECT * FROM teachers ORDER BY created_at, rowid"
        ).fetchall()

    return [_row_to_record(row) for row in rows]


def update_teacher(record: TeacherRecord) -> TeacherRecord:
    """Persist all mutable fields of an existing teacher.

    Raises:
        NotFound: If the teacher no longer exists
        Conflict: If the new email is already taken
    """
    try:
        with use_connection() as db:
            cursor = db.execute(
                """
                UPDATE teachers SET
                    name = ?,
                    subject = ?,
                    experience_years = ?,
                    email = ?
                WHERE teacher_id = ?
                """,
                (
                    record.name,
                    record.subject,
                    record.experience_years,
                    record.email,
                    record.teacher_id,
                ),
            )
    except sqlite3.IntegrityError as e:
        raise Conflict("email", record.email) from e

    if cursor.rowcount == 0:
        raise NotFound("teacher", record.teacher_id)

    logger.debug("teachers.updated", teacher_id=record.teacher_id)
    return record


def delete_teacher(
    teacher_id: str, conn: sqlite3.Connection | None = None
) -> bool:
    """Delete teacher by ID.

    Returns:
        True if deleted, False if not found
    """
    with use_connection(conn) as db:
        cursor = db.execute(
            "DELETE FROM teachers WHERE teacher_id = ?", (teacher_id,)
        )

    deleted = cursor.rowcount > 0
    if deleted:
        logger.debug("teachers.deleted", teacher_id=teacher_id)

    return deleted


def _row_to_record(row) -> TeacherRecord:
    """Convert database row to TeacherRecord."""
    return TeacherRecord(
        teacher_id=row["teacher_id"],
        name=row["name"],
        subject=row["subject"],
        experience_years=row["experience_years"],
        email=row["email"],
        created_at=row["created_at"],
    )
