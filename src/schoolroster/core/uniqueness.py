"""Unique-field checks for roll number, ISBN and teacher email.

The check runs before the write and is not transactional: two concurrent
writers can both pass it. The store's UNIQUE constraints catch the loser,
which surfaces as Conflict from the repository.
"""

from __future__ import annotations

from schoolroster.core.errors import Conflict
from schoolroster.db import books_repository, students_repository, teachers_repository


def ensure_unique(
    field: str,
    value: object,
    existing_id: str | None,
    current_id: str | None = None,
) -> None:
    """Raise Conflict if another record already holds a unique value.

    Args:
        field: Name of the unique field
        value: Candidate value
        existing_id: ID of the record currently holding the value, if any
        current_id: ID of the record being updated (None on create)
    """
    if existing_id is not None and existing_id != current_id:
        raise Conflict(field, value)


def ensure_roll_number_unique(roll_number: str, current_id: str | None = None) -> None:
    existing = students_repository.get_student_by_roll_number(roll_number)
    ensure_unique(
        "roll_number", roll_number, existing.student_id if existing else None, current_id
    )


def ensure_isbn_unique(isbn: str, current_id: str | None = None) -> None:
    existing = books_repository.get_book_by_isbn(isbn)
    ensure_unique("isbn", isbn, existing.book_id if existing else None, current_id)


def ensure_email_unique(email: str | None, current_id: str | None = None) -> None:
    """Emails are optional; a missing email never conflicts."""
    if not email:
        return
    existing = teachers_repository.get_teacher_by_email(email)
    ensure_unique("email", email, existing.teacher_id if existing else None, current_id)
