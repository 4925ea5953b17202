"""Book operations."""

from __future__ import annotations

from dataclasses import replace
from typing import Any

import structlog

from schoolroster.core.context import RequestContext
from schoolroster.core.errors import NotFound
from schoolroster.core.references import require_key, resolve_student_references
from schoolroster.core.uniqueness import ensure_isbn_unique
from schoolroster.core.validation import validate_book
from schoolroster.db import books_repository
from schoolroster.db.books_repository import BookRecord

logger = structlog.get_logger(__name__)


def list_books(assigned_to_student: str | None = None) -> list[BookRecord]:
    """List books, optionally only those assigned to one student.

    Raises:
        InvalidKey: If the student filter is malformed
    """
    if assigned_to_student is not None:
        require_key(assigned_to_student, "student")
    return books_repository.get_books(assigned_to_student=assigned_to_student)


def get_book(book_id: str) -> BookRecord:
    """Get a book or raise InvalidKey / NotFound."""
    require_key(book_id, "book")
    book = books_repository.get_book_by_id(book_id)
    if book is None:
        raise NotFound("book", book_id)
    return book


def create_book(context: RequestContext, data: dict[str, Any]) -> BookRecord:
    """Validate and create a book owned by the acting user.

    Every assigned student is checked before anything is written; one bad
    reference rejects the whole book.

    Raises:
        ValidationError: If required fields are missing or malformed
        Conflict: If the ISBN is already taken
        InvalidKey / NotFound: If any assigned student reference is bad
    """
    fields = validate_book(data).unwrap()
    ensure_isbn_unique(fields["isbn"])
    assigned = resolve_student_references(fields["assigned_students"])

    book = books_repository.insert_book(
        title=fields["title"],
        author=fields["author"],
        isbn=fields["isbn"],
        created_by=context.user_id,
        published_year=fields["published_year"],
        assigned_students=assigned,
    )
    logger.info(
        "book.created",
        book_id=book.book_id,
        created_by=context.user_id,
        assigned=len(assigned),
    )
    return book


def update_book(book_id: str, data: dict[str, Any]) -> BookRecord:
    """Apply a partial update to a book.

    A present assigned_students replaces the whole assignment set.
    """
    book = get_book(book_id)
    fields = validate_book(data, partial=True).unwrap()

    if "isbn" in fields and fields["isbn"] != book.isbn:
        ensure_isbn_unique(fields["isbn"], current_id=book_id)

    if "assigned_students" in fields:
        fields["assigned_students"] = resolve_student_references(
            fields["assigned_students"]
        )

    updated = books_repository.update_book(replace(book, **fields))
    logger.info("book.updated", book_id=book_id, fields=sorted(fields))
    return updated


def delete_book(book_id: str) -> None:
    """Delete a book. Books have no dependents."""
    require_key(book_id, "book")
    if not books_repository.delete_book(book_id):
        raise NotFound("book", book_id)
    logger.info("book.deleted", book_id=book_id)
