"""Repository functions for books table.

Provides CRUD operations for the books table. A book's assignment set lives
in book_students and is always read and written together with the book.
"""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass, field

import structlog

from schoolroster.core.errors import Conflict, NotFound
from schoolroster.db.database import new_id, use_connection

logger = structlog.get_logger(__name__)


@dataclass
class BookRecord:
    """Book record from database."""

    book_id: str
    title: str
    author: str
    isbn: str
    published_year: int | None
    created_by: str
    created_at: str
    assigned_students: list[str] = field(default_factory=list)


def insert_book(
    title: str,
    author: str,
    isbn: str,
    created_by: str,
    published_year: int | None = None,
    assigned_students: list[str] | None = None,
) -> BookRecord:
    """Insert a new book record with its assignment set.

    Args:
        title: Book title
        author: Author name
        isbn: Unique ISBN
        created_by: ID of the user creating the book
        published_year: Optional year of publication
        assigned_students: Already validated, de-duplicated student IDs

    Returns:
        The stored BookRecord with its assigned ID

    Raises:
        Conflict: If isbn already exists
    """
    book_id = new_id()

    try:
        with use_connection() as db:
            db.execute(
                """
                INSERT INTO books (book_id, title, author, isbn, published_year, created_by)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (book_id, title, author, isbn, published_year, created_by),
            )
            _write_assignments(db, book_id, assigned_students or [])
            record = _fetch_book(db, book_id)
    except sqlite3.IntegrityError as e:
        raise Conflict("isbn", isbn) from e

    logger.debug("books.inserted", book_id=book_id)
    return record


def get_book_by_id(book_id: str) -> BookRecord | None:
    """Get book by ID.

    Returns:
        BookRecord if found, None otherwise
    """
    with use_connection() as db:
        return _fetch_book(db, book_id)


def get_book_by_isbn(isbn: str) -> BookRecord | None:
    """Get book by ISBN."""
    with use_connection() as db:
        row = db.execute(
            "SELECT book_id FROM books WHERE isbn = ?", (isbn,)
        ).fetchone()
        if row is None:
            return None
        return _fetch_book(db, row["book_id"])


def get_books(assigned_to_student: str | None = None) -> list[BookRecord]:
    """Get all books, optionally only those assigned to one student."""
    with use_connection() as db:
        if assigned_to_student is None:
            rows = db.execute(
                "SELECT * FROM books ORDER BY created_at, rowid"
            ).fetchall()
        else:
            rows = db.execute(
                """
                SELECT b.* FROM books b
                JOIN book_students bs ON bs.book_id = b.book_id
                WHERE bs.student_id = ?
                ORDER BY b.created_at, b.rowid
                """,
                (assigned_to_student,),
            ).fetchall()

        assignments = _load_assignments(db)

    return [_row_to_record(row, assignments.get(row["book_id"], [])) for row in rows]


def get_all_assignments() -> list[tuple[str, str]]:
    """Get every (book_id, student_id) assignment pair."""
    with use_connection() as db:
        rows = db.execute(
            "SELECT book_id, student_id FROM book_students ORDER BY book_id, position"
        ).fetchall()

    return [(row["book_id"], row["student_id"]) for row in rows]


def update_book(record: BookRecord) -> BookRecord:
    """Persist all mutable fields and the assignment set of a book.

    Raises:
        NotFound: If the book no longer exists
        Conflict: If the new ISBN is already taken
    """
    try:
        with use_connection() as db:
            cursor = db.execute(
                """
                UPDATE books SET
                    title = ?,
                    author = ?,
                    isbn = ?,
                    published_year = ?
                WHERE book_id = ?
                """,
                (
                    record.title,
                    record.author,
                    record.isbn,
                    record.published_year,
                    record.book_id,
                ),
            )
            if cursor.rowcount == 0:
                raise NotFound("book", record.book_id)

            db.execute("DELETE FROM book_students WHERE book_id = ?", (record.book_id,))
            _write_assignments(db, record.book_id, record.assigned_students)
    except sqlite3.IntegrityError as e:
        raise Conflict("isbn", record.isbn) from e

    logger.debug("books.updated", book_id=record.book_id)
    return record


def remove_student_from_books(
    student_id: str, conn: sqlite3.Connection | None = None
) -> int:
    """Remove a student from every book's assignment set.

    Other assignees are left untouched.

    Returns:
        Number of books the student was removed from
    """
    with use_connection(conn) as db:
        cursor = db.execute(
            "DELETE FROM book_students WHERE student_id = ?", (student_id,)
        )

    logger.debug(
        "books.student_unassigned", student_id=student_id, count=cursor.rowcount
    )
    return cursor.rowcount


def delete_book(book_id: str) -> bool:
    """Delete book by ID, together with its assignment set.

    Returns:
        True if deleted, False if not found
    """
    with use_connection() as db:
        cursor = db.execute("DELETE FROM books WHERE book_id = ?", (book_id,))

    deleted = cursor.rowcount > 0
    if deleted:
        logger.debug("books.deleted", book_id=book_id)

    return deleted


def _write_assignments(
    db: sqlite3.Connection, book_id: str, student_ids: list[str]
) -> None:
    db.executemany(
        "INSERT INTO book_students (book_id, student_id, position) VALUES (?, ?, ?)",
        [(book_id, student_id, pos) for pos, student_id in enumerate(student_ids)],
    )


def _load_assignments(
    db: sqlite3.Connection, book_id: str | None = None
) -> dict[str, list[str]]:
    """Map book_id to its ordered student IDs."""
    if book_id is None:
        rows = db.execute(
            "SELECT book_id, student_id FROM book_students ORDER BY book_id, position"
        ).fetchall()
    else:
        rows = db.execute(
            "SELECT book_id, student_id FROM book_students WHERE book_id = ? ORDER BY position",
            (book_id,),
        ).fetchall()

    assignments: dict[str, list[str]] = {}
    for row in rows:
        assignments.setdefault(row["book_id"], []).append(row["student_id"])
    return assignments


def _fetch_book(db: sqlite3.Connection, book_id: str) -> BookRecord | None:
    row = db.execute("SELECT * FROM books WHERE book_id = ?", (book_id,)).fetchone()
    if row is None:
        return None
    assignments = _load_assignments(db, book_id)
    return _row_to_record(row, assignments.get(book_id, []))


def _row_to_record(row, assigned_students: list[str]) -> BookRecord:
    """Convert database row to BookRecord."""
    return BookRecord(
        book_id=row["book_id"],
        title=row["title"],
        author=row["author"],
        isbn=row["isbn"],
        published_year=row["published_year"],
        created_by=row["created_by"],
        created_at=row["created_at"],
        assigned_students=list(assigned_students),
    )
