"""SQLite database connection and schema management.

Provides connection management, schema initialization and identifier
generation for the roster store.
"""

from __future__ import annotations

import re
import sqlite3
import uuid
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

import structlog

from schoolroster.core.errors import StoreUnavailable

logger = structlog.get_logger(__name__)

# Default database location
DEFAULT_DB_PATH = Path("db/roster.db")

# Store keys are uuid4 hex strings
KEY_PATTERN = re.compile(r"^[0-9a-f]{32}$")

# Current database path (module-level, set by init_db)
_db_path: Path | None = None


def new_id() -> str:
    """Generate a new opaque record identifier."""
    return uuid.uuid4().hex


def is_valid_key(value: object) -> bool:
    """Check whether a value is syntactically a store key."""
    return isinstance(value, str) and bool(KEY_PATTERN.match(value))


def init_db(db_path: Path | None = None) -> None:
    """Initialize database with schema.

    Creates the database file and all required tables if they don't exist.

    Args:
        db_path: Path to database file. Defaults to db/roster.db
    """
    global _db_path
    _db_path = Path(db_path) if db_path else DEFAULT_DB_PATH

    with get_db() as conn:
        _create_schema(conn)

    logger.info("database.initialized", path=str(_db_path))


def get_db_path() -> Path:
    """Path of the database currently in use."""
    return _db_path or DEFAULT_DB_PATH


@contextmanager
def get_db() -> Generator[sqlite3.Connection, None, None]:
    """Get database connection as context manager.

    The block runs as one transaction: committed on exit, rolled back on
    error. Integrity errors propagate as-is so repositories can translate
    them; any other sqlite failure is raised as StoreUnavailable.

    Yields:
        SQLite connection with row factory set to sqlite3.Row

    Example:
        with get_db() as conn:
            rows = conn.execute("SELECT * FROM students").fetchall()
    """
    db_path = get_db_path()

    try:
        db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(db_path)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
    except (OSError, sqlite3.Error) as e:
        raise StoreUnavailable(str(e)) from e

    try:
        yield conn
        conn.commit()
    except sqlite3.IntegrityError:
        conn.rollback()
        raise
    except sqlite3.Error as e:
        conn.rollback()
        raise StoreUnavailable(str(e)) from e
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


@contextmanager
def use_connection(
    conn: sqlite3.Connection | None = None,
) -> Generator[sqlite3.Connection, None, None]:
    """Reuse an open connection, or open a fresh transaction.

    Repository functions accept an optional connection so several writes can
    share one transaction.
    """
    if conn is not None:
        yield conn
        return

    with get_db() as new_conn:
        yield new_conn


def _create_schema(conn: sqlite3.Connection) -> None:
    """Create database schema.

    Uses IF NOT EXISTS for idempotency. Student -> teacher and
    assignment -> student references carry no foreign key: the cascade
    coordinator keeps them consistent.
    """
    conn.executescript(
        """
        CREATE TABLE IF NOT EXISTS teachers (
            teacher_id TEXT PRIMARY KEY,
            name TEXT NOT NULL,
            subject TEXT NOT NULL,
            experience_years INTEGER NOT NULL DEFAULT 0,
            email TEXT UNIQUE,
            created_at TEXT NOT NULL DEFAULT (datetime('now'))
        );

        CREATE TABLE IF NOT EXISTS students (
            student_id TEXT PRIMARY KEY,
            name TEXT NOT NULL,
            grade TEXT NOT NULL,
            roll_number TEXT NOT NULL UNIQUE,
            age INTEGER,
            teacher_id TEXT,
            created_at TEXT NOT NULL DEFAULT (datetime('now'))
        );

        CREATE TABLE IF NOT EXISTS books (
            book_id TEXT PRIMARY KEY,
            title TEXT NOT NULL,
            author TEXT NOT NULL,
            isbn TEXT NOT NULL UNIQUE,
            published_year INTEGER,
            created_by TEXT NOT NULL,
            created_at TEXT NOT NULL DEFAULT (datetime('now'))
        );

        -- Assignment set of a book; position keeps the submitted order
        CREATE TABLE IF NOT EXISTS book_students (
            book_id TEXT NOT NULL REFERENCES books(book_id) ON DELETE CASCADE,
            student_id TEXT NOT NULL,
            position INTEGER NOT NULL,
            PRIMARY KEY (book_id, student_id)
        );

        CREATE INDEX IF NOT EXISTS idx_students_teacher ON students(teacher_id);
        CREATE INDEX IF NOT EXISTS idx_book_students_student ON book_students(student_id);
        """
    )
