"""Database module for SQLite persistence.

Provides:
- Database connection management and schema initialization
- Repository functions for teachers, students and books
"""

from schoolroster.db.database import get_db, init_db, is_valid_key

__all__ = ["get_db", "init_db", "is_valid_key"]
