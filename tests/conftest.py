"""Shared fixtures.

Every test runs against its own SQLite file and default configuration.
"""

import pytest

from schoolroster.config.app_config import clear_config_cache
from schoolroster.core import book_service, student_service, teacher_service
from schoolroster.core.context import RequestContext
from schoolroster.db.database import init_db


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Use built-in defaults unless a test writes its own config."""
    monkeypatch.setenv("ROSTER_CONFIG", str(tmp_path / "no-config.yaml"))
    monkeypatch.delenv("ROSTER_DB_PATH", raising=False)
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture
def db_path(tmp_path):
    """Initialized database file."""
    path = tmp_path / "roster.db"
    init_db(path)
    return path


@pytest.fixture
def context():
    return RequestContext(user_id="user-1")


@pytest.fixture
def make_teacher(db_path):
    """Create teachers with sensible defaults."""
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        data = {"name": f"Teacher {counter['n']}", "subject": "Math"}
        data.update(overrides)
        return teacher_service.create_teacher(data)

    return _make


@pytest.fixture
def make_student(db_path):
    """Create students with unique roll numbers."""
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        data = {
            "name": f"Student {counter['n']}",
            "grade": "5",
            "roll_number": f"R{counter['n']:03d}",
        }
        data.update(overrides)
        return student_service.create_student(data)

    return _make


@pytest.fixture
def make_book(db_path, context):
    """Create books with unique ISBNs."""
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        data = {
            "title": f"Book {counter['n']}",
            "author": "Author",
            "isbn": f"978-{counter['n']:06d}",
        }
        data.update(overrides)
        return book_service.create_book(context, data)

    return _make
