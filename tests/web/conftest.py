"""Fixtures for Web API tests."""

import pytest
from fastapi.testclient import TestClient

from schoolroster.web.api import create_app

USER_HEADERS = {"X-User-Id": "user-1"}


@pytest.fixture
def client(tmp_path):
    """Test client running the app lifespan against a fresh database."""
    app = create_app(db_path=tmp_path / "api.db")
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def create_teacher(client):
    def _create(**fields):
        body = {"name": "Ms. Vega", "subject": "Physics", **fields}
        response = client.post("/api/teachers", json=body)
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_student(client):
    counter = {"n": 0}

    def _create(**fields):
        counter["n"] += 1
        body = {"name": f"Student {counter['n']}", "grade": "5", "roll_number": f"R{counter['n']}", **fields}
        response = client.post("/api/students", json=body)
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_book(client):
    counter = {"n": 0}

    def _create(**fields):
        counter["n"] += 1
        body = {"title": f"Book {counter['n']}", "author": "Author", "isbn": f"isbn-{counter['n']}", **fields}
        response = client.post("/api/books", json=body, headers=USER_HEADERS)
        assert response.status_code == 201, response.text
        return response.json()

    return _create
