"""Tests for student endpoints."""

MISSING_ID = "0" * 32


class TestCreateStudent:
    """Tests for POST /api/students."""

    def test_create_minimal(self, client):
        response = client.post("/api/students", json={"name": "Ana", "grade": "5", "roll_number": "R1"})
        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Ana"
        assert data["teacher_id"] is None
        assert data["age"] is None

    def test_unknown_teacher_is_404_and_not_created(self, client):
        response = client.post(
            "/api/students",
            json={"name": "Ana", "grade": "5", "roll_number": "R1", "teacher_id": MISSING_ID},
        )
        assert response.status_code == 404
        assert MISSING_ID in response.json()["detail"]
        assert client.get("/api/students").json()["count"] == 0

    def test_malformed_teacher_is_400(self, client):
        response = client.post(
            "/api/students",
            json={"name": "Ana", "grade": "5", "roll_number": "R1", "teacher_id": "nope"},
        )
        assert response.status_code == 400

    def test_duplicate_roll_number_is_409(self, client, create_student):
        first = create_student(roll_number="R7")

        response = client.post("/api/students", json={"name": "Other", "grade": "6", "roll_number": "R7"})

        assert response.status_code == 409
        assert "R7" in response.json()["detail"]
        assert client.get(f"/api/students/{first['student_id']}").json()["name"] == first["name"]

    def test_missing_fields_is_400(self, client):
        response = client.post("/api/students", json={"name": "Ana"})
        assert response.status_code == 400


class TestListStudents:
    """Tests for GET /api/students."""

    def test_filter_by_teacher(self, client, create_teacher, create_student):
        teacher = create_teacher()
        create_student(teacher_id=teacher["teacher_id"])
        create_student()

        data = client.get("/api/students", params={"teacher_id": teacher["teacher_id"]}).json()

        assert data["count"] == 1

    def test_filter_with_bad_id(self, client):
        assert client.get("/api/students", params={"teacher_id": "bad"}).status_code == 400


class TestUpdateStudent:
    """Tests for PUT /api/students/{id}."""

    def test_null_teacher_unassigns(self, client, create_teacher, create_student):
        teacher = create_teacher()
        student = create_student(teacher_id=teacher["teacher_id"])

        response = client.put(f"/api/students/{student['student_id']}", json={"teacher_id": None})

        assert response.status_code == 200
        assert response.json()["teacher_id"] is None

    def test_absent_teacher_kept(self, client, create_teacher, create_student):
        teacher = create_teacher()
        student = create_student(teacher_id=teacher["teacher_id"])

        response = client.put(f"/api/students/{student['student_id']}", json={"age": 12})

        assert response.json()["teacher_id"] == teacher["teacher_id"]
        assert response.json()["age"] == 12

    def test_reassign_to_missing_teacher(self, client, create_student):
        student = create_student()

        response = client.put(f"/api/students/{student['student_id']}", json={"teacher_id": MISSING_ID})

        assert response.status_code == 404


class TestDeleteStudent:
    """Tests for DELETE /api/students/{id}."""

    def test_delete_removes_from_books(self, client, create_student, create_book):
        """Book K assigned [A, B]: after deleting A, K is assigned [B]."""
        a = create_student()
        b = create_student()
        book = create_book(assigned_students=[a["student_id"], b["student_id"]])

        response = client.delete(f"/api/students/{a['student_id']}")

        assert response.status_code == 200
        assert response.json()["repaired"] == 1
        fetched = client.get(f"/api/books/{book['book_id']}").json()
        assert fetched["assigned_students"] == [b["student_id"]]
        assert client.get(f"/api/students/{a['student_id']}").status_code == 404

    def test_delete_missing(self, client):
        assert client.delete(f"/api/students/{MISSING_ID}").status_code == 404
