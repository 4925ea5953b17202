"""Tests for teacher endpoints."""

MISSING_ID = "0" * 32


class TestCreateTeacher:
    """Tests for POST /api/teachers."""

    def test_create(self, client):
        response = client.post(
            "/api/teachers",
            json={"name": "Ms. Vega", "subject": "Physics", "experience_years": 3, "email": "Vega@School.org"},
        )
        assert response.status_code == 201
        data = response.json()
        assert data["email"] == "vega@school.org"
        assert data["experience_years"] == 3
        assert len(data["teacher_id"]) == 32

    def test_missing_subject_is_400(self, client):
        response = client.post("/api/teachers", json={"name": "Ms. Vega"})
        assert response.status_code == 400
        assert "subject" in response.json()["detail"]

    def test_blank_name_is_400(self, client):
        response = client.post("/api/teachers", json={"name": "  ", "subject": "Art"})
        assert response.status_code == 400
        assert response.json()["detail"] == "name is required"

    def test_duplicate_email_is_409(self, client, create_teacher):
        create_teacher(email="vega@school.org")
        response = client.post(
            "/api/teachers", json={"name": "Other", "subject": "Art", "email": "vega@school.org"}
        )
        assert response.status_code == 409


class TestReadTeacher:
    """Tests for GET endpoints."""

    def test_list(self, client, create_teacher):
        create_teacher()
        data = client.get("/api/teachers").json()
        assert data["count"] == 1

    def test_get_not_found(self, client):
        assert client.get(f"/api/teachers/{MISSING_ID}").status_code == 404

    def test_get_invalid_id(self, client):
        response = client.get("/api/teachers/123")
        assert response.status_code == 400
        assert "Invalid teacher ID format" in response.json()["detail"]

    def test_students_of_teacher(self, client, create_teacher, create_student):
        teacher = create_teacher()
        student = create_student(teacher_id=teacher["teacher_id"])
        create_student()

        data = client.get(f"/api/teachers/{teacher['teacher_id']}/students").json()

        assert data["count"] == 1
        assert data["students"][0]["student_id"] == student["student_id"]


class TestUpdateTeacher:
    """Tests for PUT /api/teachers/{id}."""

    def test_partial_update(self, client, create_teacher):
        teacher = create_teacher(email="a@school.org")

        response = client.put(f"/api/teachers/{teacher['teacher_id']}", json={"subject": "Chemistry"})

        assert response.status_code == 200
        assert response.json()["subject"] == "Chemistry"
        assert response.json()["email"] == "a@school.org"

    def test_null_experience_is_ignored(self, client, create_teacher):
        teacher = create_teacher(experience_years=12)

        response = client.put(f"/api/teachers/{teacher['teacher_id']}", json={"experience_years": None})

        assert response.status_code == 200
        assert response.json()["experience_years"] == 12


class TestDeleteTeacher:
    """Tests for DELETE /api/teachers/{id}."""

    def test_delete_unassigns_students(self, client, create_teacher, create_student):
        """Teacher T with students A and B: after deleting T both have no teacher."""
        teacher = create_teacher()
        a = create_student(teacher_id=teacher["teacher_id"])
        b = create_student(teacher_id=teacher["teacher_id"])

        response = client.delete(f"/api/teachers/{teacher['teacher_id']}")

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == teacher["teacher_id"]
        assert body["repaired"] == 2

        for student in (a, b):
            fetched = client.get(f"/api/students/{student['student_id']}").json()
            assert fetched["teacher_id"] is None

        assert client.get(f"/api/teachers/{teacher['teacher_id']}").status_code == 404

    def test_delete_missing(self, client):
        assert client.delete(f"/api/teachers/{MISSING_ID}").status_code == 404
