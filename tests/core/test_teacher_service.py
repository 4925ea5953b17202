"""Tests for teacher operations."""

import pytest

from schoolroster.core import teacher_service
from schoolroster.core.errors import Conflict, NotFound, ValidationError

MISSING_ID = "0" * 32


class TestCreateTeacher:
    """Tests for teacher_service.create_teacher."""

    def test_defaults(self, db_path):
        teacher = teacher_service.create_teacher({"name": "Ms. Vega", "subject": "Physics"})

        assert teacher.experience_years == 0
        assert teacher.email is None

    def test_email_normalized(self, make_teacher):
        teacher = make_teacher(email="  Vega@School.ORG ")

        assert teacher.email == "vega@school.org"

    def test_duplicate_email_case_insensitive(self, make_teacher):
        make_teacher(email="vega@school.org")

        with pytest.raises(Conflict) as exc_info:
            make_teacher(email="VEGA@school.org")

        assert exc_info.value.field == "email"

    def test_teachers_without_email_do_not_conflict(self, make_teacher):
        make_teacher()
        make_teacher(email="")

        assert len(teacher_service.list_teachers()) == 2

    def test_invalid_email(self, make_teacher):
        with pytest.raises(ValidationError):
            make_teacher(email="not-an-email")

    def test_negative_experience(self, make_teacher):
        with pytest.raises(ValidationError):
            make_teacher(experience_years=-1)


class TestUpdateTeacher:
    """Tests for teacher_service.update_teacher."""

    def test_partial_update(self, make_teacher):
        teacher = make_teacher(subject="Math")

        updated = teacher_service.update_teacher(teacher.teacher_id, {"experience_years": 7})

        assert updated.experience_years == 7
        assert updated.subject == "Math"

    def test_email_taken(self, make_teacher):
        make_teacher(email="a@school.org")
        other = make_teacher(email="b@school.org")

        with pytest.raises(Conflict):
            teacher_service.update_teacher(other.teacher_id, {"email": "a@school.org"})

    def test_empty_name_rejected(self, make_teacher):
        teacher = make_teacher()

        with pytest.raises(ValidationError):
            teacher_service.update_teacher(teacher.teacher_id, {"name": "  "})

    def test_null_experience_keeps_stored_value(self, make_teacher):
        """An explicit null does not reset experience to the create default."""
        teacher = make_teacher(experience_years=12)

        updated = teacher_service.update_teacher(teacher.teacher_id, {"experience_years": None})

        assert updated.experience_years == 12
        assert teacher_service.get_teacher(teacher.teacher_id).experience_years == 12


class TestTeacherStudents:
    """Tests for list_students_for_teacher."""

    def test_lists_assigned_students(self, make_teacher, make_student):
        teacher = make_teacher()
        a = make_student(teacher_id=teacher.teacher_id)
        make_student()

        students = teacher_service.list_students_for_teacher(teacher.teacher_id)

        assert [s.student_id for s in students] == [a.student_id]

    def test_missing_teacher(self, db_path):
        with pytest.raises(NotFound):
            teacher_service.list_students_for_teacher(MISSING_ID)

    def test_delete_reports_unassigned(self, make_teacher, make_student):
        teacher = make_teacher()
        make_student(teacher_id=teacher.teacher_id)

        report = teacher_service.delete_teacher(teacher.teacher_id)

        assert report.repaired == 1
        with pytest.raises(NotFound):
            teacher_service.get_teacher(teacher.teacher_id)
