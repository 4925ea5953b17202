"""Pydantic schemas for Web API.

Serialization models for Teacher, Student, Book and delete results.
Update schemas are fully optional; handlers forward only the fields the
client actually sent (exclude_unset), so an explicit null is distinguishable
from an absent field.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field


# =============================================================================
# TEACHER SCHEMAS
# =============================================================================


class TeacherCreate(BaseModel):
    """Request body for creating a teacher."""

    name: str = Field(..., max_length=100)
    subject: str = Field(..., max_length=100)
    experience_years: int = Field(default=0)
    email: str | None = Field(default=None, max_length=200)


class TeacherUpdate(BaseModel):
    """Request body for updating a teacher."""

    name: str | None = Field(default=None, max_length=100)
    subject: str | None = Field(default=None, max_length=100)
    experience_years: int | None = None
    email: str | None = Field(default=None, max_length=200)


class TeacherResponse(BaseModel):
    """Response for a teacher."""

    teacher_id: str
    name: str
    subject: str
    experience_years: int
    email: str | None
    created_at: str

    model_config = {"from_attributes": True}


class TeacherListResponse(BaseModel):
    """Response for list of teachers."""

    teachers: list[TeacherResponse]
    count: int


# =============================================================================
# STUDENT SCHEMAS
# =============================================================================


class StudentCreate(BaseModel):
    """Request body for creating a student."""

    name: str = Field(..., max_length=100)
    grade: str = Field(..., max_length=50)
    roll_number: str = Field(..., max_length=50)
    age: int | None = None
    teacher_id: str | None = None


class StudentUpdate(BaseModel):
    """Request body for updating a student.

    Send teacher_id: null to unassign the teacher.
    """

    name: str | None = Field(default=None, max_length=100)
    grade: str | None = Field(default=None, max_length=50)
    roll_number: str | None = Field(default=None, max_length=50)
    age: int | None = None
    teacher_id: str | None = None


class StudentResponse(BaseModel):
    """Response for a student."""

    student_id: str
    name: str
    grade: str
    roll_number: str
    age: int | None
    teacher_id: str | None
    created_at: str

    model_config = {"from_attributes": True}


class StudentListResponse(BaseModel):
    """Response for list of students."""

    students: list[StudentResponse]
    count: int


# =============================================================================
# BOOK SCHEMAS
# =============================================================================


class BookCreate(BaseModel):
    """Request body for creating a book."""

    title: str = Field(..., max_length=200)
    author: str = Field(..., max_length=200)
    isbn: str = Field(..., max_length=20)
    published_year: int | None = None
    assigned_students: list[str] = Field(default_factory=list)


class BookUpdate(BaseModel):
    """Request body for updating a book.

    A present assigned_students replaces the whole assignment set.
    """

    title: str | None = Field(default=None, max_length=200)
    author: str | None = Field(default=None, max_length=200)
    isbn: str | None = Field(default=None, max_length=20)
    published_year: int | None = None
    assigned_students: list[str] | None = None


class BookResponse(BaseModel):
    """Response for a book."""

    book_id: str
    title: str
    author: str
    isbn: str
    published_year: int | None
    created_by: str
    assigned_students: list[str]
    created_at: str

    model_config = {"from_attributes": True}


class BookListResponse(BaseModel):
    """Response for list of books."""

    books: list[BookResponse]
    count: int


# =============================================================================
# DELETE / HEALTH SCHEMAS
# =============================================================================


class DeleteResponse(BaseModel):
    """Response for a successful delete."""

    message: str
    id: str
    repaired: int = 0


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "ok"
    version: str = "0.1.0"
    timestamp: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
