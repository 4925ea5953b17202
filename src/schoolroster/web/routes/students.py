"""Student endpoints."""

from fastapi import APIRouter, status

from schoolroster.core import student_service
from schoolroster.web.schemas import (
    DeleteResponse,
    StudentCreate,
    StudentListResponse,
    StudentResponse,
    StudentUpdate,
)

router = APIRouter(prefix="/api/students", tags=["students"])


@router.get("", response_model=StudentListResponse)
async def list_students(teacher_id: str | None = None) -> StudentListResponse:
    """List all students, optionally filtered by teacher."""
    students = [
        StudentResponse.model_validate(s)
        for s in student_service.list_students(teacher_id=teacher_id)
    ]
    return StudentListResponse(students=students, count=len(students))


@router.get("/{student_id}", response_model=StudentResponse)
async def get_student(student_id: str) -> StudentResponse:
    """Get a specific student by ID."""
    return StudentResponse.model_validate(student_service.get_student(student_id))


@router.post("", response_model=StudentResponse, status_code=status.HTTP_201_CREATED)
async def create_student(student_data: StudentCreate) -> StudentResponse:
    """Create a new student."""
    student = student_service.create_student(student_data.model_dump())
    return StudentResponse.model_validate(student)


@router.put("/{student_id}", response_model=StudentResponse)
async def update_student(student_id: str, student_data: StudentUpdate) -> StudentResponse:
    """Update the fields sent for a student."""
    student = student_service.update_student(
        student_id, student_data.model_dump(exclude_unset=True)
    )
    return StudentResponse.model_validate(student)


@router.delete("/{student_id}", response_model=DeleteResponse)
async def delete_student(student_id: str) -> DeleteResponse:
    """Delete a student and unassign them from books."""
    report = student_service.delete_student(student_id)
    return DeleteResponse(
        message="Student removed successfully and unassigned from books.",
        id=report.deleted_id,
        repaired=report.repaired,
    )
