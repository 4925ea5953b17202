"""Teacher endpoints."""

from fastapi import APIRouter, status

from schoolroster.core import teacher_service
from schoolroster.web.schemas import (
    DeleteResponse,
    StudentListResponse,
    StudentResponse,
    TeacherCreate,
    TeacherListResponse,
    TeacherResponse,
    TeacherUpdate,
)

router = APIRouter(prefix="/api/teachers", tags=["teachers"])


@router.get("", response_model=TeacherListResponse)
async def list_teachers() -> TeacherListResponse:
    """List all teachers."""
    teachers = [
        TeacherResponse.model_validate(t) for t in teacher_service.list_teachers()
    ]
    return TeacherListResponse(teachers=teachers, count=len(teachers))


@router.get("/{teacher_id}", response_model=TeacherResponse)
async def get_teacher(teacher_id: str) -> TeacherResponse:
    """Get a specific teacher by ID."""
    return TeacherResponse.model_validate(teacher_service.get_teacher(teacher_id))


@router.get("/{teacher_id}/students", response_model=StudentListResponse)
async def list_teacher_students(teacher_id: str) -> StudentListResponse:
    """List the students assigned to a teacher."""
    students = [
        StudentResponse.model_validate(s)
        for s in teacher_service.list_students_for_teacher(teacher_id)
    ]
    return StudentListResponse(students=students, count=len(students))


@router.post("", response_model=TeacherResponse, status_code=status.HTTP_201_CREATED)
async def create_teacher(teacher_data: TeacherCreate) -> TeacherResponse:
    """Create a new teacher."""
    teacher = teacher_service.create_teacher(teacher_data.model_dump())
    return TeacherResponse.model_validate(teacher)


@router.put("/{teacher_id}", response_model=TeacherResponse)
async def update_teacher(teacher_id: str, teacher_data: TeacherUpdate) -> TeacherResponse:
    """Update the fields sent for a teacher."""
    teacher = teacher_service.update_teacher(
        teacher_id, teacher_data.model_dump(exclude_unset=True)
    )
    return TeacherResponse.model_validate(teacher)


@router.delete("/{teacher_id}", response_model=DeleteResponse)
async def delete_teacher(teacher_id: str) -> DeleteResponse:
    """Delete a teacher and unassign their students."""
    report = teacher_service.delete_teacher(teacher_id)
    return DeleteResponse(
        message="Teacher removed successfully and students unassigned.",
        id=report.deleted_id,
        repaired=report.repaired,
    )
