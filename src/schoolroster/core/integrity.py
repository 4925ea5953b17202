"""Read-only audit of cross-entity references.

Reports students pointing at missing teachers and book assignments pointing
at missing students. A healthy store always yields a clean report; anything
else means a cascade was bypassed (for instance by editing the database by
hand).
"""

from __future__ import annotations

from dataclasses import dataclass, field

import structlog

from schoolroster.db import books_repository, students_repository, teachers_repository

logger = structlog.get_logger(__name__)


@dataclass
class IntegrityReport:
    """Dangling references found by an audit."""

    orphaned_students: list[tuple[str, str]] = field(default_factory=list)
    orphaned_assignments: list[tuple[str, str]] = field(default_factory=list)

    @property
    def clean(self) -> bool:
        return not self.orphaned_students and not self.orphaned_assignments


def find_dangling_references() -> IntegrityReport:
    """Scan all collections for references to missing records.

    Returns:
        IntegrityReport with (student_id, teacher_id) and
        (book_id, student_id) pairs that reference nothing
    """
    teacher_ids = {t.teacher_id for t in teachers_repository.get_all_teachers()}
    students = students_repository.get_students()
    student_ids = {s.student_id for s in students}

    report = IntegrityReport(
        orphaned_students=[
            (s.student_id, s.teacher_id)
            for s in students
            if s.teacher_id is not None and s.teacher_id not in teacher_ids
        ],
        orphaned_assignments=[
            (book_id, student_id)
            for book_id, student_id in books_repository.get_all_assignments()
            if student_id not in student_ids
        ],
    )

    logger.info(
        "integrity.audited",
        orphaned_students=len(report.orphaned_students),
        orphaned_assignments=len(report.orphaned_assignments),
    )
    return report
