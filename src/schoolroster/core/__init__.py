"""Core business logic.

Modules:
- errors: error taxonomy shared by every layer
- validation: field validation returning ValidationResult
- references: foreign-key existence checks
- uniqueness: unique-field checks
- cascade: dependent repair on delete
- teacher_service, student_service, book_service: CRUD operations
- integrity: dangling-reference audit
"""

__all__ = [
    "errors",
    "validation",
    "references",
    "uniqueness",
    "cascade",
    "teacher_service",
    "student_service",
    "book_service",
    "integrity",
]
