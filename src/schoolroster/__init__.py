"""School roster: teachers, students and books with referential integrity."""

__version__ = "0.1.0"
