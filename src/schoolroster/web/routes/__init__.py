"""Route handlers for Web API."""

from schoolroster.web.routes.health import router as health_router
from schoolroster.web.routes.teachers import router as teachers_router
from schoolroster.web.routes.students import router as students_router
from schoolroster.web.routes.books import router as books_router

__all__ = [
    "health_router",
    "teachers_router",
    "students_router",
    "books_router",
]
