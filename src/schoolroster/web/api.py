"""FastAPI application factory.

Main entry point for the School Roster Web API.
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from schoolroster import __version__
from schoolroster.config.app_config import load_app_config
from schoolroster.db.database import init_db
from schoolroster.web.errors import register_error_handlers
from schoolroster.web.routes import (
    books_router,
    health_router,
    students_router,
    teachers_router,
)

logger = structlog.get_logger(__name__)


def create_app(db_path: Path | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        db_path: Database file to use; defaults to the configured path

    Returns:
        Configured FastAPI app instance
    """
    config = load_app_config()
    effective_db_path = db_path or config.database.path

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Lifespan context manager for startup/shutdown events."""
        init_db(effective_db_path)
        logger.info(
            "api_startup",
            db_path=str(effective_db_path),
            cascade_mode=config.cascade.mode,
        )
        yield

    app = FastAPI(
        title=config.api.title,
        description="Teachers, students and books with referential integrity",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(teachers_router)
    app.include_router(students_router)
    app.include_router(books_router)

    return app
