"""Translate roster errors into HTTP responses."""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from schoolroster.core.errors import RosterError

logger = structlog.get_logger(__name__)


async def roster_error_handler(request: Request, exc: RosterError) -> JSONResponse:
    """Map a RosterError to its status code with a detail message."""
    logger.info(
        "api_error",
        path=request.url.path,
        error=type(exc).__name__,
        status=exc.http_status,
    )
    return JSONResponse(status_code=exc.http_status, content={"detail": str(exc)})


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed request bodies are a 400, like any other validation error."""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"] if part != "body")
        messages.append(f"{location}: {error['msg']}" if location else error["msg"])

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": ", ".join(messages)},
    )


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Anything else is a 500 that still carries a JSON detail."""
    logger.exception("api_unexpected_error", path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RosterError, roster_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
