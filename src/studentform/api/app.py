"""FastAPI application setup."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from studentform.api.dependencies import close_record_store, init_record_store, init_settings
from studentform.api.models import APIResponse
from studentform.api.routes import students
from studentform.config import Settings
from studentform.form import DUPLICATE_ID_MESSAGE
from studentform.logging import setup_logging
from studentform.records import (
    DuplicateStudentError,
    EmptyStoreError,
    RecordStoreError,
    StudentNotFoundError,
)

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings: Settings = app.state.settings
    if app.state.configure_logging:
        setup_logging(log_dir=settings.log_dir, level=settings.log_level)

    # Startup
    init_settings(settings)
    init_record_store()

    yield
    # Shutdown
    close_record_store()


def create_app(settings: Settings | None = None, configure_logging: bool = False) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="studentform API",
        description="REST API for the student details form",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Store config for lifespan manager
    app.state.settings = settings if settings is not None else Settings.from_env()
    app.state.configure_logging = configure_logging

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        _request: Request, _exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content=APIResponse[None](data=None, error="Invalid request body").model_dump(),
        )

    @app.exception_handler(StudentNotFoundError)
    async def student_not_found_handler(
        _request: Request, _exc: StudentNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=APIResponse[None](data=None, error="Student not found").model_dump(),
        )

    @app.exception_handler(DuplicateStudentError)
    async def duplicate_student_handler(
        _request: Request, _exc: DuplicateStudentError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content=APIResponse[None](data=None, error=DUPLICATE_ID_MESSAGE).model_dump(),
        )

    @app.exception_handler(EmptyStoreError)
    async def empty_store_handler(_request: Request, exc: EmptyStoreError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content=APIResponse[None](data=None, error=str(exc)).model_dump(),
        )

    @app.exception_handler(RecordStoreError)
    async def record_store_error_handler(
        _request: Request, _exc: RecordStoreError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=APIResponse[None](data=None, error="Internal server error").model_dump(),
        )

    # Include routers
    app.include_router(students.router, prefix="/api/v1")

    return app


# Default app instance
app = create_app(configure_logging=True)
