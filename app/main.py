"""
Main application entry point.

This module builds the FastAPI application: middleware, exception handlers,
the service objects shared by every request, and the routers.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.core.exceptions import register_exception_handlers
from app.core.logging import logger
from app.core.middleware import RequestLoggingMiddleware
from app.db.session import init_models
from app.repositories import DepartmentRepository, StaffRepository
from app.routers.departments import router as departments_router
from app.routers.health import router as health_router
from app.routers.staff import router as staff_router
from app.services import DepartmentService, StaffService


def create_app() -> FastAPI:
    """Build and wire the application."""
    app = FastAPI(
        title=settings.api.title,
        description=settings.api.description,
        version=settings.api.version,
    )

    # Collaborators are constructed once and shared through app.state
    staff_repository = StaffRepository()
    department_repository = DepartmentRepository()
    app.state.staff_service = StaffService(staff_repository, department_repository)
    app.state.department_service = DepartmentService(department_repository, staff_repository)

    app.add_middleware(RequestLoggingMiddleware)

    origins = settings.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Credentials cannot be combined with a wildcard origin
        allow_credentials="*" not in origins,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    prefix = settings.api.prefix
    app.include_router(
        health_router,
        prefix=f"{prefix}/health",
        tags=["health"],
    )
    app.include_router(
        staff_router,
        prefix=f"{prefix}/staff",
        tags=["staff"],
    )
    app.include_router(
        departments_router,
        prefix=f"{prefix}/departments",
        tags=["departments"],
    )

    @app.on_event("startup")
    async def startup_event():
        """Actions to run on application startup."""
        logger.info(f"Starting {settings.api.title}")
        logger.info(f"Environment: {settings.environment.value}")
        logger.info(f"Debug mode: {settings.debug}")
        logger.info(f"Database URL: {settings.database.url[:20]}...")

        if settings.database.create_tables_on_startup:
            await init_models()

        logger.info(f"API Docs available at: http://{settings.api.host}:{settings.api.port}/docs")

    @app.on_event("shutdown")
    async def shutdown_event():
        """Actions to run on application shutdown."""
        logger.info(f"Shutting down {settings.api.title}")

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "message": settings.api.title,
            "version": settings.api.version,
            "docs": "/docs",
        }

    return app


app = create_app()
