"""
Dependencies for FastAPI endpoints.

Services are built once by ``create_app`` and stored on ``app.state``; these
dependencies hand them to the routers.
"""

from fastapi import Request

from app.services.department import DepartmentService
from app.services.staff import StaffService


def get_staff_service(request: Request) -> StaffService:
    """Return the application's staff service."""
    return request.app.state.staff_service


def get_department_service(request: Request) -> DepartmentService:
    """Return the application's department service."""
    return request.app.state.department_service
