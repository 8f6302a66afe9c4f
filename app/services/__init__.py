"""
Services package initialization.

This module imports all services to make them available from a single import point.
"""

from app.services.department import DepartmentService
from app.services.staff import StaffService

__all__ = ["DepartmentService", "StaffService"]
