"""
Repository layer - data access for the staff and department tables.

Repositories are stateless: every method receives the request's
``AsyncSession``. They flush but never commit; transaction boundaries belong
to the service layer.
"""

from app.repositories.department import DepartmentRepository
from app.repositories.staff import StaffRepository

__all__ = ["DepartmentRepository", "StaffRepository"]
