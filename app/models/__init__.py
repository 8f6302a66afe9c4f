"""
Models package initialization.

Importing this package registers every model on ``Base.metadata``.
"""

from app.models.base import Base
from app.models.department import Department
from app.models.staff import Staff

__all__ = ["Base", "Department", "Staff"]
