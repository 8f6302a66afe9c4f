"""
Department model for the college staff system.
This module defines the SQLAlchemy model for departments,
the organizational units every staff member belongs to.
"""
from sqlalchemy import Column, Integer, String, DateTime, Text
from sqlalchemy.orm import relationship
from app.models.base import Base, utcnow

class Department(Base):
    """
    Department model representing a college department.

    A department owns zero or more staff records. Staff are not cascaded on
    delete: the service layer refuses to remove a department that still has
    staff assigned.
    """

    __tablename__ = "department"

    id = Column("department_id", Integer, primary_key=True, autoincrement=True)
    name = Column("department_name", String(100), nullable=False, unique=True, index=True)
    description = Column(Text, nullable=True)

    created_at = Column("created_date", DateTime(timezone=True), nullable=False, default=utcnow)

    staff = relationship(
        "Staff",
        back_populates="department",
        passive_deletes=True,
        order_by="Staff.name",
    )

    def __repr__(self) -> str:
        """String representation of the Department model."""
        return f"<Department(id={self.id}, name='{self.name}')>"
