"""
Staff model for the college staff system.

This module defines the SQLAlchemy model for staff members.
"""

from sqlalchemy import Column, Integer, String, DateTime, Numeric, ForeignKey
from sqlalchemy.orm import relationship
from app.models.base import Base, utcnow

class Staff(Base):
    """
    Staff model representing a college employee.

    Every staff member belongs to exactly one department and carries a
    monthly salary stored with two decimal places.
    """

    __tablename__ = "staff"

    id = Column("staff_id", Integer, primary_key=True, autoincrement=True)
    name = Column("staff_name", String(100), nullable=False, index=True)
    department_id = Column(
        "department_id",
        Integer,
        ForeignKey("department.department_id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    salary = Column(Numeric(12, 2), nullable=False)
    created_at = Column("created_date", DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(
        "updated_date",
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )

    # selectin so the department is loaded eagerly; lazy loads fail under asyncio
    department = relationship("Department", back_populates="staff", lazy="selectin")

    def __repr__(self) -> str:
        """String representation of the Staff model."""
        return (
            f"<Staff(id={self.id}, "
            f"name='{self.name}', "
            f"department_id={self.department_id}, "
            f"salary={self.salary})>"
        )
