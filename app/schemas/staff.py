"""
Pydantic schemas for staff.

This module defines the request and response schemas for staff-related
API endpoints. Salaries are decimals on the way in and JSON numbers on the
way out.
"""

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, field_validator

from app.schemas.common import MAX_ID, UTCDateTime
from app.schemas.department import Department


Money = Annotated[
    Decimal,
    PlainSerializer(lambda v: float(v), return_type=float, when_used="json"),
]


class StaffBase(BaseModel):
    """Fields a client supplies when creating or replacing a staff record."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., alias="staffName", max_length=100)
    department_id: int = Field(..., alias="departmentId", gt=0, le=MAX_ID, strict=True)
    salary: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Staff name is required")
        return v


class StaffCreate(StaffBase):
    """Schema for creating a new staff record."""

    pass


class StaffUpdate(StaffBase):
    """Schema for a full replacement of a staff record's mutable fields."""

    pass


class Staff(BaseModel):
    """Schema for staff response data."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int = Field(..., alias="staffId")
    name: str = Field(..., alias="staffName")
    department_id: int = Field(..., alias="departmentId")
    department: Department
    salary: Money
    created_at: UTCDateTime = Field(..., alias="createdAt")
    updated_at: UTCDateTime = Field(..., alias="updatedAt")


class StaffCount(BaseModel):
    """Number of staff in a department."""

    model_config = ConfigDict(populate_by_name=True)

    department_id: int = Field(..., alias="departmentId")
    count: int
