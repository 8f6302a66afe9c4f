"""
Pydantic schemas for departments.

This module defines the request and response schemas for department-related
API endpoints using Pydantic models. JSON field names are camelCase.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.schemas.common import UTCDateTime


class DepartmentBase(BaseModel):
    """Base schema for department data."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., alias="departmentName", max_length=100)
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Department name is required")
        return v


class DepartmentCreate(DepartmentBase):
    """Schema for creating a new department."""

    pass


class DepartmentUpdate(DepartmentBase):
    """Schema for replacing a department's fields."""

    pass


class Department(BaseModel):
    """Schema for department response data."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int = Field(..., alias="departmentId")
    name: str = Field(..., alias="departmentName")
    description: Optional[str] = None
    created_at: UTCDateTime = Field(..., alias="createdAt")
