"""
Pydantic schemas for the health endpoints.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ServiceHealth(BaseModel):
    status: str
    version: str
    environment: str


class StoreHealth(BaseModel):
    """Reachability of the store plus the size of each table."""

    model_config = ConfigDict(populate_by_name=True)

    status: str
    dialect: str
    department_count: Optional[int] = Field(None, alias="departmentCount")
    staff_count: Optional[int] = Field(None, alias="staffCount")
