"""
Staff API endpoints.

This module provides CRUD endpoints for staff records plus the filter and
aggregate queries. Fixed paths are declared before ``/{staff_id}`` so they
are matched first.
"""
from decimal import Decimal
from typing import List

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.deps import get_department_service, get_staff_service
from app.core.exceptions import NoStaffError
from app.core.logging import logger
from app.db.session import get_db
from app.schemas.common import MAX_ID
from app.schemas.department import Department
from app.schemas.error import ErrorResponse
from app.schemas.staff import Staff, StaffCount, StaffCreate, StaffUpdate
from app.services.department import DepartmentService
from app.services.staff import StaffService

router = APIRouter()


NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}


@router.get("", response_model=List[Staff])
async def get_all_staff(
    db: AsyncSession = Depends(get_db),
    service: StaffService = Depends(get_staff_service),
):
    """Get all staff records."""
    staff = await service.get_all(db)
    logger.info(f"Retrieved {len(staff)} staff records")
    return staff


@router.post(
    "",
    response_model=Staff,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST,
)
async def create_staff(
    staff_in: StaffCreate,
    db: AsyncSession = Depends(get_db),
    service: StaffService = Depends(get_staff_service),
):
    """
    Create a new staff record.

    Args:
        staff_in: Staff creation data
        db: Database session
        service: Staff service

    Returns:
        Created staff record
    """
    staff = await service.create(db, staff_in)
    logger.info(f"Staff created successfully: {staff.id}")
    return staff


@router.get("/search", response_model=List[Staff])
async def search_staff_by_name(
    name: str = Query(..., min_length=1, description="Case-insensitive name fragment"),
    db: AsyncSession = Depends(get_db),
    service: StaffService = Depends(get_staff_service),
):
    """Search staff by a case-insensitive name fragment."""
    return await service.by_name(db, name)


@router.get("/highest-paid", response_model=Staff, responses=NOT_FOUND)
async def get_highest_paid_staff(
    db: AsyncSession = Depends(get_db),
    service: StaffService = Depends(get_staff_service),
):
    """Get the highest-paid staff member."""
    staff = await service.highest_paid(db)
    if staff is None:
        raise NoStaffError()
    return staff


@router.get("/departments", response_model=List[Department])
async def get_all_departments(
    db: AsyncSession = Depends(get_db),
    service: DepartmentService = Depends(get_department_service),
):
    """List departments (helper for staff forms)."""
    return await service.get_all(db)


@router.get("/salary-range", response_model=List[Staff], responses=BAD_REQUEST)
async def get_staff_by_salary_range(
    min_salary: Decimal = Query(..., alias="minSalary", ge=0),
    max_salary: Decimal = Query(..., alias="maxSalary", ge=0),
    db: AsyncSession = Depends(get_db),
    service: StaffService = Depends(get_staff_service),
):
    """Get staff whose salary lies between the two bounds, inclusive."""
    return await service.by_salary_range(db, min_salary, max_salary)


@router.get("/salary/{min_salary}", response_model=List[Staff], responses=BAD_REQUEST)
async def get_staff_by_minimum_salary(
    min_salary: Decimal = Path(..., ge=0),
    db: AsyncSession = Depends(get_db),
    service: StaffService = Depends(get_staff_service),
):
    """Get staff earning at least ``min_salary``."""
    return await service.by_minimum_salary(db, min_salary)


@router.get("/department/name/{department_name}", response_model=List[Staff])
async def get_staff_by_department_name(
    department_name: str,
    db: AsyncSession = Depends(get_db),
    service: StaffService = Depends(get_staff_service),
):
    """Get staff in the department with this exact name."""
    return await service.by_department_name(db, department_name)


@router.get("/department/{department_id}/count", response_model=StaffCount)
async def count_staff_by_department(
    department_id: int = Path(..., gt=0, le=MAX_ID),
    db: AsyncSession = Depends(get_db),
    service: StaffService = Depends(get_staff_service),
):
    """Count staff in a department; unknown departments count zero."""
    count = await service.count_by_department(db, department_id)
    return StaffCount(department_id=department_id, count=count)


@router.get("/department/{department_id}", response_model=List[Staff])
async def get_staff_by_department(
    department_id: int = Path(..., gt=0, le=MAX_ID),
    db: AsyncSession = Depends(get_db),
    service: StaffService = Depends(get_staff_service),
):
    """Get staff in a department."""
    return await service.by_department(db, department_id)


@router.get("/{staff_id}", response_model=Staff, responses=NOT_FOUND)
async def get_staff(
    staff_id: int = Path(..., gt=0, le=MAX_ID),
    db: AsyncSession = Depends(get_db),
    service: StaffService = Depends(get_staff_service),
):
    """Get a staff record by ID."""
    logger.info(f"Staff details requested for ID: {staff_id}")
    return await service.get_by_id(db, staff_id)


@router.put("/{staff_id}", response_model=Staff, responses={**NOT_FOUND, **BAD_REQUEST})
async def update_staff(
    staff_in: StaffUpdate,
    staff_id: int = Path(..., gt=0, le=MAX_ID),
    db: AsyncSession = Depends(get_db),
    service: StaffService = Depends(get_staff_service),
):
    """
    Replace a staff record's name, department and salary.

    Args:
        staff_id: Staff ID
        staff_in: Replacement data
        db: Database session
        service: Staff service

    Returns:
        Updated staff record
    """
    staff = await service.update(db, staff_id, staff_in)
    logger.info(f"Staff updated successfully: {staff_id}")
    return staff


@router.delete("/{staff_id}", status_code=status.HTTP_204_NO_CONTENT, responses=NOT_FOUND)
async def delete_staff(
    staff_id: int = Path(..., gt=0, le=MAX_ID),
    db: AsyncSession = Depends(get_db),
    service: StaffService = Depends(get_staff_service),
) -> None:
    """Delete a staff record."""
    await service.delete(db, staff_id)
    logger.info(f"Staff deleted successfully: {staff_id}")
