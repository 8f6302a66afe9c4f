"""
Department API endpoints.
This module provides CRUD endpoints for departments.
"""
from typing import List
from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.deps import get_department_service
from app.core.logging import logger
from app.db.session import get_db
from app.schemas.common import MAX_ID
from app.schemas.department import (
    Department,
    DepartmentCreate,
    DepartmentUpdate,
)
from app.schemas.error import ErrorResponse
from app.services.department import DepartmentService

router = APIRouter()

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
CONFLICT = {status.HTTP_409_CONFLICT: {"model": ErrorResponse}}

@router.post("", response_model=Department, status_code=status.HTTP_201_CREATED, responses=CONFLICT)
async def create_department(
    department_in: DepartmentCreate,
    db: AsyncSession = Depends(get_db),
    service: DepartmentService = Depends(get_department_service),
) -> Department:
    """
    Create a new department.

    Args:
        department_in: Department creation data
        db: Database session
        service: Department service

    Returns:
        Created department
    """
    department = await service.create(db, department_in)
    logger.info(f"Department created successfully: {department.id}")
    return department

@router.get("/{department_id}", response_model=Department, responses=NOT_FOUND)
async def get_department(
    department_id: int = Path(..., gt=0, le=MAX_ID),
    db: AsyncSession = Depends(get_db),
    service: DepartmentService = Depends(get_department_service),
) -> Department:
    """
    Get a department by ID.

    Args:
        department_id: Department ID
        db: Database session
        service: Department service

    Returns:
        Department details
    """
    logger.info(f"Department details requested for ID: {department_id}")
    return await service.get_by_id(db, department_id)

@router.get("", response_model=List[Department])
async def get_all_departments(
    db: AsyncSession = Depends(get_db),
    service: DepartmentService = Depends(get_department_service),
):
    """Get all departments ordered by name."""
    departments = await service.get_all(db)
    logger.info(f"Retrieved {len(departments)} departments")
    return departments

@router.put("/{department_id}", response_model=Department, responses={**NOT_FOUND, **CONFLICT})
async def update_department(
    department_in: DepartmentUpdate,
    department_id: int = Path(..., gt=0, le=MAX_ID),
    db: AsyncSession = Depends(get_db),
    service: DepartmentService = Depends(get_department_service),
) -> Department:
    """
    Replace a department's name and description.

    Args:
        department_id: Department ID
        department_in: Department update data
        db: Database session
        service: Department service

    Returns:
        Updated department
    """
    department = await service.update(db, department_id, department_in)
    logger.info(f"Department updated successfully: {department_id}")
    return department

@router.delete("/{department_id}", status_code=status.HTTP_204_NO_CONTENT, responses={**NOT_FOUND, **CONFLICT})
async def delete_department(
    department_id: int = Path(..., gt=0, le=MAX_ID),
    db: AsyncSession = Depends(get_db),
    service: DepartmentService = Depends(get_department_service),
) -> None:
    """
    Delete a department. Departments that still have staff cannot be deleted.

    Args:
        department_id: Department ID
        db: Database session
        service: Department service
    """
    await service.delete(db, department_id)
    logger.info(f"Department deleted successfully: {department_id}")
