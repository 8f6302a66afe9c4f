"""
Service layer for department operations.

This module contains the business logic for department-related operations,
abstracting away the database operations from the API endpoints.
"""

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import (
    DepartmentInUseError,
    DepartmentNotFoundError,
    DuplicateDepartmentError,
)
from app.core.logging import logger
from app.models.department import Department
from app.repositories.department import DepartmentRepository
from app.repositories.staff import StaffRepository
from app.schemas.department import DepartmentCreate, DepartmentUpdate


class DepartmentService:
    """Service class for department operations."""

    def __init__(
        self,
        department_repository: DepartmentRepository,
        staff_repository: StaffRepository,
    ):
        self.department_repository = department_repository
        self.staff_repository = staff_repository

    async def create(self, db: AsyncSession, department_in: DepartmentCreate) -> Department:
        """
        Create a new department.

        Args:
            db: Database session
            department_in: Department creation data

        Returns:
            Created department

        Raises:
            DuplicateDepartmentError: If the name is already taken
        """
        logger.info(f"Creating new department: {department_in.name}")

        try:
            if await self.department_repository.exists_by_name(db, department_in.name):
                logger.warning(f"Department name already exists: {department_in.name}")
                raise DuplicateDepartmentError(department_in.name)

            department = Department(
                name=department_in.name,
                description=department_in.description,
            )
            await self.department_repository.save(db, department)
            await db.commit()
        except Exception:
            await db.rollback()
            raise

        await db.refresh(department)
        logger.info(f"Created department with ID: {department.id}")
        return department

    async def get_by_id(self, db: AsyncSession, department_id: int) -> Department:
        """
        Get a department by ID.

        Raises:
            DepartmentNotFoundError: If no department has this ID
        """
        logger.debug(f"Getting department by ID: {department_id}")

        department = await self.department_repository.find_by_id(db, department_id)
        if department is None:
            raise DepartmentNotFoundError(department_id)
        return department

    async def get_all(self, db: AsyncSession) -> List[Department]:
        """All departments ordered by name."""
        logger.debug("Getting all departments")
        return await self.department_repository.find_all(db, order_by_name=True)

    async def update(
        self, db: AsyncSession, department_id: int, department_in: DepartmentUpdate
    ) -> Department:
        """
        Replace a department's name and description.

        Raises:
            DepartmentNotFoundError: If no department has this ID
            DuplicateDepartmentError: If another department already has the name
        """
        logger.info(f"Updating department with ID: {department_id}")

        try:
            department = await self.department_repository.find_by_id(db, department_id)
            if department is None:
                logger.warning(f"Department not found for update, ID: {department_id}")
                raise DepartmentNotFoundError(department_id)

            if department_in.name != department.name:
                if await self.department_repository.exists_by_name(db, department_in.name):
                    logger.warning(f"Department name already exists: {department_in.name}")
                    raise DuplicateDepartmentError(department_in.name)

            department.name = department_in.name
            department.description = department_in.description

            await self.department_repository.save(db, department)
            await db.commit()
        except Exception:
            await db.rollback()
            raise

        await db.refresh(department)
        logger.info(f"Updated department: {department.name}")
        return department

    async def delete(self, db: AsyncSession, department_id: int) -> None:
        """
        Delete a department that has no staff left.

        Raises:
            DepartmentNotFoundError: If no department has this ID
            DepartmentInUseError: If staff are still assigned to it
        """
        logger.info(f"Deleting department with ID: {department_id}")

        try:
            department = await self.department_repository.find_by_id(db, department_id)
            if department is None:
                logger.warning(f"Department not found for deletion, ID: {department_id}")
                raise DepartmentNotFoundError(department_id)

            staff_count = await self.staff_repository.count_by_department_id(db, department_id)
            if staff_count:
                logger.warning(
                    f"Refusing to delete department {department_id} with {staff_count} staff"
                )
                raise DepartmentInUseError(department_id, staff_count)

            await self.department_repository.delete(db, department)
            await db.commit()
        except Exception:
            await db.rollback()
            raise

        logger.info(f"Deleted department: {department.name}")
