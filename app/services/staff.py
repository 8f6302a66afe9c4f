"""
Service layer for staff operations.

This module contains the business logic for staff-related operations:
existence and referential checks before every mutation, and the filter and
aggregate queries exposed by the API.
"""

from decimal import Decimal
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import (
    DepartmentReferenceError,
    InvalidInputError,
    StaffNotFoundError,
)
from app.core.logging import logger
from app.models.base import utcnow
from app.models.department import Department
from app.models.staff import Staff
from app.repositories.department import DepartmentRepository
from app.repositories.staff import StaffRepository
from app.schemas.staff import StaffCreate, StaffUpdate


class StaffService:
    """Service class for staff operations."""

    def __init__(
        self,
        staff_repository: StaffRepository,
        department_repository: DepartmentRepository,
    ):
        self.staff_repository = staff_repository
        self.department_repository = department_repository

    async def _resolve_department(self, db: AsyncSession, department_id: int) -> Department:
        department = await self.department_repository.find_by_id(db, department_id)
        if department is None:
            logger.warning(f"Department not found while resolving staff payload, ID: {department_id}")
            raise DepartmentReferenceError(department_id)
        return department

    async def create(self, db: AsyncSession, staff_in: StaffCreate) -> Staff:
        """
        Create a new staff record.

        Args:
            db: Database session
            staff_in: Staff creation data

        Returns:
            Created staff record

        Raises:
            DepartmentReferenceError: If the department does not exist
        """
        logger.info(f"Creating new staff: {staff_in.name}")

        try:
            department = await self._resolve_department(db, staff_in.department_id)
            staff = Staff(
                name=staff_in.name,
                department=department,
                salary=staff_in.salary,
            )
            await self.staff_repository.save(db, staff)
            await db.commit()
        except Exception:
            await db.rollback()
            raise

        await db.refresh(staff)
        logger.info(f"Created staff with ID: {staff.id}")
        return staff

    async def get_by_id(self, db: AsyncSession, staff_id: int) -> Staff:
        """
        Get a staff record by ID.

        Raises:
            StaffNotFoundError: If no staff record has this ID
        """
        logger.debug(f"Getting staff by ID: {staff_id}")

        staff = await self.staff_repository.find_by_id(db, staff_id)
        if staff is None:
            raise StaffNotFoundError(staff_id)
        return staff

    async def get_all(self, db: AsyncSession) -> List[Staff]:
        logger.debug("Getting all staff")
        return await self.staff_repository.find_all(db)

    async def update(self, db: AsyncSession, staff_id: int, staff_in: StaffUpdate) -> Staff:
        """
        Replace the name, department and salary of an existing staff record.

        The ID and creation timestamp never change; ``updated_at`` is
        refreshed on every call.

        Args:
            db: Database session
            staff_id: Staff ID
            staff_in: Replacement data

        Returns:
            Updated staff record

        Raises:
            StaffNotFoundError: If no staff record has this ID
            DepartmentReferenceError: If the new department does not exist
        """
        logger.info(f"Updating staff with ID: {staff_id}")

        try:
            staff = await self.staff_repository.find_by_id(db, staff_id)
            if staff is None:
                logger.warning(f"Staff not found for update, ID: {staff_id}")
                raise StaffNotFoundError(staff_id)

            department = await self._resolve_department(db, staff_in.department_id)

            staff.name = staff_in.name
            staff.department = department
            staff.salary = staff_in.salary
            staff.updated_at = utcnow()

            await self.staff_repository.save(db, staff)
            await db.commit()
        except Exception:
            await db.rollback()
            raise

        await db.refresh(staff)
        logger.info(f"Updated staff: {staff.name}")
        return staff

    async def delete(self, db: AsyncSession, staff_id: int) -> None:
        """
        Delete a staff record.

        Raises:
            StaffNotFoundError: If no staff record has this ID
        """
        logger.info(f"Deleting staff with ID: {staff_id}")

        try:
            if not await self.staff_repository.exists_by_id(db, staff_id):
                logger.warning(f"Staff not found for deletion, ID: {staff_id}")
                raise StaffNotFoundError(staff_id)

            await self.staff_repository.delete_by_id(db, staff_id)
            await db.commit()
        except Exception:
            await db.rollback()
            raise

        logger.info(f"Deleted staff with ID: {staff_id}")

    async def by_department(self, db: AsyncSession, department_id: int) -> List[Staff]:
        logger.debug(f"Getting staff by department ID: {department_id}")
        return await self.staff_repository.find_by_department_id(db, department_id)

    async def by_department_name(self, db: AsyncSession, department_name: str) -> List[Staff]:
        logger.debug(f"Getting staff by department name: {department_name}")
        return await self.staff_repository.find_by_department_name(db, department_name)

    async def by_minimum_salary(self, db: AsyncSession, minimum: Decimal) -> List[Staff]:
        logger.debug(f"Getting staff with salary >= {minimum}")
        return await self.staff_repository.find_by_salary_greater_or_equal(db, minimum)

    async def by_salary_range(
        self, db: AsyncSession, minimum: Decimal, maximum: Decimal
    ) -> List[Staff]:
        """
        Staff whose salary lies in ``[minimum, maximum]``.

        Raises:
            InvalidInputError: If ``minimum`` is greater than ``maximum``
        """
        if minimum > maximum:
            raise InvalidInputError(
                f"Minimum salary {minimum} is greater than maximum salary {maximum}"
            )
        logger.debug(f"Getting staff with salary between {minimum} and {maximum}")
        return await self.staff_repository.find_by_salary_between(db, minimum, maximum)

    async def by_name(self, db: AsyncSession, fragment: str) -> List[Staff]:
        logger.debug(f"Searching staff by name: {fragment}")
        return await self.staff_repository.find_by_name_containing(db, fragment)

    async def highest_paid(self, db: AsyncSession) -> Optional[Staff]:
        logger.debug("Getting highest paid staff")
        return await self.staff_repository.find_top_by_salary_descending(db)

    async def count_by_department(self, db: AsyncSession, department_id: int) -> int:
        logger.debug(f"Counting staff in department ID: {department_id}")
        return await self.staff_repository.count_by_department_id(db, department_id)
