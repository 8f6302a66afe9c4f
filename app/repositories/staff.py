"""
Data access for staff records.

Besides plain CRUD this module holds the derived filter queries: by
department, by name fragment, by salary floor or range, counting and the
top earner.
"""

from decimal import Decimal
from typing import List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.department import Department
from app.models.staff import Staff


class StaffRepository:
    """Queries and mutations on the ``staff`` table."""

    async def find_by_id(self, db: AsyncSession, staff_id: int) -> Optional[Staff]:
        result = await db.execute(select(Staff).where(Staff.id == staff_id))
        return result.scalars().first()

    async def find_all(self, db: AsyncSession, order_by_name: bool = False) -> List[Staff]:
        query = select(Staff)
        query = query.order_by(Staff.name.asc(), Staff.id.asc()) if order_by_name else query.order_by(Staff.id.asc())
        result = await db.execute(query)
        return list(result.scalars().all())

    async def exists_by_id(self, db: AsyncSession, staff_id: int) -> bool:
        result = await db.execute(select(func.count(Staff.id)).where(Staff.id == staff_id))
        return result.scalar_one() > 0

    async def save(self, db: AsyncSession, staff: Staff) -> Staff:
        """Insert a new record or flush changes to a tracked one."""
        db.add(staff)
        await db.flush()
        return staff

    async def delete_by_id(self, db: AsyncSession, staff_id: int) -> int:
        """Delete by primary key and return the number of rows removed."""
        result = await db.execute(delete(Staff).where(Staff.id == staff_id))
        return result.rowcount

    async def find_by_department_id(self, db: AsyncSession, department_id: int) -> List[Staff]:
        result = await db.execute(
            select(Staff)
            .where(Staff.department_id == department_id)
            .order_by(Staff.name.asc(), Staff.id.asc())
        )
        return list(result.scalars().all())

    async def find_by_department_name(self, db: AsyncSession, department_name: str) -> List[Staff]:
        result = await db.execute(
            select(Staff)
            .join(Department, Staff.department_id == Department.id)
            .where(Department.name == department_name)
            .order_by(Staff.name.asc(), Staff.id.asc())
        )
        return list(result.scalars().all())

    async def find_by_name_containing(self, db: AsyncSession, fragment: str) -> List[Staff]:
        """Case-insensitive substring match on the staff name."""
        result = await db.execute(
            select(Staff)
            .where(Staff.name.icontains(fragment, autoescape=True))
            .order_by(Staff.name.asc(), Staff.id.asc())
        )
        return list(result.scalars().all())

    async def find_by_salary_greater_or_equal(
        self, db: AsyncSession, threshold: Decimal
    ) -> List[Staff]:
        result = await db.execute(
            select(Staff)
            .where(Staff.salary >= threshold)
            .order_by(Staff.salary.desc(), Staff.id.asc())
        )
        return list(result.scalars().all())

    async def find_by_salary_between(
        self, db: AsyncSession, minimum: Decimal, maximum: Decimal
    ) -> List[Staff]:
        """Both bounds are inclusive."""
        result = await db.execute(
            select(Staff)
            .where(Staff.salary.between(minimum, maximum))
            .order_by(Staff.salary.asc(), Staff.id.asc())
        )
        return list(result.scalars().all())

    async def count_by_department_id(self, db: AsyncSession, department_id: int) -> int:
        result = await db.execute(
            select(func.count(Staff.id)).where(Staff.department_id == department_id)
        )
        return result.scalar_one()

    async def find_top_by_salary_descending(self, db: AsyncSession) -> Optional[Staff]:
        """The highest-paid staff member, or None when the table is empty."""
        result = await db.execute(
            select(Staff).order_by(Staff.salary.desc(), Staff.id.asc()).limit(1)
        )
        return result.scalars().first()
