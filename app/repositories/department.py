"""
Data access for departments.
"""

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.department import Department


class DepartmentRepository:
    """Queries and mutations on the ``department`` table."""

    async def find_by_id(self, db: AsyncSession, department_id: int) -> Optional[Department]:
        result = await db.execute(select(Department).where(Department.id == department_id))
        return result.scalars().first()

    async def find_all(self, db: AsyncSession, order_by_name: bool = True) -> List[Department]:
        query = select(Department)
        query = query.order_by(Department.name.asc() if order_by_name else Department.id.asc())
        result = await db.execute(query)
        return list(result.scalars().all())

    async def find_by_name(self, db: AsyncSession, name: str) -> Optional[Department]:
        result = await db.execute(select(Department).where(Department.name == name))
        return result.scalars().first()

    async def find_by_name_containing(self, db: AsyncSession, fragment: str) -> List[Department]:
        result = await db.execute(
            select(Department)
            .where(Department.name.icontains(fragment, autoescape=True))
            .order_by(Department.name.asc())
        )
        return list(result.scalars().all())

    async def exists_by_id(self, db: AsyncSession, department_id: int) -> bool:
        result = await db.execute(
            select(func.count(Department.id)).where(Department.id == department_id)
        )
        return result.scalar_one() > 0

    async def exists_by_name(self, db: AsyncSession, name: str) -> bool:
        result = await db.execute(
            select(func.count(Department.id)).where(Department.name == name)
        )
        return result.scalar_one() > 0

    async def save(self, db: AsyncSession, department: Department) -> Department:
        db.add(department)
        await db.flush()
        return department

    async def delete(self, db: AsyncSession, department: Department) -> None:
        await db.delete(department)
        await db.flush()
