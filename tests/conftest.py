"""
Configuration for pytest.

This module provides fixtures and configuration for running tests. Every
test gets its own in-memory SQLite database.
"""

import os

os.environ.setdefault("ENVIRONMENT", "testing")

from decimal import Decimal

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.db.session import get_db
from app.main import app
from app.models import Base, Department, Staff
from app.repositories import DepartmentRepository, StaffRepository
from app.services import DepartmentService, StaffService

# Test database URL
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def test_engine():
    """Create a fresh in-memory database with all tables."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory):
    """Create a test database session."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def staff_repository():
    return StaffRepository()


@pytest.fixture
def department_repository():
    return DepartmentRepository()


@pytest.fixture
def staff_service(staff_repository, department_repository):
    return StaffService(staff_repository, department_repository)


@pytest.fixture
def department_service(department_repository, staff_repository):
    return DepartmentService(department_repository, staff_repository)


@pytest.fixture
async def department(db_session):
    """A persisted department."""
    department = Department(name="Computer Science", description="Computer Science Department")
    db_session.add(department)
    await db_session.commit()
    await db_session.refresh(department)
    return department


@pytest.fixture
def make_staff(db_session):
    """Factory that persists a staff record directly through the session."""
    async def _make_staff(name: str, department: Department, salary: str) -> Staff:
        staff = Staff(name=name, department=department, salary=Decimal(salary))
        db_session.add(staff)
        await db_session.commit()
        await db_session.refresh(staff)
        return staff
    return _make_staff


@pytest.fixture
async def async_client(session_factory):
    """Create an async test client bound to the per-test database."""
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
