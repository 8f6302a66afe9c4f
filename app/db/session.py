"""
Database session management.

This module provides utilities for creating and managing database sessions
using async SQLAlchemy with PostgreSQL (asyncpg) or SQLite (aiosqlite).
"""

from typing import Any, AsyncGenerator, Dict

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from app.core.config import settings, DatabaseSettings
from app.core.logging import logger
from app.models import Base


def build_engine(database: DatabaseSettings, echo: bool = False) -> AsyncEngine:
    """Create the async engine, applying pool sizing only where the driver pools."""
    options: Dict[str, Any] = {"echo": echo, "future": True}
    if not database.is_sqlite:
        options.update(
            pool_size=database.pool_size,
            max_overflow=database.max_overflow,
            pool_pre_ping=True,
            pool_recycle=database.pool_recycle,
        )
    return create_async_engine(database.url, **options)


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite ignores FOREIGN KEY constraints unless asked per connection."""
    if "sqlite" in type(dbapi_connection).__module__:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# Create async engine
engine = build_engine(settings.database, echo=settings.debug)

# Create async session factory
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def init_models(bind: AsyncEngine = engine) -> None:
    """Create all tables that do not exist yet."""
    logger.info("Creating database tables")
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Get a database session.

    This function is used as a dependency in FastAPI endpoints to provide
    a database session. Anything not committed by the service layer is
    rolled back when the session closes.

    Yields:
        AsyncSession: Database session
    """
    async with AsyncSessionLocal() as session:
        yield session
