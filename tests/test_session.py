"""
Tests for the request-scoped session dependency.
"""

import pytest
from loguru import logger
from sqlalchemy import text

from app.core.exceptions import StaffNotFoundError
from app.db import session as session_module


@pytest.fixture
def error_logs():
    messages = []
    handler_id = logger.add(messages.append, level="ERROR")
    yield messages
    logger.remove(handler_id)


@pytest.mark.asyncio
async def test_get_db_lets_domain_errors_through_silently(monkeypatch, session_factory, error_logs):
    monkeypatch.setattr(session_module, "AsyncSessionLocal", session_factory)

    dependency = session_module.get_db()
    session = await dependency.__anext__()
    assert session.is_active

    with pytest.raises(StaffNotFoundError):
        await dependency.athrow(StaffNotFoundError(7))

    assert error_logs == []


@pytest.mark.asyncio
async def test_get_db_closes_session_on_normal_exit(monkeypatch, session_factory):
    monkeypatch.setattr(session_module, "AsyncSessionLocal", session_factory)

    dependency = session_module.get_db()
    session = await dependency.__anext__()
    await session.execute(text("SELECT 1"))
    assert session.in_transaction()

    with pytest.raises(StopAsyncIteration):
        await dependency.__anext__()

    assert not session.in_transaction()
