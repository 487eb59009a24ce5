"""Service test fixtures — async DB, repositories and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test session factory
    - db_manager patched so readiness probes see the test engine

Design Decisions:
    - SQLite in-memory via aiosqlite with StaticPool: one shared connection,
      so every session in a test sees the same tables and rows
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from socialmedia.db.base import Base
from socialmedia.infrastructure.database import get_db, DatabaseSessionManager
from socialmedia.infrastructure.account_repository import SqlAlchemyAccountRepository
from socialmedia.infrastructure.message_repository import SqlAlchemyMessageRepository
from socialmedia.models.account import Account
from socialmedia.services.account_service import AccountService
from socialmedia.services.message_service import MessageService
import socialmedia.infrastructure.database as db_module
import socialmedia.models  # noqa: F401
from socialmedia.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def account_service(test_db):
    return AccountService(SqlAlchemyAccountRepository(test_db))


@pytest.fixture
def message_service(test_db):
    return MessageService(
        SqlAlchemyMessageRepository(test_db), SqlAlchemyAccountRepository(test_db),
    )


@pytest.fixture
async def seed_account(test_db):
    """Insert one account directly into the test DB."""
    account = Account(username="ann", password="secret")
    test_db.add(account)
    await test_db.commit()
    await test_db.refresh(account)
    return account


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory

    async def override_get_db():
        async with manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    db_module.db_manager = manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
