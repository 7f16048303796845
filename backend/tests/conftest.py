"""
DreamHome API — Test Configuration (conftest.py)
==================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session: Mock AsyncSession for service unit tests
    ├── db_engine: Async SQLite engine with the four tables created
    └── test_client: HTTPX AsyncClient bound to the app, sessions from db_engine
"""

import os
import tempfile
from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

# Override settings for testing BEFORE any app imports so the module-level
# engine never targets a real MySQL server
os.environ["DATABASE_URL"] = (
    f"sqlite+aiosqlite:///{tempfile.mkdtemp(prefix='dreamhome_test_')}/unused.db"
)
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.database import Base, get_db_session
from app.main import app as fastapi_app


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get(mock_db_session):
            mock_db_session.execute.return_value.scalar_one_or_none.return_value = row
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    """
    A fresh SQLite database file per test, with all tables created.

    SQLite ignores foreign keys unless asked per connection; MySQL's InnoDB
    always enforces them.
    """
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path}/dreamhome.db")

    @event.listens_for(engine.sync_engine, "connect")
    def enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def test_client(db_engine):
    """
    HTTPX AsyncClient talking to the FastAPI app through ASGITransport.

    get_db_session is overridden to hand out sessions on db_engine with the
    same commit-on-success / rollback-on-error behavior as production.
    """
    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)

    async def override_session() -> AsyncGenerator[AsyncSession, None]:
        async with factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    fastapi_app.dependency_overrides[get_db_session] = override_session
    transport = ASGITransport(app=fastapi_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def sample_branch():
    return {"branchNo": "B005", "street": "22 Deer Rd", "city": "London", "postcode": "SW1 4EH"}


@pytest.fixture
def sample_staff():
    return {
        "staffNo": "SL21",
        "fName": "John",
        "lName": "White",
        "position": "Manager",
        "salary": 30000,
        "branchNo": "B005",
    }


@pytest.fixture
def sample_property():
    return {
        "propertyNo": "PG16",
        "street": "5 Novar Dr",
        "city": "Glasgow",
        "postcode": "G12 9AX",
        "type": "Flat",
        "rooms": 4,
        "rent": 450,
        "ownerNo": "CO93",
        "staffNo": "SL21",
        "branchNo": "B005",
    }


@pytest.fixture
def sample_client():
    return {
        "clientNo": "CR76",
        "fName": "John",
        "lName": "Kay",
        "telNo": "0207-774-5632",
        "prefType": "Flat",
        "maxRent": 425,
        "regBranchNo": "B005",
        "regStaffNo": "SL21",
    }
