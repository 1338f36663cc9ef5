import os
import sys

# Put the repository root on sys.path so the habit_tracker package imports without installing
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from datetime import datetime

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from habit_tracker.db import configure_sqlite, init_db, session_dependency
from habit_tracker.repositories.sql import SqlHabitRepository


class FixedClock:
    """Callable clock the tests can move around."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest_asyncio.fixture
async def db_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    configure_sqlite(engine)
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine):
    session_factory = sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest.fixture
def repo(db_session):
    return SqlHabitRepository(db_session)


@pytest.fixture
def clock():
    # 2024-01-15 is a Monday
    return FixedClock(datetime(2024, 1, 15, 9, 30))


@pytest_asyncio.fixture
async def client(db_session):
    from habit_tracker import main

    async def override_session():
        yield db_session

    main.app.dependency_overrides[session_dependency] = override_session
    transport = ASGITransport(app=main.app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    main.app.dependency_overrides.clear()
