from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from loguru import logger

from .config import settings


def configure_sqlite(engine: AsyncEngine) -> None:
    """
    Turn on foreign keys and let SQLAlchemy emit BEGIN itself, so that
    SAVEPOINTs (used to survive unique-constraint races) behave on SQLite.
    """
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine.sync_engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")


engine = create_async_engine(settings.DATABASE_URL, echo=settings.DB_ECHO, future=True)
configure_sqlite(engine)
AsyncSessionLocal = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

async def init_db(bind: AsyncEngine = engine) -> None:
    """Create tables."""
    from .models.habit import Habit, HabitWeekDay  # noqa: F401
    from .models.day import Day, DayHabit  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Database tables created/verified")

@asynccontextmanager
async def get_session() -> AsyncGenerator[AsyncSession, None]:
    session = AsyncSessionLocal()
    try:
        yield session
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    finally:
        await session.close()

async def session_dependency() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: one session (unit of work) per request."""
    async with get_session() as session:
        yield session
