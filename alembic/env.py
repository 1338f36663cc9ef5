from logging.config import fileConfig

import asyncio
from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine

from alembic import context

# alembic.ini values
config = context.config

# Logging sections from alembic.ini
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

from sqlmodel import SQLModel
from habit_tracker.config import settings

# Habit and day tables, the same set init_db() creates
from habit_tracker.models.habit import Habit, HabitWeekDay  # noqa: F401
from habit_tracker.models.day import Day, DayHabit  # noqa: F401

target_metadata = SQLModel.metadata


def run_migrations_offline() -> None:
    """Emit SQL for DATABASE_URL without connecting."""

    url = settings.DATABASE_URL
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        render_as_batch=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    """Apply habit table revisions on a sync connection."""
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,
        # SQLite cannot ALTER most constraints in place
        render_as_batch=True,
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    """Apply revisions against DATABASE_URL through aiosqlite."""

    connectable = create_async_engine(
        settings.DATABASE_URL,
        poolclass=pool.NullPool,
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
