import pytest
from datetime import datetime
from sqlalchemy import DateTime

from habit_tracker.models.day import Day
from habit_tracker.models.habit import Habit

MONDAY = datetime(2024, 1, 15)


@pytest.mark.parametrize("column", [Habit.__table__.c.created_at, Day.__table__.c.date])
def test_datetime_columns_are_naive(column):
    assert isinstance(column.type, DateTime)
    assert column.type.timezone is False


def test_day_date_is_unique_and_habit_created_at_indexed():
    assert Day.__table__.c.date.unique is True
    assert Habit.__table__.c.created_at.index is True


@pytest.mark.asyncio
async def test_naive_midnight_values_round_trip(repo, db_session):
    habit = await repo.create_habit("Sleep early", MONDAY, [1])
    day = await repo.create_day(MONDAY)
    await db_session.commit()
    db_session.expire_all()

    [loaded] = await repo.list_habits()
    assert loaded.id == habit.id
    assert loaded.created_at == MONDAY
    assert loaded.created_at.tzinfo is None

    found = await repo.find_day_by_date(MONDAY)
    assert found is not None
    assert found.id == day.id
    assert found.date.tzinfo is None

    assert [h.id for h in await repo.find_habits_due_on(1, MONDAY)] == [habit.id]
