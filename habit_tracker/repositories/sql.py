from __future__ import annotations
from datetime import datetime
from typing import Dict, List, Optional, Sequence, Tuple
import uuid

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlmodel import select, delete, func
from loguru import logger

from ..errors import ConflictError
from ..models.habit import Habit, HabitWeekDay
from ..models.day import Day, DayHabit


class SqlHabitRepository:
    """
    HabitRepository on top of an AsyncSession. Flushes but never commits;
    the caller owns the transaction.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_habit(self, title: str, created_at: datetime, week_days: Sequence[int]) -> Habit:
        habit = Habit(
            title=title,
            created_at=created_at,
            week_days=[HabitWeekDay(week_day=wd) for wd in week_days],
        )
        self.session.add(habit)
        await self.session.flush()
        return habit

    async def list_habits(self) -> List[Habit]:
        result = await self.session.execute(
            select(Habit).options(selectinload(Habit.week_days)).order_by(Habit.created_at)
        )
        return list(result.scalars().all())

    async def get_habit(self, habit_id: uuid.UUID) -> Optional[Habit]:
        return await self.session.get(Habit, habit_id)

    async def find_habits_due_on(self, week_day: int, not_created_after: datetime) -> List[Habit]:
        assigned = select(HabitWeekDay.habit_id).where(HabitWeekDay.week_day == week_day)
        result = await self.session.execute(
            select(Habit)
            .where(
                Habit.created_at <= not_created_after,
                Habit.id.in_(assigned),
            )
            .options(selectinload(Habit.week_days))
            .order_by(Habit.created_at)
        )
        return list(result.scalars().all())

    async def find_day_by_date(self, day_date: datetime) -> Optional[Day]:
        result = await self.session.execute(select(Day).where(Day.date == day_date))
        return result.scalar_one_or_none()

    async def create_day(self, day_date: datetime) -> Day:
        day = Day(date=day_date)
        try:
            # Savepoint so a lost race does not poison the outer transaction
            async with self.session.begin_nested():
                self.session.add(day)
        except IntegrityError as e:
            logger.debug("Day {} already exists: {}", day_date.date(), e)
            raise ConflictError(f"Day {day_date.date()} already exists") from e
        return day

    async def list_completed_habit_ids(self, day_id: uuid.UUID) -> List[uuid.UUID]:
        result = await self.session.execute(
            select(DayHabit.habit_id).where(DayHabit.day_id == day_id)
        )
        return list(result.scalars().all())

    async def find_day_habit(self, day_id: uuid.UUID, habit_id: uuid.UUID) -> Optional[DayHabit]:
        result = await self.session.execute(
            select(DayHabit).where(
                DayHabit.day_id == day_id,
                DayHabit.habit_id == habit_id,
            )
        )
        return result.scalar_one_or_none()

    async def create_day_habit(self, day_id: uuid.UUID, habit_id: uuid.UUID) -> DayHabit:
        link = DayHabit(day_id=day_id, habit_id=habit_id)
        try:
            async with self.session.begin_nested():
                self.session.add(link)
        except IntegrityError as e:
            raise ConflictError(f"Habit {habit_id} is already completed on day {day_id}") from e
        return link

    async def delete_day_habit(self, link_id: uuid.UUID) -> None:
        await self.session.execute(delete(DayHabit).where(DayHabit.id == link_id))
        await self.session.flush()

    async def list_days(self) -> List[Day]:
        result = await self.session.execute(select(Day).order_by(Day.date))
        return list(result.scalars().all())

    async def list_habit_week_days(self) -> List[Tuple[uuid.UUID, datetime, int]]:
        result = await self.session.execute(
            select(Habit.id, Habit.created_at, HabitWeekDay.week_day)
            .join(HabitWeekDay, HabitWeekDay.habit_id == Habit.id)
        )
        return [(row[0], row[1], row[2]) for row in result.all()]

    async def count_day_habits_by_day(self) -> Dict[uuid.UUID, int]:
        result = await self.session.execute(
            select(DayHabit.day_id, func.count(DayHabit.id)).group_by(DayHabit.day_id)
        )
        return {day_id: count for day_id, count in result.all()}
