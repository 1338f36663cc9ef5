from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Optional
import uuid

from ..config import settings
from ..models.habit import Habit
from ..repositories.base import HabitRepository
from ..utils.dates import start_of_day, to_local, weekday_index


@dataclass
class DayStatus:
    date: datetime
    weekday: int
    due_habits: List[Habit] = field(default_factory=list)
    completed_habit_ids: List[uuid.UUID] = field(default_factory=list)


class DayService:
    """
    Works out which habits apply on a date and which of them are done.
    """

    def __init__(self, repo: HabitRepository, tz_name: Optional[str] = None):
        self.repo = repo
        self.tz_name = tz_name if tz_name is not None else settings.APP_TIMEZONE

    async def resolve(self, value: datetime | date) -> DayStatus:
        # Normalize once; created_at filter and the day lookup must agree on "the day"
        if isinstance(value, datetime):
            value = to_local(value, self.tz_name)
        day0 = start_of_day(value)
        weekday = weekday_index(day0)

        due = await self.repo.find_habits_due_on(weekday, day0)

        day = await self.repo.find_day_by_date(day0)
        completed: List[uuid.UUID] = []
        if day is not None:
            completed = await self.repo.list_completed_habit_ids(day.id)

        return DayStatus(date=day0, weekday=weekday, due_habits=due, completed_habit_ids=completed)
