"""Persistence port consumed by the habit services."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional, Protocol, Sequence, Tuple
import uuid

from ..models.habit import Habit
from ..models.day import Day, DayHabit


class HabitRepository(Protocol):
    """Storage for habits, their weekdays, days and completion links."""

    async def create_habit(self, title: str, created_at: datetime, week_days: Sequence[int]) -> Habit:
        """Persist a habit with one weekday row per entry in week_days."""
        ...

    async def list_habits(self) -> List[Habit]:
        """All habits, weekdays loaded."""
        ...

    async def get_habit(self, habit_id: uuid.UUID) -> Optional[Habit]:
        ...

    async def find_habits_due_on(self, week_day: int, not_created_after: datetime) -> List[Habit]:
        """Habits assigned to week_day and created on or before not_created_after."""
        ...

    async def find_day_by_date(self, day_date: datetime) -> Optional[Day]:
        ...

    async def create_day(self, day_date: datetime) -> Day:
        """Insert a day. Raises ConflictError if the date already exists."""
        ...

    async def list_completed_habit_ids(self, day_id: uuid.UUID) -> List[uuid.UUID]:
        ...

    async def find_day_habit(self, day_id: uuid.UUID, habit_id: uuid.UUID) -> Optional[DayHabit]:
        ...

    async def create_day_habit(self, day_id: uuid.UUID, habit_id: uuid.UUID) -> DayHabit:
        """Insert a completion link. Raises ConflictError if it already exists."""
        ...

    async def delete_day_habit(self, link_id: uuid.UUID) -> None:
        ...

    # Summary primitives
    async def list_days(self) -> List[Day]:
        """All days ordered by date."""
        ...

    async def list_habit_week_days(self) -> List[Tuple[uuid.UUID, datetime, int]]:
        """(habit_id, habit created_at, week_day) for every weekday assignment."""
        ...

    async def count_day_habits_by_day(self) -> Dict[uuid.UUID, int]:
        """Number of completion links per day id."""
        ...
