from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
import uuid

from loguru import logger

from ..errors import ConflictError, NotFoundError
from ..models.day import Day
from ..repositories.base import HabitRepository
from ..utils.clock import Clock, local_now
from ..utils.dates import start_of_day


@dataclass
class ToggleResult:
    habit_id: uuid.UUID
    completed: bool
    date: datetime

    @property
    def message(self) -> str:
        state = "completed" if self.completed else "uncompleted"
        return f"Habit {self.habit_id} is set to '{state}' on day {self.date.day}"


class CompletionService:
    """
    Flips a habit between completed and not completed for today.
    """

    def __init__(self, repo: HabitRepository, clock: Optional[Clock] = None):
        self.repo = repo
        self.clock = clock or local_now

    async def toggle(self, habit_id: uuid.UUID) -> ToggleResult:
        habit = await self.repo.get_habit(habit_id)
        if habit is None:
            raise NotFoundError(f"Habit {habit_id} not found")

        today = start_of_day(self.clock())
        day = await self.get_or_create_day(today)

        link = await self.repo.find_day_habit(day.id, habit_id)
        if link is None:
            try:
                await self.repo.create_day_habit(day.id, habit_id)
            except ConflictError:
                # A concurrent toggle already completed it
                logger.info("Habit {} was completed concurrently on {}", habit_id, today.date())
            completed = True
        else:
            await self.repo.delete_day_habit(link.id)
            completed = False

        logger.info("Habit {} completed={} on {}", habit_id, completed, today.date())
        return ToggleResult(habit_id=habit_id, completed=completed, date=day.date)

    async def get_or_create_day(self, day_date: datetime) -> Day:
        """
        Fetch the day record, creating it on first use.
        Losing a creation race falls back to the row the winner inserted.
        """
        day = await self.repo.find_day_by_date(day_date)
        if day is not None:
            return day

        try:
            return await self.repo.create_day(day_date)
        except ConflictError:
            day = await self.repo.find_day_by_date(day_date)
            if day is None:
                raise
            logger.debug("Day {} created concurrently; reusing it", day_date.date())
            return day
