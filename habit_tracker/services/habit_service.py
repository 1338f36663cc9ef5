from __future__ import annotations
from typing import Iterable, List, Optional

from loguru import logger

from ..errors import ValidationError
from ..models.habit import Habit
from ..repositories.base import HabitRepository
from ..utils.clock import Clock, local_now
from ..utils.dates import start_of_day

class HabitService:
    """
    Creates and lists habit definitions.
    """

    def __init__(self, repo: HabitRepository, clock: Optional[Clock] = None):
        self.repo = repo
        self.clock = clock or local_now

    async def create_habit(self, title: str, week_days: Iterable[int]) -> Habit:
        """
        Create a habit stamped with today's date (midnight).
        Everything is validated before the first write.
        """
        title = (title or "").strip()
        if not title:
            raise ValidationError("title must not be empty")

        week_days = list(week_days)
        for wd in week_days:
            if isinstance(wd, bool) or not isinstance(wd, int) or not 0 <= wd <= 6:
                logger.warning("Rejected habit '{}': invalid weekday {!r}", title, wd)
                raise ValidationError(f"week day must be an integer between 0 and 6, got {wd!r}")

        created_at = start_of_day(self.clock())
        habit = await self.repo.create_habit(title, created_at, week_days)
        logger.info("Created habit {} '{}' on weekdays {}", habit.id, title, week_days)
        return habit

    async def list_habits(self) -> List[Habit]:
        return await self.repo.list_habits()
