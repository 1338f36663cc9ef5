from __future__ import annotations
from collections import defaultdict
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Set, Tuple
import uuid

from ..repositories.base import HabitRepository
from ..utils.dates import weekday_index


@dataclass
class DaySummary:
    day_id: uuid.UUID
    date: datetime
    completed_count: int
    available_count: int


class SummaryService:
    """
    Completed vs. available habit counts for every recorded day.
    """

    def __init__(self, repo: HabitRepository):
        self.repo = repo

    async def summarize(self) -> List[DaySummary]:
        days = await self.repo.list_days()
        if not days:
            return []

        assignments = await self.repo.list_habit_week_days()
        completed_by_day = await self.repo.count_day_habits_by_day()

        # weekday -> habits assigned to it; a set so duplicate assignments count once
        by_weekday: Dict[int, Set[Tuple[uuid.UUID, datetime]]] = defaultdict(set)
        for habit_id, created_at, week_day in assignments:
            by_weekday[week_day].add((habit_id, created_at))

        summary = []
        for day in sorted(days, key=lambda d: d.date):
            weekday = weekday_index(day.date)
            available = sum(1 for _, created_at in by_weekday.get(weekday, ()) if created_at <= day.date)
            summary.append(
                DaySummary(
                    day_id=day.id,
                    date=day.date,
                    completed_count=completed_by_day.get(day.id, 0),
                    available_count=available,
                )
            )
        return summary
