from __future__ import annotations
from datetime import datetime
from typing import Annotated, List
import uuid

from pydantic import BaseModel, Field

from .models.habit import Habit
from .services.summary_service import DaySummary

WeekDay = Annotated[int, Field(ge=0, le=6)]

class HabitCreate(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    weekDays: List[WeekDay]

class HabitRead(BaseModel):
    id: uuid.UUID
    title: str
    created_at: datetime
    weekDays: List[int]

    @classmethod
    def from_habit(cls, habit: Habit) -> "HabitRead":
        return cls(
            id=habit.id,
            title=habit.title,
            created_at=habit.created_at,
            weekDays=habit.week_day_values,
        )

class DayRead(BaseModel):
    weekday: int
    asignedhabits: List[HabitRead]
    completedHabits: List[uuid.UUID]

class SummaryRow(BaseModel):
    id: uuid.UUID
    date: datetime
    completed: int
    amount: int

    @classmethod
    def from_summary(cls, row: DaySummary) -> "SummaryRow":
        return cls(id=row.day_id, date=row.date, completed=row.completed_count, amount=row.available_count)
