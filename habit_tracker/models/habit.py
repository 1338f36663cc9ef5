from typing import List, Optional
from datetime import datetime
import uuid

from sqlmodel import SQLModel, Field, Relationship, Column
from sqlalchemy import DateTime


class Habit(SQLModel, table=True):
    """
    A recurring task, due on a fixed set of weekdays.
    """
    __tablename__ = "habits"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    title: str = Field(max_length=200)

    # Always midnight of the creation day
    created_at: datetime = Field(
        sa_column=Column(DateTime(timezone=False), nullable=False, index=True),
    )

    week_days: List["HabitWeekDay"] = Relationship(
        back_populates="habit",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"},
    )

    @property
    def week_day_values(self) -> List[int]:
        return [wd.week_day for wd in self.week_days]


class HabitWeekDay(SQLModel, table=True):
    """
    One weekday a habit applies to (0 = Sunday ... 6 = Saturday).
    """
    __tablename__ = "habit_week_days"

    id: Optional[int] = Field(default=None, primary_key=True)
    habit_id: uuid.UUID = Field(index=True, foreign_key="habits.id")
    habit: Optional[Habit] = Relationship(back_populates="week_days")

    week_day: int = Field(ge=0, le=6, index=True)
