from typing import Optional
from datetime import datetime
import uuid

from sqlmodel import SQLModel, Field, Column, UniqueConstraint
from sqlalchemy import DateTime


class Day(SQLModel, table=True):
    """
    A calendar date on which at least one habit was toggled.
    """
    __tablename__ = "days"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    # Midnight-normalized; one row per calendar date
    date: datetime = Field(
        sa_column=Column(DateTime(timezone=False), nullable=False, unique=True),
    )


class DayHabit(SQLModel, table=True):
    """
    Marks a habit as completed on a day. Absence means not completed.
    """
    __tablename__ = "day_habits"
    __table_args__ = (UniqueConstraint("day_id", "habit_id", name="uq_day_habits_day_habit"),)

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    day_id: uuid.UUID = Field(index=True, foreign_key="days.id")
    habit_id: uuid.UUID = Field(index=True, foreign_key="habits.id")
