"""
Exercise template model.

Exercises belong to a workout day and are listed by ``sort_order``.  Their
name and muscle group are copied onto every set log at write time, so
logs survive the exercise being removed.
"""

import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

from app.core.clock import utc_now


class Exercise(SQLModel, table=True):
    """An exercise planned on a workout day."""

    __tablename__ = "exercises"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(nullable=False, index=True)
    workout_day_id: int = Field(foreign_key="workout_days.id", nullable=False, index=True)
    name: str = Field(nullable=False, max_length=200)
    muscle_group: Optional[str] = Field(default=None, max_length=100)
    sort_order: int = Field(default=0, nullable=False)

    created_at: datetime.datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
