"""
Workout day template model.

A workout day is a slot in the user's weekly template (``day_number``
1 = Monday … 7 = Sunday).  Only its name changes after onboarding.
"""

import datetime
from typing import Optional

from sqlalchemy import DateTime, UniqueConstraint
from sqlmodel import Field, SQLModel

from app.core.clock import utc_now


class WorkoutDay(SQLModel, table=True):
    """A day in the user's weekly template.

    One row per ``(user_id, day_number)`` (enforced by unique constraint).
    """

    __tablename__ = "workout_days"
    __table_args__ = (UniqueConstraint("user_id", "day_number", name="uq_workout_day_user_number"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(nullable=False, index=True)
    day_number: int = Field(nullable=False, ge=1, le=7)
    name: str = Field(nullable=False, max_length=100)

    created_at: datetime.datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
