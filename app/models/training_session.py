"""
Training session database model.

A session is the dated instance of a workout day: the row set logs hang
off.  At most one session exists per ``(user_id, workout_day_id, date)``;
the session resolver relies on that constraint to settle concurrent
creates.
"""

import datetime
from typing import Optional

from sqlalchemy import Column, DateTime, ForeignKey, Integer, UniqueConstraint
from sqlmodel import Field, SQLModel

from app.core.clock import utc_now


class TrainingSession(SQLModel, table=True):
    """A single training session.

    ``workout_day_id`` is a weak reference: it is nulled if the day
    template goes away, and the session stays queryable by date.
    """

    __tablename__ = "training_sessions"
    __table_args__ = (
        UniqueConstraint("user_id", "workout_day_id", "date", name="uq_training_user_day_date", ),)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(nullable=False, index=True)
    workout_day_id: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, ForeignKey("workout_days.id", ondelete="SET NULL"), nullable=True, index=True), )
    date: datetime.date = Field(nullable=False, index=True)

    # Session metadata
    notes: Optional[str] = Field(default=None, max_length=1000)
    completed_at: Optional[datetime.datetime] = Field(default=None, sa_type=DateTime(timezone=True))

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    updated_at: datetime.datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
