"""
Set log database model.

One recorded ``(reps, weight)`` pair for one exercise within one session.
``exercise_name`` and ``muscle_group`` are denormalised from the exercise
template so analytics keep working after the template is deleted.
"""

import datetime
from typing import Optional

from sqlalchemy import Column, DateTime, ForeignKey, Integer
from sqlmodel import Field, SQLModel

from app.core.clock import utc_now


class SetLog(SQLModel, table=True):
    """A logged set.

    ``set_number`` is assigned once at creation (existing sets for the
    exercise in the session + 1) and never renumbered.
    """

    __tablename__ = "set_logs"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(nullable=False, index=True)
    training_session_id: int = Field(foreign_key="training_sessions.id", nullable=False, index=True)
    exercise_id: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, ForeignKey("exercises.id", ondelete="SET NULL"), nullable=True, index=True), )

    exercise_name: str = Field(nullable=False, max_length=200, index=True)
    muscle_group: Optional[str] = Field(default=None, max_length=100)

    set_number: int = Field(nullable=False, ge=1)
    reps: int = Field(nullable=False, ge=1)
    weight: float = Field(nullable=False, ge=0.0)
    is_pr: bool = Field(default=False, nullable=False)

    created_at: datetime.datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))

    @property
    def volume(self) -> float:
        """Training load of this set: ``reps × weight``."""
        return self.reps * self.weight
