"""
Training session API schemas.

A session is never created directly: it comes out of resolving a
workout day in a week (see :mod:`app.liftlog.resolver`).
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field


class TrainingSessionUpdate(BaseModel):
    """Schema for updating a training session."""

    notes: Optional[str] = Field(None, max_length=1000)
    completed: Optional[bool] = Field(None, description="Mark the session completed (true) or reopen it (false)")


class TrainingSessionResponse(BaseModel):
    """Schema for training session in API responses."""

    id: int
    workout_day_id: Optional[int]
    date: datetime.date
    notes: Optional[str]
    completed_at: Optional[datetime.datetime]
    volume: float = Field(0.0, description="Σ reps × weight of the session's sets")
    set_count: int = 0
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True


class SessionResolutionResponse(BaseModel):
    """Outcome of resolving a workout day within a week.

    ``state`` is ``resolved`` (``session`` set) or ``empty``.
    ``day_status`` tells the client what to offer: ``open`` for set
    entry, ``no_workout_recorded`` for a past day with nothing logged,
    ``not_yet_occurred`` for a later week.
    """

    workout_day_id: int
    week_start: datetime.date
    target_date: datetime.date
    state: str
    day_status: str
    created: bool
    session: Optional[TrainingSessionResponse]
