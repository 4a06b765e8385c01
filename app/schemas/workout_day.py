"""
Workout day and exercise template API schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field


class WorkoutDayRename(BaseModel):
    """Schema for renaming a workout day."""

    name: str = Field(..., min_length=1, max_length=100)


class WorkoutDayResponse(BaseModel):
    """Schema for a workout day in API responses."""

    id: int
    day_number: int = Field(..., description="1 = Monday … 7 = Sunday")
    name: str
    created_at: datetime.datetime

    class Config:
        from_attributes = True


class ExerciseCreate(BaseModel):
    """Schema for adding an exercise to a workout day."""

    name: str = Field(..., min_length=1, max_length=200)
    muscle_group: Optional[str] = Field(None, max_length=100)


class ExerciseUpdate(BaseModel):
    """Schema for updating an exercise template."""

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    muscle_group: Optional[str] = Field(None, max_length=100)
    sort_order: Optional[int] = Field(None, ge=0)


class ExerciseResponse(BaseModel):
    """Schema for an exercise template in API responses."""

    id: int
    workout_day_id: int
    name: str
    muscle_group: Optional[str]
    sort_order: int
    created_at: datetime.datetime

    class Config:
        from_attributes = True
