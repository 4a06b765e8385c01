"""
Set log API schemas.

Reps and weight are validated here, before anything reaches the store.
"""

import datetime
from typing import Optional, Self

from pydantic import BaseModel, Field, model_validator


class SetLogCreate(BaseModel):
    """Schema for logging a set.

    Provide ``exercise_id`` to log against an exercise template (name and
    muscle group are copied from it) **or** ``exercise_name`` for a
    free-form exercise.
    """

    exercise_id: Optional[int] = Field(None, description="Exercise template id")
    exercise_name: Optional[str] = Field(None, min_length=1, max_length=200,
                                         description="Free-form exercise name (without a template)", )
    muscle_group: Optional[str] = Field(None, max_length=100)
    reps: int = Field(..., ge=1, description="Repetitions performed")
    weight: float = Field(..., ge=0.0, allow_inf_nan=False, description="Load in kilograms")

    @model_validator(mode="after")
    def validate_exercise_identity(self) -> Self:
        """Ensure the set names its exercise one way or the other."""
        if self.exercise_id is None and not self.exercise_name:
            raise ValueError("Provide exercise_id (template) or exercise_name (free-form exercise).")
        return self


class SetLogUpdate(BaseModel):
    """Schema for editing a set; only reps and weight can change."""

    reps: Optional[int] = Field(None, ge=1)
    weight: Optional[float] = Field(None, ge=0.0, allow_inf_nan=False)


class SetLogResponse(BaseModel):
    """Schema for a set log in API responses."""

    id: int
    training_session_id: int
    exercise_id: Optional[int]
    exercise_name: str
    muscle_group: Optional[str]
    set_number: int
    reps: int
    weight: float
    is_pr: bool
    created_at: datetime.datetime

    class Config:
        from_attributes = True


class PersonalBestResponse(BaseModel):
    """Baseline an exercise card is compared against."""

    weight: float
    reps: int


class ExerciseCardResponse(BaseModel):
    """One exercise of a session with its sets and PR state.

    ``personal_best`` comes from sets logged outside this session;
    ``has_pr`` is set when any of ``sets`` strictly beats it.
    """

    exercise_id: Optional[int]
    exercise_name: str
    muscle_group: Optional[str]
    sort_order: Optional[int]
    sets: list[SetLogResponse]
    volume: float
    personal_best: Optional[PersonalBestResponse]
    has_pr: bool
