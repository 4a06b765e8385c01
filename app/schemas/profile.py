"""
Profile API schemas.

Pydantic models for the training profile and onboarding.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.workout_day import WorkoutDayResponse


class OnboardingRequest(BaseModel):
    """Schema for first-run setup: how many days a week the user trains."""
    training_days_per_week: int = Field(..., ge=1, le=7, description="Workout days to create (Day 1 … Day N)")
    display_name: Optional[str] = Field(None, max_length=255)


class ProfileUpdate(BaseModel):
    """Schema for updating the profile."""
    display_name: Optional[str] = Field(None, max_length=255)
    training_days_per_week: Optional[int] = Field(None, ge=1, le=7)


class ProfileResponse(BaseModel):
    """Schema for profile data in API responses."""
    user_id: int
    display_name: Optional[str]
    training_days_per_week: Optional[int]
    onboarding_completed: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True  # Allows creation from SQLModel objects


class OnboardingResponse(BaseModel):
    """Profile plus the workout days created during onboarding."""
    profile: ProfileResponse
    workout_days: list[WorkoutDayResponse]
