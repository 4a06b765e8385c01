"""Pydantic schemas for request/response validation."""

from app.schemas.profile import OnboardingRequest, OnboardingResponse, ProfileResponse, ProfileUpdate
from app.schemas.workout_day import (
    ExerciseCreate,
    ExerciseResponse,
    ExerciseUpdate,
    WorkoutDayRename,
    WorkoutDayResponse,
)
from app.schemas.training_session import (
    SessionResolutionResponse,
    TrainingSessionUpdate,
    TrainingSessionResponse,
)
from app.schemas.set_log import (
    ExerciseCardResponse,
    PersonalBestResponse,
    SetLogCreate,
    SetLogResponse,
    SetLogUpdate,
)
from app.schemas.analytics import TrainingStats

__all__ = [
    "OnboardingRequest",
    "OnboardingResponse",
    "ProfileResponse",
    "ProfileUpdate",
    "ExerciseCreate",
    "ExerciseResponse",
    "ExerciseUpdate",
    "WorkoutDayRename",
    "WorkoutDayResponse",
    "SessionResolutionResponse",
    "TrainingSessionUpdate",
    "TrainingSessionResponse",
    "ExerciseCardResponse",
    "PersonalBestResponse",
    "SetLogCreate",
    "SetLogResponse",
    "SetLogUpdate",
    "TrainingStats",
]
