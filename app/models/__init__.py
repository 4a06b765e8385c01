"""SQLModel database models."""

from app.models.profile import Profile
from app.models.workout_day import WorkoutDay
from app.models.exercise import Exercise
from app.models.training_session import TrainingSession
from app.models.set_log import SetLog

__all__ = [
    "Profile",
    "WorkoutDay",
    "Exercise",
    "TrainingSession",
    "SetLog",
]
