"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from app.models.profile import Profile  # noqa: F401
from app.models.workout_day import WorkoutDay  # noqa: F401
from app.models.exercise import Exercise  # noqa: F401
from app.models.training_session import TrainingSession  # noqa: F401
from app.models.set_log import SetLog  # noqa: F401
