"""Database repositories."""

from app.db.repositories.profile import ProfileRepository
from app.db.repositories.template import TemplateRepository
from app.db.repositories.training_session import TrainingSessionRepository
from app.db.repositories.set_log import SetLogRepository

__all__ = [
    "ProfileRepository",
    "TemplateRepository",
    "TrainingSessionRepository",
    "SetLogRepository",
]
