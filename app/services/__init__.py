"""Business logic services."""

from app.services.profile_service import ProfileService
from app.services.template_service import TemplateService
from app.services.training_session_service import TrainingSessionService
from app.services.set_log_service import SetLogService
from app.services.analytics_service import AnalyticsService

__all__ = [
    "ProfileService",
    "TemplateService",
    "TrainingSessionService",
    "SetLogService",
    "AnalyticsService",
]
