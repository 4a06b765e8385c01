"""
Analytics service.

Fetches the user's sessions and set logs for a window and hands them to
the pure aggregator in :mod:`app.liftlog.analytics`.
"""

import datetime
from typing import Optional

from sqlmodel import Session

from app.core.config import settings
from app.db.repositories.set_log import SetLogRepository
from app.db.repositories.training_session import TrainingSessionRepository
from app.liftlog.analytics import AnalyticsConfig, compute_training_stats
from app.liftlog.calendar import range_for_preset
from app.schemas.analytics import TrainingStats
from app.services.profile_service import ProfileService


class AnalyticsService:
    """Service for the training stats dashboard."""

    def __init__(self, session: Session, config: Optional[AnalyticsConfig] = None):
        self.sessions = TrainingSessionRepository(session)
        self.logs = SetLogRepository(session)
        self.profiles = ProfileService(session)
        self.config = config

    def stats(self, user_id: int, start: datetime.date, end: datetime.date,
              today: datetime.date, ) -> Optional[TrainingStats]:
        """Stats for ``[start, end]``; ``None`` if nothing was logged."""
        sessions = self.sessions.get_by_user_date_range(user_id, start, end)
        logs = self.logs.list_logs_in_range(user_id, start, end)
        stats = compute_training_stats(logs, sessions, start, end, today,
                                       self.profiles.template_days_per_week(user_id), self.config, )
        if stats is None:
            return None
        return stats.model_copy(update={"personal_bests": stats.personal_bests[:settings.PERSONAL_BESTS_LIMIT]})

    def stats_for_preset(self, user_id: int, preset: str, today: datetime.date) -> Optional[TrainingStats]:
        """Stats for a dashboard preset such as ``'30d'`` ending *today*."""
        start, end = range_for_preset(preset, today)
        return self.stats(user_id, start, end, today)
