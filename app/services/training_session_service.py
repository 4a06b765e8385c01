"""
Training session service.

Resolves a workout day within a calendar week to its session (creating
it lazily for the current week, see :mod:`app.liftlog.resolver`) and
handles session reads, notes and completion.  Sessions are never deleted
here.
"""

import datetime
from typing import Optional, Sequence

from sqlmodel import Session

from app.core.clock import utc_now
from app.db.repositories.set_log import SetLogRepository
from app.db.repositories.template import TemplateRepository
from app.db.repositories.training_session import TrainingSessionRepository
from app.liftlog.analytics import session_volume
from app.liftlog.resolver import SessionResolver
from app.models.set_log import SetLog
from app.models.training_session import TrainingSession
from app.schemas.training_session import (SessionResolutionResponse, TrainingSessionResponse,
                                          TrainingSessionUpdate, )


class TrainingSessionService:
    """Service for training session business logic."""

    def __init__(self, session: Session):
        self.repository = TrainingSessionRepository(session)
        self.templates = TemplateRepository(session)
        self.logs = SetLogRepository(session)
        self.resolver = SessionResolver(self.repository)

    def resolve(self, user_id: int, workout_day_id: int, week_of: datetime.date,
                today: datetime.date, ) -> SessionResolutionResponse:
        """Session for *workout_day_id* in the week containing *week_of*."""
        workout_day = self.templates.get_day(user_id, workout_day_id)
        resolution = self.resolver.resolve(workout_day, week_of, today)

        session_response = None
        if resolution.session is not None:
            logs = self.logs.list_logs(user_id, resolution.session.id)
            session_response = self._to_response(resolution.session, logs)

        return SessionResolutionResponse(workout_day_id=resolution.workout_day_id,
                                         week_start=resolution.week_start, target_date=resolution.target_date,
                                         state=resolution.state.value, day_status=resolution.day_status.value,
                                         created=resolution.created, session=session_response, )

    def get_by_id(self, user_id: int, entry_id: int) -> TrainingSessionResponse:
        entry = self.repository.get_owned(user_id, entry_id)
        return self._to_response(entry, self.logs.list_logs(user_id, entry.id))

    def get_range(self, user_id: int, start: datetime.date, end: datetime.date, ) -> list[TrainingSessionResponse]:
        entries = self.repository.get_by_user_date_range(user_id, start, end)
        logs = self.logs.list_logs_in_range(user_id, start, end)
        by_session: dict[int, list[SetLog]] = {}
        for log in logs:
            by_session.setdefault(log.training_session_id, []).append(log)
        return [self._to_response(e, by_session.get(e.id, [])) for e in entries]

    def update(self, user_id: int, entry_id: int, data: TrainingSessionUpdate, ) -> TrainingSessionResponse:
        entry = self.repository.get_owned(user_id, entry_id)

        if data.notes is not None:
            entry.notes = data.notes or None

        if data.completed is not None:
            entry.completed_at = self._completion_time(entry.completed_at, data.completed)

        entry.updated_at = utc_now()
        entry = self.repository.update(entry)
        return self._to_response(entry, self.logs.list_logs(user_id, entry.id))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _completion_time(current: Optional[datetime.datetime], completed: bool) -> Optional[datetime.datetime]:
        # Re-completing keeps the original timestamp
        if not completed:
            return None
        return current or utc_now()

    @staticmethod
    def _to_response(entry: TrainingSession, logs: Sequence[SetLog]) -> TrainingSessionResponse:
        return TrainingSessionResponse(id=entry.id, workout_day_id=entry.workout_day_id, date=entry.date,
                                       notes=entry.notes, completed_at=entry.completed_at,
                                       volume=session_volume(logs), set_count=len(logs),
                                       created_at=entry.created_at, updated_at=entry.updated_at, )
