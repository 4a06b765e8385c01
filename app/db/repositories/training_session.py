"""
Training session repository.

Handles database operations for :class:`TrainingSession` and implements
:class:`app.liftlog.ports.SessionStore`.  Sessions are never deleted
here.
"""

import datetime
from typing import Optional

from sqlmodel import Session, select

from app.core.errors import NotFoundError
from app.db.repositories.base import persist
from app.models.training_session import TrainingSession


class TrainingSessionRepository:
    """Repository for TrainingSession database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: TrainingSession) -> TrainingSession:
        return persist(self.session, entry)

    def get_by_id(self, entry_id: int) -> Optional[TrainingSession]:
        return self.session.get(TrainingSession, entry_id)

    def get_owned(self, user_id: int, entry_id: int) -> TrainingSession:
        """Return the user's session or raise :class:`NotFoundError`."""
        entry = self.get_by_id(entry_id)
        if not entry or entry.user_id != user_id:
            raise NotFoundError("Training session", entry_id)
        return entry

    def get_by_user_date_range(self, user_id: int, start: datetime.date, end: datetime.date, ) -> list[TrainingSession]:
        statement = (select(TrainingSession).where(TrainingSession.user_id == user_id, TrainingSession.date >= start,
                                                   TrainingSession.date <= end, ).order_by(TrainingSession.date,
                                                                                           TrainingSession.id))
        return list(self.session.exec(statement).all())

    # ------------------------------------------------------------------
    # SessionStore
    # ------------------------------------------------------------------

    def find_session(self, user_id: int, workout_day_id: int, date: datetime.date, ) -> Optional[TrainingSession]:
        statement = select(TrainingSession).where(TrainingSession.user_id == user_id,
                                                  TrainingSession.workout_day_id == workout_day_id,
                                                  TrainingSession.date == date, )
        return self.session.exec(statement).first()

    def create_session(self, user_id: int, workout_day_id: int, date: datetime.date, ) -> TrainingSession:
        """Insert a session; a duplicate ``(user, day, date)`` raises ConflictError."""
        return self.create(TrainingSession(user_id=user_id, workout_day_id=workout_day_id, date=date))

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def update(self, entry: TrainingSession) -> TrainingSession:
        return persist(self.session, entry)
