"""
Set log repository.

Handles database operations for :class:`SetLog` and implements
:class:`app.liftlog.ports.LogStore`.  Every query is scoped by owning
user.
"""

import datetime
from typing import Optional

from sqlmodel import Session, select

from app.core.errors import NotFoundError
from app.db.repositories.base import persist, remove
from app.models.set_log import SetLog
from app.models.training_session import TrainingSession


class SetLogRepository:
    """Repository for SetLog database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_owned(self, user_id: int, log_id: int) -> SetLog:
        """Return the user's set log or raise :class:`NotFoundError`."""
        log = self.session.get(SetLog, log_id)
        if not log or log.user_id != user_id:
            raise NotFoundError("Set log", log_id)
        return log

    def list_logs(self, user_id: int, session_id: int) -> list[SetLog]:
        statement = (select(SetLog).where(SetLog.user_id == user_id, SetLog.training_session_id == session_id, )
                     .order_by(SetLog.created_at, SetLog.id))
        return list(self.session.exec(statement).all())

    def list_logs_in_range(self, user_id: int, start: datetime.date, end: datetime.date, ) -> list[SetLog]:
        """Logs whose session date falls in ``[start, end]``, oldest first."""
        statement = (select(SetLog).join(TrainingSession, SetLog.training_session_id == TrainingSession.id)
                     .where(SetLog.user_id == user_id, TrainingSession.date >= start, TrainingSession.date <= end, )
                     .order_by(SetLog.created_at, SetLog.id))
        return list(self.session.exec(statement).all())

    def list_by_exercise_names(self, user_id: int, exercise_names: list[str], ) -> list[SetLog]:
        """All of the user's logs for the given exercise names (PR baselines)."""
        if not exercise_names:
            return []
        statement = (select(SetLog).where(SetLog.user_id == user_id, SetLog.exercise_name.in_(exercise_names), )
                     .order_by(SetLog.created_at, SetLog.id))
        return list(self.session.exec(statement).all())

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def create_log(self, log: SetLog) -> SetLog:
        return persist(self.session, log)

    def update_log(self, user_id: int, log_id: int, reps: Optional[int] = None,
                   weight: Optional[float] = None, ) -> SetLog:
        log = self.get_owned(user_id, log_id)
        if reps is not None:
            log.reps = reps
        if weight is not None:
            log.weight = weight
        return persist(self.session, log)

    def save(self, log: SetLog) -> SetLog:
        return persist(self.session, log)

    def delete_log(self, user_id: int, log_id: int) -> None:
        remove(self.session, self.get_owned(user_id, log_id))
