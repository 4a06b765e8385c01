"""
Store interfaces (ports) the core depends on.

The resolver and the set/analytics services only talk to these
protocols.  The SQLModel repositories in :mod:`app.db.repositories`
implement them; tests use in-memory fakes.
"""

import datetime
from typing import Optional, Protocol, Sequence

from app.models.exercise import Exercise
from app.models.set_log import SetLog
from app.models.training_session import TrainingSession
from app.models.workout_day import WorkoutDay


class SessionStore(Protocol):
    """Lookup and lazy creation of training sessions."""

    def find_session(self, user_id: int, workout_day_id: int, date: datetime.date) -> Optional[TrainingSession]:
        """Return the session for ``(user, day, date)`` or ``None``."""
        ...

    def create_session(self, user_id: int, workout_day_id: int, date: datetime.date) -> TrainingSession:
        """Insert a session.

        Must raise :class:`~app.core.errors.ConflictError` when the
        ``(user, day, date)`` uniqueness constraint rejects the insert, and
        :class:`~app.core.errors.UnexpectedStoreError` for other failures.
        """
        ...


class LogStore(Protocol):
    """Set log persistence, always scoped by owning user."""

    def list_logs(self, user_id: int, session_id: int) -> Sequence[SetLog]:
        ...

    def list_logs_in_range(self, user_id: int, start: datetime.date, end: datetime.date) -> Sequence[SetLog]:
        """Logs whose session date falls in ``[start, end]`` (inclusive)."""
        ...

    def create_log(self, log: SetLog) -> SetLog:
        ...

    def update_log(self, user_id: int, log_id: int, reps: Optional[int] = None,
                   weight: Optional[float] = None) -> SetLog:
        ...

    def delete_log(self, user_id: int, log_id: int) -> None:
        ...


class TemplateStore(Protocol):
    """Read access to the user's weekly template, plus day renames."""

    def list_days(self, user_id: int) -> Sequence[WorkoutDay]:
        ...

    def list_exercises(self, user_id: int, workout_day_id: int) -> Sequence[Exercise]:
        ...

    def rename_day(self, user_id: int, workout_day_id: int, name: str) -> WorkoutDay:
        ...
