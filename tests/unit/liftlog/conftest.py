"""In-memory stores and row factories for the core tests."""

import datetime
from typing import Optional

import pytest

from app.core.errors import ConflictError, UnexpectedStoreError
from app.models.set_log import SetLog
from app.models.training_session import TrainingSession
from app.models.workout_day import WorkoutDay


class FakeSessionStore:
    """SessionStore keeping sessions in a dict keyed by (user, day, date)."""

    def __init__(self):
        self.sessions: dict[tuple[int, int, datetime.date], TrainingSession] = {}
        self.create_calls = 0
        self._next_id = 1

    def find_session(self, user_id: int, workout_day_id: int, date: datetime.date) -> Optional[TrainingSession]:
        return self.sessions.get((user_id, workout_day_id, date))

    def create_session(self, user_id: int, workout_day_id: int, date: datetime.date) -> TrainingSession:
        self.create_calls += 1
        key = (user_id, workout_day_id, date)
        if key in self.sessions:
            raise ConflictError(f"duplicate session {key}")
        session = TrainingSession(id=self._next_id, user_id=user_id, workout_day_id=workout_day_id, date=date)
        self._next_id += 1
        self.sessions[key] = session
        return session


class RacingSessionStore(FakeSessionStore):
    """A concurrent writer inserts the session between lookup and insert."""

    def __init__(self, winner_appears: bool = True):
        super().__init__()
        self.winner_appears = winner_appears

    def create_session(self, user_id: int, workout_day_id: int, date: datetime.date) -> TrainingSession:
        if self.winner_appears:
            super().create_session(user_id, workout_day_id, date)
        self.create_calls += 1
        raise ConflictError("duplicate key value violates unique constraint")


class FailingSessionStore(FakeSessionStore):
    def __init__(self, error: Exception):
        super().__init__()
        self.error = error

    def find_session(self, user_id: int, workout_day_id: int, date: datetime.date) -> Optional[TrainingSession]:
        raise self.error


def _make_log(exercise_name: str = "Bench Press", weight: float = 100.0, reps: int = 5, session_id: int = 1,
             log_id: Optional[int] = None, muscle_group: Optional[str] = "Chest", exercise_id: Optional[int] = None,
             created_at: Optional[datetime.datetime] = None, ) -> SetLog:
    log = SetLog(id=log_id, user_id=1, training_session_id=session_id, exercise_id=exercise_id,
                 exercise_name=exercise_name, muscle_group=muscle_group, set_number=1, reps=reps, weight=weight, )
    if created_at is not None:
        log.created_at = created_at
    return log


def _make_session(session_id: int, date: datetime.date, workout_day_id: Optional[int] = 1) -> TrainingSession:
    return TrainingSession(id=session_id, user_id=1, workout_day_id=workout_day_id, date=date)


@pytest.fixture
def store() -> FakeSessionStore:
    return FakeSessionStore()


@pytest.fixture
def monday_day() -> WorkoutDay:
    return WorkoutDay(id=10, user_id=1, day_number=1, name="Day 1")


@pytest.fixture
def thursday_day() -> WorkoutDay:
    return WorkoutDay(id=11, user_id=1, day_number=4, name="Pull")


@pytest.fixture
def make_log():
    return _make_log


@pytest.fixture
def make_session():
    return _make_session


@pytest.fixture
def racing_store() -> RacingSessionStore:
    return RacingSessionStore()


@pytest.fixture
def phantom_conflict_store() -> RacingSessionStore:
    """Reports a duplicate that a re-fetch cannot find."""
    return RacingSessionStore(winner_appears=False)


@pytest.fixture
def failing_store() -> FailingSessionStore:
    return FailingSessionStore(UnexpectedStoreError("connection reset"))
