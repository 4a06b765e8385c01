"""Tests for the stats service against SQLite."""

import datetime

import pytest

from app.core.config import settings
from app.schemas.set_log import SetLogCreate
from app.services.analytics_service import AnalyticsService
from app.services.set_log_service import SetLogService
from app.services.training_session_service import TrainingSessionService

USER_ID = 1
TODAY = datetime.date(2025, 12, 11)


def _log_week(db, workout_days, anchor: datetime.date, weight: float) -> None:
    sessions = TrainingSessionService(db)
    sets = SetLogService(db)
    for day in workout_days:
        session_id = sessions.resolve(USER_ID, day.id, anchor, anchor).session.id
        sets.add_set(USER_ID, session_id, SetLogCreate(exercise_name=f"Lift {day.day_number}", muscle_group="Legs",
                                                       reps=5, weight=weight))


class TestAnalyticsService:
    def test_no_logs(self, db, workout_days):
        assert AnalyticsService(db).stats_for_preset(USER_ID, "30d", TODAY) is None

    def test_preset_window(self, db, workout_days):
        _log_week(db, workout_days, datetime.date(2025, 12, 1), 100)
        _log_week(db, workout_days, TODAY, 100)
        stats = AnalyticsService(db).stats_for_preset(USER_ID, "14d", TODAY)

        assert stats.start == datetime.date(2025, 11, 28)
        assert stats.end == TODAY
        assert stats.total_workouts == 8
        assert stats.total_volume == 4000.0
        assert stats.weekly_comparison.volume_change_pct == 0.0

    def test_sessions_outside_window_excluded(self, db, workout_days):
        _log_week(db, workout_days, datetime.date(2025, 11, 3), 100)
        _log_week(db, workout_days, TODAY, 120)
        stats = AnalyticsService(db).stats_for_preset(USER_ID, "7d", TODAY)

        assert stats.total_sets == 4
        assert {pb.best_weight for pb in stats.personal_bests} == {120.0}

    def test_personal_bests_are_limited(self, db, workout_days):
        sessions = TrainingSessionService(db)
        sets = SetLogService(db)
        session_id = sessions.resolve(USER_ID, workout_days[0].id, TODAY, TODAY).session.id
        for i in range(settings.PERSONAL_BESTS_LIMIT + 3):
            sets.add_set(USER_ID, session_id, SetLogCreate(exercise_name=f"Lift {i}", reps=5, weight=10 + i))

        stats = AnalyticsService(db).stats(USER_ID, datetime.date(2025, 12, 1), TODAY, TODAY)
        assert len(stats.personal_bests) == settings.PERSONAL_BESTS_LIMIT
        assert stats.personal_bests[0].best_weight == 10 + settings.PERSONAL_BESTS_LIMIT + 2

    def test_unknown_preset(self, db):
        with pytest.raises(KeyError):
            AnalyticsService(db).stats_for_preset(USER_ID, "2y", TODAY)
