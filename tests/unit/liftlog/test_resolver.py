"""Tests for the session resolver and the week selection state machine.

Pure unit tests: the session store is an in-memory fake.
"""

import datetime

import pytest

from app.core.errors import UnexpectedStoreError
from app.liftlog.resolver import (
    DayStatus,
    ResolutionState,
    SessionResolver,
    WeekSelection,
    can_auto_create,
    empty_day_status,
)
from app.models.workout_day import WorkoutDay

TODAY = datetime.date(2025, 12, 11)  # Thursday
THIS_MONDAY = datetime.date(2025, 12, 8)
LAST_WEEK = datetime.date(2025, 12, 3)
NEXT_WEEK = datetime.date(2025, 12, 17)


# ======================================================================
# Policy predicates
# ======================================================================


class TestPolicy:
    def test_auto_create_only_in_current_week(self):
        assert can_auto_create(THIS_MONDAY, TODAY)
        assert can_auto_create(datetime.date(2025, 12, 14), TODAY)
        assert not can_auto_create(LAST_WEEK, TODAY)
        assert not can_auto_create(NEXT_WEEK, TODAY)

    def test_empty_day_status(self):
        assert empty_day_status(LAST_WEEK, TODAY) is DayStatus.NO_WORKOUT_RECORDED
        assert empty_day_status(NEXT_WEEK, TODAY) is DayStatus.NOT_YET_OCCURRED


# ======================================================================
# SessionResolver
# ======================================================================


class TestSessionResolver:
    def test_creates_session_in_current_week(self, store, monday_day):
        resolution = SessionResolver(store).resolve(monday_day, TODAY, TODAY)

        assert resolution.state is ResolutionState.RESOLVED
        assert resolution.created is True
        assert resolution.target_date == THIS_MONDAY
        assert resolution.week_start == THIS_MONDAY
        assert resolution.day_status is DayStatus.OPEN
        assert resolution.session.date == THIS_MONDAY
        assert resolution.session.workout_day_id == monday_day.id

    def test_target_date_follows_day_number(self, store, thursday_day):
        resolution = SessionResolver(store).resolve(thursday_day, THIS_MONDAY, TODAY)
        assert resolution.target_date == datetime.date(2025, 12, 11)

    def test_resolving_twice_returns_same_session(self, store, monday_day):
        resolver = SessionResolver(store)
        first = resolver.resolve(monday_day, TODAY, TODAY)
        second = resolver.resolve(monday_day, THIS_MONDAY, TODAY)

        assert first.session_id == second.session_id
        assert second.created is False
        assert store.create_calls == 1

    def test_past_week_without_session_is_empty(self, store, monday_day):
        resolution = SessionResolver(store).resolve(monday_day, LAST_WEEK, TODAY)

        assert resolution.state is ResolutionState.EMPTY
        assert resolution.session is None
        assert resolution.day_status is DayStatus.NO_WORKOUT_RECORDED
        assert store.create_calls == 0

    def test_future_week_without_session_is_empty(self, store, monday_day):
        resolution = SessionResolver(store).resolve(monday_day, NEXT_WEEK, TODAY)

        assert resolution.state is ResolutionState.EMPTY
        assert resolution.day_status is DayStatus.NOT_YET_OCCURRED
        assert store.create_calls == 0

    def test_past_week_with_session_is_returned(self, store, monday_day):
        existing = store.create_session(1, monday_day.id, datetime.date(2025, 12, 1))
        store.create_calls = 0

        resolution = SessionResolver(store).resolve(monday_day, LAST_WEEK, TODAY)

        assert resolution.session_id == existing.id
        assert resolution.day_status is DayStatus.OPEN
        assert store.create_calls == 0

    def test_never_creates_outside_current_week(self, store, monday_day):
        resolver = SessionResolver(store)
        for weeks in list(range(-6, 0)) + list(range(1, 6)):
            resolver.resolve(monday_day, TODAY + datetime.timedelta(weeks=weeks), TODAY)
        assert store.sessions == {}

    def test_later_day_in_current_week_is_created(self, store):
        """Within the current week a day after today still gets its session."""
        saturday = WorkoutDay(id=12, user_id=1, day_number=6, name="Day 6")
        resolution = SessionResolver(store).resolve(saturday, TODAY, TODAY)
        assert resolution.created is True
        assert resolution.target_date == datetime.date(2025, 12, 13)

    def test_conflict_refetches_winner(self, racing_store, monday_day):
        store = racing_store
        resolution = SessionResolver(store).resolve(monday_day, TODAY, TODAY)

        winner = store.sessions[(1, monday_day.id, THIS_MONDAY)]
        assert resolution.session_id == winner.id
        assert resolution.created is False
        assert resolution.state is ResolutionState.RESOLVED

    def test_conflict_without_winner_is_unexpected(self, phantom_conflict_store, monday_day):
        with pytest.raises(UnexpectedStoreError):
            SessionResolver(phantom_conflict_store).resolve(monday_day, TODAY, TODAY)

    def test_store_failure_propagates(self, failing_store, monday_day):
        with pytest.raises(UnexpectedStoreError, match="connection reset"):
            SessionResolver(failing_store).resolve(monday_day, TODAY, TODAY)


# ======================================================================
# WeekSelection
# ======================================================================


class TestWeekSelection:
    def test_starts_unresolved(self, store):
        selection = WeekSelection(SessionResolver(store))
        assert selection.state is ResolutionState.UNRESOLVED
        assert selection.session_id is None

    def test_select_resolves(self, store, monday_day):
        selection = WeekSelection(SessionResolver(store))
        resolution = selection.select(monday_day, TODAY, TODAY)

        assert selection.state is ResolutionState.RESOLVED
        assert selection.session_id == resolution.session_id
        assert selection.is_selected(monday_day.id, THIS_MONDAY)

    def test_switching_week_drops_previous_session(self, store, monday_day):
        selection = WeekSelection(SessionResolver(store))
        selection.select(monday_day, TODAY, TODAY)
        selection.select(monday_day, LAST_WEEK, TODAY)

        assert selection.state is ResolutionState.EMPTY
        assert selection.session_id is None
        assert not selection.is_selected(monday_day.id, TODAY)
        assert selection.is_selected(monday_day.id, LAST_WEEK)

    def test_switching_day_resolves_other_session(self, store, monday_day, thursday_day):
        selection = WeekSelection(SessionResolver(store))
        first = selection.select(monday_day, TODAY, TODAY)
        second = selection.select(thursday_day, TODAY, TODAY)

        assert selection.session_id == second.session_id
        assert second.session_id != first.session_id

    def test_failed_resolution_leaves_unresolved(self, failing_store, monday_day):
        selection = WeekSelection(SessionResolver(failing_store))

        with pytest.raises(UnexpectedStoreError):
            selection.select(monday_day, TODAY, TODAY)
        assert selection.state is ResolutionState.UNRESOLVED
        assert selection.session_id is None

    def test_invalidate(self, store, monday_day):
        selection = WeekSelection(SessionResolver(store))
        selection.select(monday_day, TODAY, TODAY)
        selection.invalidate()

        assert selection.state is ResolutionState.UNRESOLVED
        assert selection.resolution is None
        assert selection.session_id is None
