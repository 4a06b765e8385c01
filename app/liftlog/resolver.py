"""
Session resolver: (workout day, week) → at most one training session.

For a selected workout day and any date inside the selected week, the
resolver returns the single session representing "this day, this week":

1. ``target_date = week_start(anchor) + (day_number - 1)``
2. an existing session for ``(user, day, target_date)`` is returned as is
3. otherwise a session is created **only** when the anchor lies in the
   current week (:func:`can_auto_create`); past and future weeks resolve
   to *empty*, which the presentation layer shows as "no workout
   recorded" or "not yet occurred" (:func:`empty_day_status`).

Concurrent creates for the same ``(user, day, date)`` are settled by the
store's uniqueness constraint: the loser gets a
:class:`~app.core.errors.ConflictError`, re-fetches, and uses the
winner's row.  No in-process locking.

:class:`WeekSelection` wraps the resolver in the per-selection state
machine ``unresolved → resolving → {resolved | empty}``.  Any change of
day or week drops the previous session reference before resolving again,
so sets are never attributed to a stale selection.
"""

from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from app.core.errors import ConflictError, StoreError, UnexpectedStoreError
from app.liftlog.calendar import same_week, target_date, week_start
from app.liftlog.ports import SessionStore
from app.models.training_session import TrainingSession
from app.models.workout_day import WorkoutDay

logger = logging.getLogger(__name__)


class ResolutionState(str, Enum):
    UNRESOLVED = "unresolved"
    RESOLVING = "resolving"
    RESOLVED = "resolved"
    EMPTY = "empty"


class DayStatus(str, Enum):
    """What the presentation layer offers for the resolved day."""

    OPEN = "open"  # session exists, sets can be entered
    NO_WORKOUT_RECORDED = "no_workout_recorded"  # past, nothing logged (read-only)
    NOT_YET_OCCURRED = "not_yet_occurred"  # later week, nothing to show yet


# ======================================================================
# Policy predicates
# ======================================================================


def can_auto_create(week_anchor: datetime.date, today: datetime.date) -> bool:
    """Sessions are only created lazily for the current ISO week."""
    return same_week(week_anchor, today)


def empty_day_status(day_date: datetime.date, today: datetime.date) -> DayStatus:
    """Classify a day that has no session and will not get one."""
    if day_date < today:
        return DayStatus.NO_WORKOUT_RECORDED
    return DayStatus.NOT_YET_OCCURRED


# ======================================================================
# Resolution
# ======================================================================


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving one (workout day, week) pair."""

    workout_day_id: int
    week_start: datetime.date
    target_date: datetime.date
    session: Optional[TrainingSession]
    day_status: DayStatus
    created: bool = False

    @property
    def state(self) -> ResolutionState:
        return ResolutionState.RESOLVED if self.session is not None else ResolutionState.EMPTY

    @property
    def session_id(self) -> Optional[int]:
        return self.session.id if self.session is not None else None


class SessionResolver:
    """Find-or-create of the one session per (user, workout day, date)."""

    def __init__(self, store: SessionStore):
        self.store = store

    def resolve(self, workout_day: WorkoutDay, week_anchor: datetime.date, today: datetime.date, ) -> Resolution:
        day_date = target_date(workout_day.day_number, week_anchor)
        monday = week_start(week_anchor)

        existing = self.store.find_session(workout_day.user_id, workout_day.id, day_date)
        if existing is not None:
            return Resolution(workout_day_id=workout_day.id, week_start=monday, target_date=day_date,
                              session=existing, day_status=DayStatus.OPEN, )

        if not can_auto_create(week_anchor, today):
            return Resolution(workout_day_id=workout_day.id, week_start=monday, target_date=day_date, session=None,
                              day_status=empty_day_status(day_date, today), )

        session, created = self._create_or_fetch(workout_day, day_date)
        return Resolution(workout_day_id=workout_day.id, week_start=monday, target_date=day_date, session=session,
                          day_status=DayStatus.OPEN, created=created, )

    def _create_or_fetch(self, workout_day: WorkoutDay, day_date: datetime.date, ) -> tuple[TrainingSession, bool]:
        try:
            session = self.store.create_session(workout_day.user_id, workout_day.id, day_date)
        except ConflictError:
            # Someone else created it between our lookup and insert
            logger.warning("Session create conflict for user=%s day=%s date=%s; re-fetching",
                           workout_day.user_id, workout_day.id, day_date)
            winner = self.store.find_session(workout_day.user_id, workout_day.id, day_date)
            if winner is None:
                raise UnexpectedStoreError(
                    f"Session for day {workout_day.id} on {day_date} reported as duplicate but not found")
            return winner, False

        logger.info("Created session %s for user=%s day=%s date=%s", session.id, workout_day.user_id,
                    workout_day.id, day_date)
        return session, True


# ======================================================================
# Selection state machine
# ======================================================================


class WeekSelection:
    """The currently selected (workout day, week) and its resolved session.

    Only a ``resolved`` selection exposes a session id.  Selecting a new
    pair invalidates first, so during ``resolving`` (and after a failed
    resolution) :attr:`session_id` is ``None``.
    """

    def __init__(self, resolver: SessionResolver):
        self.resolver = resolver
        self._state = ResolutionState.UNRESOLVED
        self._resolution: Optional[Resolution] = None
        self._key: Optional[tuple[int, datetime.date]] = None

    @property
    def state(self) -> ResolutionState:
        return self._state

    @property
    def resolution(self) -> Optional[Resolution]:
        return self._resolution

    @property
    def session_id(self) -> Optional[int]:
        if self._state is not ResolutionState.RESOLVED or self._resolution is None:
            return None
        return self._resolution.session_id

    def is_selected(self, workout_day_id: int, week_anchor: datetime.date) -> bool:
        """``True`` if this pair is the one currently selected."""
        return self._key == (workout_day_id, week_start(week_anchor))

    def invalidate(self) -> None:
        """Drop the resolved session reference."""
        self._state = ResolutionState.UNRESOLVED
        self._resolution = None
        self._key = None

    def select(self, workout_day: WorkoutDay, week_anchor: datetime.date, today: datetime.date, ) -> Resolution:
        """Resolve *workout_day* in the week of *week_anchor*.

        Store errors leave the selection ``unresolved`` and propagate.
        """
        self.invalidate()
        self._key = (workout_day.id, week_start(week_anchor))
        self._state = ResolutionState.RESOLVING
        try:
            resolution = self.resolver.resolve(workout_day, week_anchor, today)
        except StoreError:
            self.invalidate()
            raise
        self._resolution = resolution
        self._state = resolution.state
        return resolution
