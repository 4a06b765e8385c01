"""
Training analytics: set logs → stats snapshot.

A pure reduction over ``(logs, sessions)`` in an inclusive date window.
The same inputs always give the same snapshot, and neither the inputs nor
any module state are touched.

Each log is dated by its session (the day it was trained).  When its
session is not among the inputs, the log falls back to its
``created_at`` date.  Rows outside ``[start, end]`` are ignored.

Figures
-------

- **Totals**: volume ``Σ reps × weight``, sets, reps, workouts (sessions).
- **Averages per workout**: sets and volume, rounded half-up, ``0``
  without workouts.
- **Personal bests**: per exercise name, heaviest set (ties: more reps,
  then first seen), sorted by weight descending.
- **Muscle groups**: sets and volume per group, missing groups bucketed
  as ``Other``, sorted by set count descending.
- **Weekly comparison**: today's ISO week against the previous one.
  A zero baseline gives a ``0`` % change, not infinity.
- **Consistency**: workouts per week relative to the template's days
  per week, as a percentage capped at 100.
- **Rep ranges**: fixed bins 1–5 / 6–8 / 9–12 / 13–15 / 16+.
- **Series**: one point per day and per ISO week in the window,
  zero-filled.

An empty window yields ``None`` rather than a zeroed snapshot.
"""

from __future__ import annotations

import datetime
import math
from collections import defaultdict
from typing import Iterable, Optional, Sequence

from pydantic import BaseModel, Field

from app.liftlog.calendar import days_inclusive, iter_days, iter_week_starts, week_start
from app.liftlog.records import best_set
from app.models.set_log import SetLog
from app.models.training_session import TrainingSession
from app.schemas.analytics import (MuscleGroupShare, PersonalBestEntry, RepRangeBucket, SeriesPoint, SessionVolume,
                                   TrainingStats, WeeklyComparison, )

# ======================================================================
# Configuration
# ======================================================================

# (label, category, min_reps, max_reps inclusive; None = open-ended)
_DEFAULT_REP_RANGES: list[tuple[str, str, int, Optional[int]]] = [
    ("1-5", "Strength", 1, 5),
    ("6-8", "Power", 6, 8),
    ("9-12", "Hypertrophy", 9, 12),
    ("13-15", "Endurance", 13, 15),
    ("16+", "High-Rep", 16, None),
]

OTHER_MUSCLE_GROUP = "Other"


class AnalyticsConfig(BaseModel):
    """Tunables for the stats computation.

    Bins must be contiguous and ascending, with only the last one
    open-ended.
    """

    rep_ranges: list[tuple[str, str, int, Optional[int]]] = Field(
        default_factory=lambda: list(_DEFAULT_REP_RANGES))
    other_muscle_group: str = Field(OTHER_MUSCLE_GROUP)


DEFAULT_CONFIG = AnalyticsConfig()


# ======================================================================
# Small helpers
# ======================================================================


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _pct_change(current: float, previous: float) -> float:
    """Percentage change; ``0.0`` when there is no baseline."""
    if previous == 0:
        return 0.0
    return (current - previous) / previous * 100.0


def _volume(logs: Iterable[SetLog]) -> float:
    return sum(log.reps * log.weight for log in logs)


def session_volume(logs: Iterable[SetLog]) -> float:
    """Volume of a session's sets, as shown on the session itself."""
    return _volume(logs)


def _log_date(log: SetLog, session_dates: dict[int, datetime.date]) -> datetime.date:
    session_date = session_dates.get(log.training_session_id)
    if session_date is not None:
        return session_date
    return log.created_at.date()


# ======================================================================
# Per-figure computations
# ======================================================================


def _personal_bests(logs: Sequence[SetLog]) -> list[PersonalBestEntry]:
    by_exercise: dict[str, list[SetLog]] = defaultdict(list)
    for log in logs:
        by_exercise[log.exercise_name].append(log)

    entries = []
    for name, exercise_logs in by_exercise.items():
        best = best_set(exercise_logs)
        entries.append(PersonalBestEntry(exercise_name=name, best_weight=best.weight, best_reps=best.reps,
                                         total_volume=_volume(exercise_logs), ))
    # sort is stable: equal weights keep first-seen exercise order
    return sorted(entries, key=lambda e: e.best_weight, reverse=True)


def _muscle_groups(logs: Sequence[SetLog], other_label: str) -> list[MuscleGroupShare]:
    counts: dict[str, int] = defaultdict(int)
    volumes: dict[str, float] = defaultdict(float)
    for log in logs:
        group = (log.muscle_group or "").strip() or other_label
        counts[group] += 1
        volumes[group] += log.reps * log.weight

    shares = [MuscleGroupShare(group=g, set_count=counts[g], volume=volumes[g]) for g in counts]
    return sorted(shares, key=lambda s: s.set_count, reverse=True)


def _weekly_comparison(dated_logs: Sequence[tuple[datetime.date, SetLog]],
                       today: datetime.date, ) -> WeeklyComparison:
    this_start = week_start(today)
    last_start = this_start - datetime.timedelta(days=7)

    this_week = [log for d, log in dated_logs if week_start(d) == this_start]
    last_week = [log for d, log in dated_logs if week_start(d) == last_start]

    this_volume, last_volume = _volume(this_week), _volume(last_week)
    return WeeklyComparison(this_week_start=this_start, this_week_volume=this_volume, last_week_volume=last_volume,
                            this_week_sets=len(this_week), last_week_sets=len(last_week),
                            volume_change_pct=_pct_change(this_volume, last_volume),
                            sets_change_pct=_pct_change(len(this_week), len(last_week)), )


def _consistency_score(total_workouts: int, days_in_range: int, template_days_per_week: Optional[int], ) -> int:
    """Workouts per week against the template target, in percent, capped at 100."""
    if days_in_range <= 0 or not template_days_per_week or template_days_per_week <= 0:
        return 0
    workouts_per_week = total_workouts / (days_in_range / 7.0)
    return min(100, _round_half_up(workouts_per_week / template_days_per_week * 100.0))


def _rep_range_index(reps: int, ranges: Sequence[tuple[str, str, int, Optional[int]]]) -> int:
    """Index of the bin holding *reps*; anything below the first bin lands in it."""
    for idx, (_, _, _, max_reps) in enumerate(ranges):
        if max_reps is None or reps <= max_reps:
            return idx
    return len(ranges) - 1


def _rep_ranges(logs: Sequence[SetLog], ranges: Sequence[tuple[str, str, int, Optional[int]]], ) -> list[
    RepRangeBucket]:
    counts = [0] * len(ranges)
    for log in logs:
        counts[_rep_range_index(log.reps, ranges)] += 1
    return [RepRangeBucket(label=label, category=category, min_reps=lo, max_reps=hi, count=counts[idx])
            for idx, (label, category, lo, hi) in enumerate(ranges)]


def _daily_series(dated_logs: Sequence[tuple[datetime.date, SetLog]], start: datetime.date,
                  end: datetime.date, ) -> list[SeriesPoint]:
    volumes: dict[datetime.date, float] = defaultdict(float)
    sets: dict[datetime.date, int] = defaultdict(int)
    for d, log in dated_logs:
        volumes[d] += log.reps * log.weight
        sets[d] += 1
    return [SeriesPoint(date=d, volume=volumes.get(d, 0.0), sets=sets.get(d, 0)) for d in iter_days(start, end)]


def _weekly_series(dated_logs: Sequence[tuple[datetime.date, SetLog]], start: datetime.date,
                   end: datetime.date, ) -> list[SeriesPoint]:
    volumes: dict[datetime.date, float] = defaultdict(float)
    sets: dict[datetime.date, int] = defaultdict(int)
    for d, log in dated_logs:
        monday = week_start(d)
        volumes[monday] += log.reps * log.weight
        sets[monday] += 1
    return [SeriesPoint(date=m, volume=volumes.get(m, 0.0), sets=sets.get(m, 0)) for m in
            iter_week_starts(start, end)]


def _session_volumes(logs: Sequence[SetLog], sessions: Sequence[TrainingSession]) -> list[SessionVolume]:
    by_session: dict[int, list[SetLog]] = defaultdict(list)
    for log in logs:
        by_session[log.training_session_id].append(log)

    ordered = sorted(sessions, key=lambda s: (s.date, s.id or 0))
    return [SessionVolume(session_id=s.id, date=s.date, workout_day_id=s.workout_day_id,
                          volume=session_volume(by_session.get(s.id, [])), sets=len(by_session.get(s.id, [])), )
            for s in ordered]


# ======================================================================
# Main entry point
# ======================================================================


def compute_training_stats(logs: Sequence[SetLog], sessions: Sequence[TrainingSession], start: datetime.date,
                           end: datetime.date, today: datetime.date, template_days_per_week: Optional[int],
                           config: Optional[AnalyticsConfig] = None, ) -> Optional[TrainingStats]:
    """Compute the stats snapshot for ``[start, end]``.

    Args:
        logs: Set logs of the user (any order; input order breaks
            personal-best ties).
        sessions: Training sessions of the user.
        start: Window start (inclusive).
        end: Window end (inclusive).
        today: Reference date for the weekly comparison.
        template_days_per_week: Target frequency for the consistency
            score.
        config: Optional :class:`AnalyticsConfig` override.

    Returns:
        :class:`TrainingStats`, or ``None`` when no log falls in the
        window.
    """
    cfg = config or DEFAULT_CONFIG

    in_range_sessions = [s for s in sessions if start <= s.date <= end]
    session_dates = {s.id: s.date for s in sessions}

    dated_logs = [(d, log) for d, log in ((_log_date(log, session_dates), log) for log in logs) if start <= d <= end]
    if not dated_logs:
        return None
    window_logs = [log for _, log in dated_logs]

    total_volume = _volume(window_logs)
    total_sets = len(window_logs)
    total_reps = sum(log.reps for log in window_logs)
    total_workouts = len(in_range_sessions)

    avg_sets = _round_half_up(total_sets / total_workouts) if total_workouts else 0
    avg_volume = _round_half_up(total_volume / total_workouts) if total_workouts else 0

    return TrainingStats(start=start, end=end, total_volume=total_volume, total_sets=total_sets,
                         total_reps=total_reps, total_workouts=total_workouts, avg_sets_per_workout=avg_sets,
                         avg_volume_per_workout=avg_volume, personal_bests=_personal_bests(window_logs),
                         muscle_groups=_muscle_groups(window_logs, cfg.other_muscle_group),
                         weekly_comparison=_weekly_comparison(dated_logs, today),
                         consistency_score=_consistency_score(total_workouts, days_inclusive(start, end),
                                                              template_days_per_week),
                         rep_ranges=_rep_ranges(window_logs, cfg.rep_ranges),
                         daily_series=_daily_series(dated_logs, start, end),
                         weekly_series=_weekly_series(dated_logs, start, end),
                         session_volumes=_session_volumes(window_logs, in_range_sessions), )
