"""
Training analytics schemas.

The stats snapshot is read-only and recomputed on every request.  An
absent snapshot (``None``) means the window holds no set logs; it is
never replaced by a zeroed object.
"""

import datetime

from pydantic import BaseModel, Field


class PersonalBestEntry(BaseModel):
    """Best set of one exercise within the window."""

    exercise_name: str
    best_weight: float = Field(..., description="Heaviest weight lifted for this exercise")
    best_reps: int = Field(..., description="Reps performed at the best weight")
    total_volume: float = Field(..., description="Σ reps × weight across all sets of the exercise")


class MuscleGroupShare(BaseModel):
    """Work done for one muscle group (missing groups are bucketed as ``Other``)."""

    group: str
    set_count: int
    volume: float


class WeeklyComparison(BaseModel):
    """Current ISO week against the one before it.

    Deltas are percentages and are exactly ``0`` when last week had
    nothing to compare against.
    """

    this_week_start: datetime.date
    this_week_volume: float
    last_week_volume: float
    this_week_sets: int
    last_week_sets: int
    volume_change_pct: float
    sets_change_pct: float


class RepRangeBucket(BaseModel):
    """Histogram bin over reps per set."""

    label: str = Field(..., description="Reps span, e.g. '6-8' or '16+'")
    category: str = Field(..., description="Strength, Power, Hypertrophy, Endurance or High-Rep")
    min_reps: int
    max_reps: int | None = Field(None, description="Inclusive upper bound; None for the open-ended bin")
    count: int


class SeriesPoint(BaseModel):
    """Volume and set count for one calendar day or one ISO week (keyed by its Monday)."""

    date: datetime.date
    volume: float
    sets: int


class SessionVolume(BaseModel):
    """Per-session totals; they add up to the snapshot's ``total_volume``."""

    session_id: int
    date: datetime.date
    workout_day_id: int | None
    volume: float
    sets: int


class TrainingStats(BaseModel):
    """Complete stats snapshot for a date window."""

    start: datetime.date
    end: datetime.date

    total_volume: float
    total_sets: int
    total_reps: int
    total_workouts: int
    avg_sets_per_workout: int
    avg_volume_per_workout: int

    personal_bests: list[PersonalBestEntry]
    muscle_groups: list[MuscleGroupShare]
    weekly_comparison: WeeklyComparison
    consistency_score: int = Field(..., ge=0, le=100,
                                   description="Training frequency against the template target, capped at 100", )
    rep_ranges: list[RepRangeBucket]
    daily_series: list[SeriesPoint]
    weekly_series: list[SeriesPoint]
    session_volumes: list[SessionVolume]
