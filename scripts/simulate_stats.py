"""Simulate the training stats dashboard from a few weeks of recorded sets."""

import datetime
import sys
from collections import defaultdict
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.liftlog.analytics import compute_training_stats
from app.liftlog.calendar import range_for_preset
from app.models.set_log import SetLog
from app.models.training_session import TrainingSession

TODAY = datetime.date(2025, 12, 11)
TEMPLATE_DAYS_PER_WEEK = 3

MUSCLE_GROUPS = {
    "Conventional Barbell Deadlift": "Back",
    "Barbell Back Squat": "Legs",
    "Barbell Overhead Press": "Shoulders",
    "Barbell Flat Bench Press": "Chest",
    "Weighted Pull-up": "Back",
    "Farmer's Carry": None,
}

# (date, exercise, weight_kg, reps)
RAW_DATA = [
    # Week of Nov 17
    ("2025-11-17", "Conventional Barbell Deadlift", 60, 5),
    ("2025-11-17", "Conventional Barbell Deadlift", 80, 3),
    ("2025-11-17", "Conventional Barbell Deadlift", 90, 2),
    ("2025-11-17", "Farmer's Carry", 60, 1),
    ("2025-11-19", "Barbell Flat Bench Press", 50, 8),
    ("2025-11-19", "Barbell Flat Bench Press", 55, 6),
    ("2025-11-19", "Weighted Pull-up", 0, 8),
    ("2025-11-21", "Barbell Back Squat", 60, 10),
    ("2025-11-21", "Barbell Back Squat", 70, 6),
    # Week of Nov 24
    ("2025-11-24", "Conventional Barbell Deadlift", 60, 5),
    ("2025-11-24", "Conventional Barbell Deadlift", 85, 3),
    ("2025-11-24", "Conventional Barbell Deadlift", 95, 2),
    ("2025-11-26", "Barbell Overhead Press", 30, 12),
    ("2025-11-26", "Barbell Overhead Press", 35, 8),
    ("2025-11-26", "Weighted Pull-up", 2.5, 6),
    ("2025-11-28", "Barbell Back Squat", 65, 10),
    ("2025-11-28", "Barbell Back Squat", 75, 5),
    # Week of Dec 1
    ("2025-12-01", "Conventional Barbell Deadlift", 60, 5),
    ("2025-12-01", "Conventional Barbell Deadlift", 100, 1),
    ("2025-12-01", "Farmer's Carry", 70, 1),
    ("2025-12-03", "Barbell Flat Bench Press", 55, 8),
    ("2025-12-03", "Barbell Flat Bench Press", 60, 5),
    ("2025-12-05", "Barbell Back Squat", 80, 5),
    ("2025-12-05", "Barbell Back Squat", 60, 15),
    # Week of Dec 8
    ("2025-12-08", "Conventional Barbell Deadlift", 100, 2),
    ("2025-12-08", "Weighted Pull-up", 5, 5),
    ("2025-12-10", "Barbell Overhead Press", 37.5, 6),
    ("2025-12-10", "Barbell Overhead Press", 30, 20),
]


def build_rows() -> tuple[list[SetLog], list[TrainingSession]]:
    """Turn RAW_DATA into sessions (one per date) and their set logs."""
    sessions: dict[str, TrainingSession] = {}
    logs: list[SetLog] = []
    set_numbers: dict[tuple[str, str], int] = defaultdict(int)

    for idx, (date, exercise, weight_kg, reps) in enumerate(RAW_DATA, start=1):
        if date not in sessions:
            day = datetime.date.fromisoformat(date)
            sessions[date] = TrainingSession(id=len(sessions) + 1, user_id=1, workout_day_id=day.weekday() + 1,
                                             date=day)
        set_numbers[(date, exercise)] += 1
        logs.append(SetLog(id=idx, user_id=1, training_session_id=sessions[date].id, exercise_name=exercise,
                           muscle_group=MUSCLE_GROUPS.get(exercise), set_number=set_numbers[(date, exercise)],
                           reps=reps, weight=float(weight_kg), ))
    return logs, list(sessions.values())


def main():
    logs, sessions = build_rows()
    start, end = range_for_preset("30d", TODAY)
    stats = compute_training_stats(logs, sessions, start, end, TODAY, TEMPLATE_DAYS_PER_WEEK)
    if stats is None:
        print("No sets logged in range.")
        return

    print()
    print("=" * 60)
    print(f"Training stats {stats.start} to {stats.end} (today {TODAY})")
    print("=" * 60)
    print(f"Volume: {stats.total_volume:.0f} kg   Sets: {stats.total_sets}   Reps: {stats.total_reps}")
    print(f"Workouts: {stats.total_workouts}   Avg sets: {stats.avg_sets_per_workout}"
          f"   Avg volume: {stats.avg_volume_per_workout} kg")
    print(f"Consistency: {stats.consistency_score}%")

    wc = stats.weekly_comparison
    print(f"This week: {wc.this_week_volume:.0f} kg ({wc.volume_change_pct:+.1f}%), "
          f"{wc.this_week_sets} sets ({wc.sets_change_pct:+.1f}%)")

    print()
    print(f"{'Exercise':<32} {'Best':>10} {'Volume':>10}")
    print("-" * 60)
    for pb in stats.personal_bests:
        print(f"{pb.exercise_name:<32} {pb.best_weight:>5.1f}x{pb.best_reps:<4} {pb.total_volume:>10.0f}")

    print()
    print(f"{'Muscle group':<16} {'Sets':>5} {'Volume':>10}")
    print("-" * 60)
    for share in stats.muscle_groups:
        print(f"{share.group:<16} {share.set_count:>5} {share.volume:>10.0f}")

    print()
    print("Rep ranges: " + ", ".join(f"{b.label} {b.category}: {b.count}" for b in stats.rep_ranges))

    print()
    print(f"{'Week of':<12} {'Sets':>5} {'Volume':>10}")
    print("-" * 60)
    for point in stats.weekly_series:
        print(f"{point.date.isoformat():<12} {point.sets:>5} {point.volume:>10.0f}")


if __name__ == "__main__":
    main()
