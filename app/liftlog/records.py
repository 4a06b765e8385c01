"""
Personal records.

A set is a personal record (PR) when it strictly improves on the best
set of the same exercise logged *outside* the current session::

    weight > best.weight
    or (weight == best.weight and reps > best.reps)

Equal weight with equal or fewer reps is never a PR, and with no prior
history there is nothing to beat.

"Best" orders sets by weight, then reps; among identical
``(weight, reps)`` pairs the first one in input order is kept.  The same
ordering picks the dashboard personal bests in
:mod:`app.liftlog.analytics`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, TypeVar

from app.models.set_log import SetLog

_LogT = TypeVar("_LogT", bound=SetLog)


@dataclass(frozen=True)
class PersonalBest:
    """Best ``(weight, reps)`` of one exercise."""

    exercise_name: str
    weight: float
    reps: int


def beats(weight: float, reps: int, best_weight: float, best_reps: int) -> bool:
    """Strict improvement over ``(best_weight, best_reps)``."""
    return weight > best_weight or (weight == best_weight and reps > best_reps)


def is_personal_record(weight: float, reps: int, baseline: Optional[PersonalBest]) -> bool:
    """``True`` if a ``(weight, reps)`` set beats *baseline*."""
    if baseline is None:
        return False
    return beats(weight, reps, baseline.weight, baseline.reps)


def counts_toward_baseline(log: SetLog, current_session_id: Optional[int]) -> bool:
    """Sets from the session being scored never count toward its own baseline."""
    return current_session_id is None or log.training_session_id != current_session_id


def best_set(logs: Iterable[_LogT]) -> Optional[_LogT]:
    """Heaviest set (ties: more reps, then first seen); ``None`` if empty."""
    best: Optional[_LogT] = None
    for log in logs:
        if best is None or beats(log.weight, log.reps, best.weight, best.reps):
            best = log
    return best


def personal_best_baseline(logs: Iterable[SetLog], exercise_name: str,
                           current_session_id: Optional[int], ) -> Optional[PersonalBest]:
    """Best set of *exercise_name* among *logs*, excluding the current session."""
    candidates = (log for log in logs if
                  log.exercise_name == exercise_name and counts_toward_baseline(log, current_session_id))
    best = best_set(candidates)
    if best is None:
        return None
    return PersonalBest(exercise_name=exercise_name, weight=best.weight, reps=best.reps)


def has_personal_record(sets: Sequence[SetLog], baseline: Optional[PersonalBest]) -> bool:
    """``True`` if any of an exercise card's sets is a PR."""
    return any(is_personal_record(s.weight, s.reps, baseline) for s in sets)


def personal_record_flags(logs: Iterable[SetLog]) -> dict[int, bool]:
    """Replay *logs* of one exercise in logging order and flag each set.

    Each set is scored against the best of the sets logged before it in
    other sessions, exactly as it was when it was added.  Run again after
    an edit or delete to bring stored flags up to date.
    """
    session_bests: dict[int, tuple[float, int]] = {}
    flags: dict[int, bool] = {}
    for log in logs:
        baseline: Optional[PersonalBest] = None
        for session_id, (weight, reps) in session_bests.items():
            if session_id == log.training_session_id:
                continue
            if baseline is None or beats(weight, reps, baseline.weight, baseline.reps):
                baseline = PersonalBest(log.exercise_name, weight, reps)
        flags[log.id] = is_personal_record(log.weight, log.reps, baseline)

        current = session_bests.get(log.training_session_id)
        if current is None or beats(log.weight, log.reps, *current):
            session_bests[log.training_session_id] = (log.weight, log.reps)
    return flags
