"""Set input checks and set numbering."""

from __future__ import annotations

import math
from typing import Iterable, Optional

from app.core.errors import InvalidSetError
from app.models.set_log import SetLog


def check_set_values(reps: Optional[int] = None, weight: Optional[float] = None) -> None:
    """Reject non-positive reps and negative or non-finite weight.

    ``None`` means "not being changed" and is accepted.
    """
    if reps is not None and (isinstance(reps, bool) or not isinstance(reps, int) or reps < 1):
        raise InvalidSetError(f"reps must be a positive integer, got {reps!r}")
    if weight is not None and (not math.isfinite(weight) or weight < 0):
        raise InvalidSetError(f"weight must be a non-negative number, got {weight!r}")


def same_exercise(log: SetLog, exercise_id: Optional[int], exercise_name: str) -> bool:
    """Logs tied to a template match on its id; free-form logs match on name."""
    if exercise_id is not None:
        return log.exercise_id == exercise_id
    return log.exercise_id is None and log.exercise_name == exercise_name


def next_set_number(session_logs: Iterable[SetLog], exercise_id: Optional[int], exercise_name: str) -> int:
    """Sets already logged for the exercise in this session, plus one.

    Deleting an earlier set does not renumber the rest.
    """
    return sum(1 for log in session_logs if same_exercise(log, exercise_id, exercise_name)) + 1
