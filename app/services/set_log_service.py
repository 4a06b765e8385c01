"""
Set log service.

Records, edits and deletes sets within a session, and builds the
per-exercise cards of a session.

When a set is logged:

1. reps / weight are checked (:func:`app.liftlog.sets.check_set_values`)
2. exercise name and muscle group are copied from the template (if any)
3. ``set_number`` = sets already logged for the exercise in the session + 1
4. ``is_pr`` is set against the best of the exercise *outside* this
   session (:mod:`app.liftlog.records`)

Editing or deleting a set replays the flags of every set of that exercise
(:func:`app.liftlog.records.personal_record_flags`).
"""

import logging
from typing import Optional

from sqlmodel import Session

from app.core.errors import InvalidSetError
from app.db.repositories.set_log import SetLogRepository
from app.db.repositories.template import TemplateRepository
from app.db.repositories.training_session import TrainingSessionRepository
from app.liftlog.analytics import session_volume
from app.liftlog.records import (PersonalBest, has_personal_record, is_personal_record, personal_best_baseline,
                                 personal_record_flags, )
from app.liftlog.sets import check_set_values, next_set_number
from app.models.exercise import Exercise
from app.models.set_log import SetLog
from app.schemas.set_log import (ExerciseCardResponse, PersonalBestResponse, SetLogCreate, SetLogResponse,
                                 SetLogUpdate, )

logger = logging.getLogger(__name__)


class SetLogService:
    """Service for set log business logic."""

    def __init__(self, session: Session):
        self.repository = SetLogRepository(session)
        self.sessions = TrainingSessionRepository(session)
        self.templates = TemplateRepository(session)

    def list_sets(self, user_id: int, session_id: int) -> list[SetLogResponse]:
        self.sessions.get_owned(user_id, session_id)
        return [SetLogResponse.model_validate(log) for log in self.repository.list_logs(user_id, session_id)]

    def add_set(self, user_id: int, session_id: int, data: SetLogCreate) -> SetLogResponse:
        check_set_values(data.reps, data.weight)
        training_session = self.sessions.get_owned(user_id, session_id)

        exercise_id: Optional[int] = None
        if data.exercise_id is not None:
            exercise = self.templates.get_exercise(user_id, data.exercise_id)
            exercise_id, exercise_name, muscle_group = exercise.id, exercise.name, exercise.muscle_group
        else:
            exercise_name, muscle_group = data.exercise_name.strip(), data.muscle_group or None
            if not exercise_name:
                raise InvalidSetError("exercise_name must not be blank")

        session_logs = self.repository.list_logs(user_id, training_session.id)
        baseline = self._baseline(user_id, exercise_name, training_session.id)

        log = SetLog(user_id=user_id, training_session_id=training_session.id, exercise_id=exercise_id,
                     exercise_name=exercise_name, muscle_group=muscle_group,
                     set_number=next_set_number(session_logs, exercise_id, exercise_name), reps=data.reps,
                     weight=data.weight, is_pr=is_personal_record(data.weight, data.reps, baseline), )
        log = self.repository.create_log(log)
        if log.is_pr:
            logger.info("New PR for user=%s on %s: %s x %s", user_id, exercise_name, log.weight, log.reps)
        return SetLogResponse.model_validate(log)

    def update_set(self, user_id: int, log_id: int, data: SetLogUpdate) -> SetLogResponse:
        """Change reps and/or weight.

        The edit can move the bar for every other set of the exercise, so
        the PR flags of all of them are replayed.
        """
        check_set_values(data.reps, data.weight)
        log = self.repository.update_log(user_id, log_id, reps=data.reps, weight=data.weight)
        self._refresh_pr_flags(user_id, log.exercise_name)
        return SetLogResponse.model_validate(log)

    def delete_set(self, user_id: int, log_id: int) -> None:
        """Delete a set and replay the PR flags of its exercise."""
        exercise_name = self.repository.get_owned(user_id, log_id).exercise_name
        self.repository.delete_log(user_id, log_id)
        self._refresh_pr_flags(user_id, exercise_name)

    def exercise_cards(self, user_id: int, session_id: int) -> list[ExerciseCardResponse]:
        """One card per exercise of the session.

        Template exercises of the session's workout day come first in
        ``sort_order`` (even without sets); exercises that were logged
        but are no longer (or never were) in the template follow in the
        order they were first logged.
        """
        training_session = self.sessions.get_owned(user_id, session_id)
        logs = self.repository.list_logs(user_id, session_id)

        exercises: list[Exercise] = []
        if training_session.workout_day_id is not None:
            exercises = self.templates.list_exercises(user_id, training_session.workout_day_id)

        cards: dict[tuple, dict] = {}
        for exercise in exercises:
            cards[("id", exercise.id)] = {"exercise_id": exercise.id, "exercise_name": exercise.name,
                                         "muscle_group": exercise.muscle_group, "sort_order": exercise.sort_order,
                                         "sets": [], }
        for log in logs:
            key = ("id", log.exercise_id) if log.exercise_id is not None else ("name", log.exercise_name)
            if key not in cards:
                cards[key] = {"exercise_id": log.exercise_id, "exercise_name": log.exercise_name,
                              "muscle_group": log.muscle_group, "sort_order": None, "sets": [], }
            cards[key]["sets"].append(log)

        names = sorted({card["exercise_name"] for card in cards.values()})
        history = self.repository.list_by_exercise_names(user_id, names)

        result = []
        for card in cards.values():
            baseline = personal_best_baseline(history, card["exercise_name"], session_id)
            result.append(ExerciseCardResponse(exercise_id=card["exercise_id"], exercise_name=card["exercise_name"],
                                               muscle_group=card["muscle_group"], sort_order=card["sort_order"],
                                               sets=[SetLogResponse.model_validate(s) for s in card["sets"]],
                                               volume=session_volume(card["sets"]),
                                               personal_best=self._baseline_response(baseline),
                                               has_pr=has_personal_record(card["sets"], baseline), ))
        return result

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _baseline(self, user_id: int, exercise_name: str, session_id: int) -> Optional[PersonalBest]:
        history = self.repository.list_by_exercise_names(user_id, [exercise_name])
        return personal_best_baseline(history, exercise_name, session_id)

    def _refresh_pr_flags(self, user_id: int, exercise_name: str) -> None:
        history = self.repository.list_by_exercise_names(user_id, [exercise_name])
        flags = personal_record_flags(history)
        for log in history:
            if log.is_pr != flags[log.id]:
                log.is_pr = flags[log.id]
                self.repository.save(log)

    @staticmethod
    def _baseline_response(baseline: Optional[PersonalBest]) -> Optional[PersonalBestResponse]:
        if baseline is None:
            return None
        return PersonalBestResponse(weight=baseline.weight, reps=baseline.reps)
