"""
Template service.

Workout days and their exercise templates.  Days are created during
onboarding and afterwards can only be renamed; exercises can be added,
edited, reordered and removed.  Set logs keep their copied exercise name
when an exercise is removed.
"""

from sqlmodel import Session

from app.db.repositories.template import TemplateRepository
from app.models.exercise import Exercise
from app.schemas.workout_day import (ExerciseCreate, ExerciseResponse, ExerciseUpdate, WorkoutDayRename,
                                     WorkoutDayResponse, )


class TemplateService:
    """Service for workout day / exercise template business logic."""

    def __init__(self, session: Session):
        self.repository = TemplateRepository(session)

    # ------------------------------------------------------------------
    # Workout days
    # ------------------------------------------------------------------

    def list_days(self, user_id: int) -> list[WorkoutDayResponse]:
        return [WorkoutDayResponse.model_validate(d) for d in self.repository.list_days(user_id)]

    def rename_day(self, user_id: int, workout_day_id: int, data: WorkoutDayRename) -> WorkoutDayResponse:
        day = self.repository.rename_day(user_id, workout_day_id, data.name.strip())
        return WorkoutDayResponse.model_validate(day)

    # ------------------------------------------------------------------
    # Exercises
    # ------------------------------------------------------------------

    def list_exercises(self, user_id: int, workout_day_id: int) -> list[ExerciseResponse]:
        self.repository.get_day(user_id, workout_day_id)
        return [ExerciseResponse.model_validate(e) for e in self.repository.list_exercises(user_id, workout_day_id)]

    def add_exercise(self, user_id: int, workout_day_id: int, data: ExerciseCreate) -> ExerciseResponse:
        """Append an exercise at the end of the day's list."""
        self.repository.get_day(user_id, workout_day_id)
        sort_order = self.repository.count_exercises(user_id, workout_day_id)
        exercise = Exercise(user_id=user_id, workout_day_id=workout_day_id, name=data.name.strip(),
                            muscle_group=data.muscle_group or None, sort_order=sort_order, )
        return ExerciseResponse.model_validate(self.repository.create_exercise(exercise))

    def update_exercise(self, user_id: int, exercise_id: int, data: ExerciseUpdate) -> ExerciseResponse:
        exercise = self.repository.get_exercise(user_id, exercise_id)
        if data.name is not None:
            exercise.name = data.name.strip()
        if data.muscle_group is not None:
            exercise.muscle_group = data.muscle_group or None
        if data.sort_order is not None:
            exercise.sort_order = data.sort_order
        return ExerciseResponse.model_validate(self.repository.update_exercise(exercise))

    def delete_exercise(self, user_id: int, exercise_id: int) -> None:
        self.repository.delete_exercise(user_id, exercise_id)
