"""
Template repository.

Workout days and their exercise templates: the user's weekly plan.
Implements :class:`app.liftlog.ports.TemplateStore`.
"""

from sqlalchemy import func, update
from sqlmodel import Session, select

from app.core.errors import NotFoundError
from app.db.repositories.base import persist, remove
from app.models.exercise import Exercise
from app.models.set_log import SetLog
from app.models.workout_day import WorkoutDay


class TemplateRepository:
    """Repository for WorkoutDay and Exercise database operations."""

    def __init__(self, session: Session):
        self.session = session

    # ------------------------------------------------------------------
    # Workout days
    # ------------------------------------------------------------------

    def create_day(self, day: WorkoutDay) -> WorkoutDay:
        return persist(self.session, day)

    def get_day(self, user_id: int, workout_day_id: int) -> WorkoutDay:
        """Return the user's workout day or raise :class:`NotFoundError`."""
        day = self.session.get(WorkoutDay, workout_day_id)
        if not day or day.user_id != user_id:
            raise NotFoundError("Workout day", workout_day_id)
        return day

    def list_days(self, user_id: int) -> list[WorkoutDay]:
        statement = select(WorkoutDay).where(WorkoutDay.user_id == user_id).order_by(WorkoutDay.day_number)
        return list(self.session.exec(statement).all())

    def rename_day(self, user_id: int, workout_day_id: int, name: str) -> WorkoutDay:
        day = self.get_day(user_id, workout_day_id)
        day.name = name
        return persist(self.session, day)

    # ------------------------------------------------------------------
    # Exercises
    # ------------------------------------------------------------------

    def get_exercise(self, user_id: int, exercise_id: int) -> Exercise:
        """Return the user's exercise or raise :class:`NotFoundError`."""
        exercise = self.session.get(Exercise, exercise_id)
        if not exercise or exercise.user_id != user_id:
            raise NotFoundError("Exercise", exercise_id)
        return exercise

    def list_exercises(self, user_id: int, workout_day_id: int) -> list[Exercise]:
        statement = (select(Exercise).where(Exercise.user_id == user_id, Exercise.workout_day_id == workout_day_id, )
                     .order_by(Exercise.sort_order, Exercise.id))
        return list(self.session.exec(statement).all())

    def count_exercises(self, user_id: int, workout_day_id: int) -> int:
        statement = (select(func.count()).select_from(Exercise).where(Exercise.user_id == user_id,
                                                                      Exercise.workout_day_id == workout_day_id, ))
        return self.session.exec(statement).first() or 0

    def create_exercise(self, exercise: Exercise) -> Exercise:
        return persist(self.session, exercise)

    def update_exercise(self, exercise: Exercise) -> Exercise:
        return persist(self.session, exercise)

    def delete_exercise(self, user_id: int, exercise_id: int) -> None:
        """Delete an exercise; its set logs stay, detached from the template."""
        exercise = self.get_exercise(user_id, exercise_id)
        # Not every backend enforces ON DELETE SET NULL (SQLite without the FK pragma)
        self.session.exec(update(SetLog).where(SetLog.exercise_id == exercise_id).values(exercise_id=None))
        remove(self.session, exercise)
