"""Tests for workout day and exercise template management."""

import datetime

import pytest

from app.core.errors import NotFoundError
from app.schemas.set_log import SetLogCreate
from app.schemas.workout_day import ExerciseCreate, ExerciseUpdate, WorkoutDayRename
from app.services.set_log_service import SetLogService
from app.services.template_service import TemplateService
from app.services.training_session_service import TrainingSessionService

USER_ID = 1
TODAY = datetime.date(2025, 12, 11)


# ======================================================================
# Workout days
# ======================================================================


class TestWorkoutDays:
    def test_rename(self, db, workout_days):
        day = TemplateService(db).rename_day(USER_ID, workout_days[0].id, WorkoutDayRename(name="  Push "))
        assert day.name == "Push"
        assert day.day_number == 1

    def test_rename_other_users_day(self, db, workout_days):
        with pytest.raises(NotFoundError):
            TemplateService(db).rename_day(2, workout_days[0].id, WorkoutDayRename(name="Mine"))


# ======================================================================
# Exercises
# ======================================================================


class TestExercises:
    def test_sort_order_is_current_count(self, db, workout_days):
        service = TemplateService(db)
        day_id = workout_days[0].id
        first = service.add_exercise(USER_ID, day_id, ExerciseCreate(name="Bench Press", muscle_group="Chest"))
        second = service.add_exercise(USER_ID, day_id, ExerciseCreate(name="Dips"))

        assert (first.sort_order, second.sort_order) == (0, 1)
        assert [e.name for e in service.list_exercises(USER_ID, day_id)] == ["Bench Press", "Dips"]

    def test_reorder(self, db, workout_days):
        service = TemplateService(db)
        day_id = workout_days[0].id
        first = service.add_exercise(USER_ID, day_id, ExerciseCreate(name="Bench Press"))
        service.add_exercise(USER_ID, day_id, ExerciseCreate(name="Dips"))
        service.update_exercise(USER_ID, first.id, ExerciseUpdate(sort_order=5))

        assert [e.name for e in service.list_exercises(USER_ID, day_id)] == ["Dips", "Bench Press"]

    def test_add_to_missing_day(self, db, workout_days):
        with pytest.raises(NotFoundError):
            TemplateService(db).add_exercise(USER_ID, 999, ExerciseCreate(name="Curl"))

    def test_delete_keeps_logged_sets(self, db, workout_days):
        templates = TemplateService(db)
        exercise = templates.add_exercise(USER_ID, workout_days[0].id,
                                          ExerciseCreate(name="Bench Press", muscle_group="Chest"))
        resolution = TrainingSessionService(db).resolve(USER_ID, workout_days[0].id, TODAY, TODAY)
        sets = SetLogService(db)
        sets.add_set(USER_ID, resolution.session.id, SetLogCreate(exercise_id=exercise.id, reps=5, weight=80))

        templates.delete_exercise(USER_ID, exercise.id)

        logs = sets.list_sets(USER_ID, resolution.session.id)
        assert len(logs) == 1
        assert logs[0].exercise_id is None
        assert logs[0].exercise_name == "Bench Press"
        assert logs[0].muscle_group == "Chest"
        assert templates.list_exercises(USER_ID, workout_days[0].id) == []
