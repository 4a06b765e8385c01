"""
Workout day endpoints.

Weekly template: renaming days and managing their exercises.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.api.dependencies import get_current_user_id
from app.db.session import get_db
from app.schemas.workout_day import (ExerciseCreate, ExerciseResponse, ExerciseUpdate, WorkoutDayRename,
                                     WorkoutDayResponse, )
from app.services.template_service import TemplateService

router = APIRouter()


@router.get("", summary="List workout days.", response_model=list[WorkoutDayResponse], )
def list_days(db: Session = Depends(get_db), user_id: int = Depends(get_current_user_id), ):
    return TemplateService(db).list_days(user_id)


@router.patch("/{workout_day_id}", summary="Rename a workout day.", response_model=WorkoutDayResponse, )
def rename_day(workout_day_id: int, data: WorkoutDayRename, db: Session = Depends(get_db),
               user_id: int = Depends(get_current_user_id), ):
    return TemplateService(db).rename_day(user_id, workout_day_id, data)


@router.get("/{workout_day_id}/exercises", summary="List a day's exercises in order.",
            response_model=list[ExerciseResponse], )
def list_exercises(workout_day_id: int, db: Session = Depends(get_db), user_id: int = Depends(get_current_user_id), ):
    return TemplateService(db).list_exercises(user_id, workout_day_id)


@router.post("/{workout_day_id}/exercises", summary="Add an exercise at the end of a day.",
             response_model=ExerciseResponse, status_code=status.HTTP_201_CREATED, )
def add_exercise(workout_day_id: int, data: ExerciseCreate, db: Session = Depends(get_db),
                 user_id: int = Depends(get_current_user_id), ):
    return TemplateService(db).add_exercise(user_id, workout_day_id, data)


@router.put("/exercises/{exercise_id}", summary="Update an exercise.", response_model=ExerciseResponse, )
def update_exercise(exercise_id: int, data: ExerciseUpdate, db: Session = Depends(get_db),
                    user_id: int = Depends(get_current_user_id), ):
    return TemplateService(db).update_exercise(user_id, exercise_id, data)


@router.delete("/exercises/{exercise_id}", summary="Remove an exercise (logged sets are kept).",
               status_code=status.HTTP_204_NO_CONTENT, )
def delete_exercise(exercise_id: int, db: Session = Depends(get_db), user_id: int = Depends(get_current_user_id), ):
    TemplateService(db).delete_exercise(user_id, exercise_id)
