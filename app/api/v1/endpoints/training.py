"""
Training session endpoints.

Sessions are resolved per workout day and week, never created directly.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.api.dependencies import get_current_user_id
from app.db.session import get_db
from app.schemas.set_log import ExerciseCardResponse, SetLogCreate, SetLogResponse
from app.schemas.training_session import SessionResolutionResponse, TrainingSessionResponse, TrainingSessionUpdate
from app.services.set_log_service import SetLogService
from app.services.training_session_service import TrainingSessionService

router = APIRouter()


@router.get("/resolve", summary="Resolve a workout day within a week to its session.",
            response_model=SessionResolutionResponse, )
def resolve_session(workout_day_id: int = Query(..., description="Workout day template id"),
                    week_of: Optional[datetime.date] = Query(None, description="Any date in the week (defaults to today)"),
                    today: Optional[datetime.date] = Query(None, description="Reference date (defaults to today)"),
                    db: Session = Depends(get_db), user_id: int = Depends(get_current_user_id), ):
    """
    In the current week a missing session is created; in any other week
    the result is ``empty`` with a ``day_status`` for the client.
    """
    ref_date = today or datetime.date.today()
    service = TrainingSessionService(db)
    return service.resolve(user_id, workout_day_id, week_of or ref_date, ref_date)


@router.get("", summary="List training sessions with optional date range.",
            response_model=list[TrainingSessionResponse], )
def list_sessions(start: Optional[datetime.date] = Query(None, description="Range start (inclusive)"),
                  end: Optional[datetime.date] = Query(None, description="Range end (inclusive)"),
                  db: Session = Depends(get_db), user_id: int = Depends(get_current_user_id), ):
    service = TrainingSessionService(db)
    if start and end:
        return service.get_range(user_id, start, end)
    # Default: last 30 days
    end_date = datetime.date.today()
    start_date = end_date - datetime.timedelta(days=29)
    return service.get_range(user_id, start_date, end_date)


@router.get("/id/{session_id}", summary="Get a training session.", response_model=TrainingSessionResponse, )
def get_session(session_id: int, db: Session = Depends(get_db), user_id: int = Depends(get_current_user_id), ):
    return TrainingSessionService(db).get_by_id(user_id, session_id)


@router.put("/id/{session_id}", summary="Update notes or completion of a session.",
            response_model=TrainingSessionResponse, )
def update_session(session_id: int, data: TrainingSessionUpdate, db: Session = Depends(get_db),
                   user_id: int = Depends(get_current_user_id), ):
    return TrainingSessionService(db).update(user_id, session_id, data)


@router.get("/id/{session_id}/sets", summary="List the sets of a session.", response_model=list[SetLogResponse], )
def list_sets(session_id: int, db: Session = Depends(get_db), user_id: int = Depends(get_current_user_id), ):
    return SetLogService(db).list_sets(user_id, session_id)


@router.post("/id/{session_id}/sets", summary="Log a set.", response_model=SetLogResponse,
             status_code=status.HTTP_201_CREATED, )
def add_set(session_id: int, data: SetLogCreate, db: Session = Depends(get_db),
            user_id: int = Depends(get_current_user_id), ):
    return SetLogService(db).add_set(user_id, session_id, data)


@router.get("/id/{session_id}/exercises", summary="Exercise cards of a session with PR state.",
            response_model=list[ExerciseCardResponse], )
def exercise_cards(session_id: int, db: Session = Depends(get_db), user_id: int = Depends(get_current_user_id), ):
    return SetLogService(db).exercise_cards(user_id, session_id)
