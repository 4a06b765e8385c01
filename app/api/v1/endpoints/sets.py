"""
Set log endpoints.

Editing and deleting single sets; sets are logged through their session.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.api.dependencies import get_current_user_id
from app.db.session import get_db
from app.schemas.set_log import SetLogResponse, SetLogUpdate
from app.services.set_log_service import SetLogService

router = APIRouter()


@router.put("/{log_id}", summary="Edit reps and/or weight of a set.", response_model=SetLogResponse, )
def update_set(log_id: int, data: SetLogUpdate, db: Session = Depends(get_db),
               user_id: int = Depends(get_current_user_id), ):
    return SetLogService(db).update_set(user_id, log_id, data)


@router.delete("/{log_id}", summary="Delete a set.", status_code=status.HTTP_204_NO_CONTENT, )
def delete_set(log_id: int, db: Session = Depends(get_db), user_id: int = Depends(get_current_user_id), ):
    SetLogService(db).delete_set(user_id, log_id)
