"""
Profile endpoints.

Training profile and first-run onboarding.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.api.dependencies import get_current_user_id
from app.db.session import get_db
from app.schemas.profile import OnboardingRequest, OnboardingResponse, ProfileResponse, ProfileUpdate
from app.services.profile_service import ProfileService

router = APIRouter()


@router.get("", summary="Get the training profile.", response_model=ProfileResponse, )
def get_profile(db: Session = Depends(get_db), user_id: int = Depends(get_current_user_id), ):
    return ProfileService(db).get_profile(user_id)


@router.put("", summary="Update the training profile.", response_model=ProfileResponse, )
def update_profile(data: ProfileUpdate, db: Session = Depends(get_db), user_id: int = Depends(get_current_user_id), ):
    return ProfileService(db).update_profile(user_id, data)


@router.post("/onboarding", summary="Create the weekly template (Day 1 … Day N).", response_model=OnboardingResponse,
             status_code=status.HTTP_201_CREATED, )
def complete_onboarding(data: OnboardingRequest, db: Session = Depends(get_db),
                        user_id: int = Depends(get_current_user_id), ):
    """Runs once per user; a second call answers 409."""
    return ProfileService(db).complete_onboarding(user_id, data)
