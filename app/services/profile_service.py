"""
Profile service.

Business logic for the training profile and first-run onboarding.
"""

import logging

from sqlmodel import Session

from app.core.clock import utc_now
from app.core.config import settings
from app.core.errors import ConflictError
from app.db.repositories.profile import ProfileRepository
from app.db.repositories.template import TemplateRepository
from app.models.workout_day import WorkoutDay
from app.schemas.profile import OnboardingRequest, OnboardingResponse, ProfileResponse, ProfileUpdate
from app.schemas.workout_day import WorkoutDayResponse

logger = logging.getLogger(__name__)


def default_day_name(day_number: int) -> str:
    """Name given to a workout day created during onboarding."""
    return f"Day {day_number}"


class ProfileService:
    """Service for profile-related business logic."""

    def __init__(self, session: Session):
        """
        Initialize service with database session.

        Args:
            session: SQLModel database session
        """
        self.repository = ProfileRepository(session)
        self.templates = TemplateRepository(session)

    def get_profile(self, user_id: int) -> ProfileResponse:
        return ProfileResponse.model_validate(self.repository.get_or_create(user_id))

    def update_profile(self, user_id: int, data: ProfileUpdate) -> ProfileResponse:
        profile = self.repository.get_or_create(user_id)
        if data.display_name is not None:
            profile.display_name = data.display_name
        if data.training_days_per_week is not None:
            profile.training_days_per_week = data.training_days_per_week
        profile.updated_at = utc_now()
        return ProfileResponse.model_validate(self.repository.update(profile))

    def complete_onboarding(self, user_id: int, data: OnboardingRequest) -> OnboardingResponse:
        """
        Create the weekly template and mark onboarding done.

        Creates ``Day 1`` … ``Day N`` for ``N = training_days_per_week``;
        day numbers that already exist are kept as they are.

        Raises:
            ConflictError: If onboarding was already completed
        """
        profile = self.repository.get_or_create(user_id)
        if profile.onboarding_completed:
            raise ConflictError("Onboarding already completed")

        existing = {day.day_number for day in self.templates.list_days(user_id)}
        for day_number in range(1, data.training_days_per_week + 1):
            if day_number not in existing:
                self.templates.create_day(
                    WorkoutDay(user_id=user_id, day_number=day_number, name=default_day_name(day_number)))

        profile.training_days_per_week = data.training_days_per_week
        if data.display_name is not None:
            profile.display_name = data.display_name
        profile.onboarding_completed = True
        profile.updated_at = utc_now()
        profile = self.repository.update(profile)

        logger.info("Onboarding completed for user=%s with %s workout days", user_id, data.training_days_per_week)
        days = [WorkoutDayResponse.model_validate(d) for d in self.templates.list_days(user_id)]
        return OnboardingResponse(profile=ProfileResponse.model_validate(profile), workout_days=days)

    def template_days_per_week(self, user_id: int) -> int:
        """Target training frequency for the consistency score.

        The profile setting wins; otherwise the number of workout days in
        the template; otherwise ``settings.DEFAULT_TRAINING_DAYS_PER_WEEK``.
        """
        profile = self.repository.get_by_user(user_id)
        if profile and profile.training_days_per_week:
            return profile.training_days_per_week
        day_count = len(self.templates.list_days(user_id))
        return day_count or settings.DEFAULT_TRAINING_DAYS_PER_WEEK
