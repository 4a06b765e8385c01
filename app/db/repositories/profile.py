"""
Profile repository.

Handles database operations for the Profile model.
"""

from typing import Optional

from sqlmodel import Session, select

from app.db.repositories.base import persist
from app.models.profile import Profile


class ProfileRepository:
    """Repository for Profile database operations."""

    def __init__(self, session: Session):
        """
        Initialize repository with database session.

        Args:
            session: SQLModel database session
        """
        self.session = session

    def get_by_user(self, user_id: int) -> Optional[Profile]:
        """
        Get the profile of a user.

        Args:
            user_id: User ID

        Returns:
            Profile instance if found, None otherwise
        """
        statement = select(Profile).where(Profile.user_id == user_id)
        return self.session.exec(statement).first()

    def create(self, profile: Profile) -> Profile:
        return persist(self.session, profile)

    def update(self, profile: Profile) -> Profile:
        return persist(self.session, profile)

    def get_or_create(self, user_id: int) -> Profile:
        """Get the user's profile, or create an empty one."""
        existing = self.get_by_user(user_id)
        if existing:
            return existing
        return self.create(Profile(user_id=user_id))
