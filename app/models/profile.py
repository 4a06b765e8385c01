"""
Profile database model.

One row per user: display name, the weekly training frequency chosen at
onboarding, and whether onboarding has run.  Authentication lives outside
this service; ``user_id`` is the identity handed over by the caller.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

from app.core.clock import utc_now


class Profile(SQLModel, table=True):
    """
    Per-user training profile.

    ``training_days_per_week`` is the target frequency the consistency
    score is measured against.
    """
    __tablename__ = "profiles"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(unique=True, index=True, nullable=False)

    display_name: Optional[str] = Field(default=None, max_length=255)
    training_days_per_week: Optional[int] = Field(default=None, ge=1, le=7)
    onboarding_completed: bool = Field(default=False)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
