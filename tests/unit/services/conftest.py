"""SQLite-backed fixtures for the service tests."""

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import app.db.base  # noqa: F401
from app.schemas.profile import OnboardingRequest
from app.services.profile_service import ProfileService

USER_ID = 1
OTHER_USER_ID = 2


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def workout_days(db):
    """User 1 onboarded with four workout days (Mon..Thu)."""
    response = ProfileService(db).complete_onboarding(USER_ID, OnboardingRequest(training_days_per_week=4))
    return response.workout_days
