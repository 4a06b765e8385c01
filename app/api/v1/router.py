"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import analytics, days, profile, sets, training

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    profile.router, prefix="/profile", tags=["Profile"]
)
api_router.include_router(
    days.router, prefix="/days", tags=["Workout days"]
)
api_router.include_router(
    training.router,
    prefix="/training/sessions",
    tags=["Training sessions"],
)
api_router.include_router(
    sets.router, prefix="/sets", tags=["Set logs"]
)
api_router.include_router(
    analytics.router, prefix="/analytics", tags=["Analytics"]
)
