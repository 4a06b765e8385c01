"""
Analytics endpoints: the training stats dashboard.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlmodel import Session

from app.api.dependencies import get_current_user_id
from app.core.config import settings
from app.db.session import get_db
from app.liftlog.calendar import RANGE_PRESETS
from app.schemas.analytics import TrainingStats
from app.services.analytics_service import AnalyticsService

router = APIRouter()


@router.get(
    "/stats",
    summary="Get training stats for a preset range or explicit dates.",
    response_model=Optional[TrainingStats],
)
def get_training_stats(
    range_preset: Optional[str] = Query(
        None, alias="range", description="Preset: " + ", ".join(RANGE_PRESETS)
    ),
    start: Optional[datetime.date] = Query(
        None, description="Range start (inclusive)"
    ),
    end: Optional[datetime.date] = Query(
        None, description="Range end (inclusive)"
    ),
    today: Optional[datetime.date] = Query(
        None, description="Reference date (defaults to today)"
    ),
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """``null`` when nothing was logged in the range."""
    ref_date = today or datetime.date.today()
    service = AnalyticsService(db)

    if start and end:
        if start > end:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail="start must not be after end",
            )
        return service.stats(user_id, start, end, ref_date)

    preset = range_preset or settings.DEFAULT_STATS_RANGE
    if preset not in RANGE_PRESETS:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Unknown range {preset!r}",
        )
    return service.stats_for_preset(user_id, preset, ref_date)
