"""
Progress router for the progress screen.

This router provides:
- Total load lifted (sets x reps x weight, in kg)
- Training time and calorie totals
- The weekly training-time chart
"""
import logging
from datetime import datetime
from typing import List, Literal

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from api.deps import get_current_user, get_dashboard_service
from application.exceptions import InvalidInputError, WorkoutFetchError
from backend.core.dashboard_service import DashboardService
from domain.models import DayBucket, WorkoutStats

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Progress"],
)


class ProgressApiResponse(BaseModel):
    """Response model for the progress endpoint."""
    total_weight_kg: float
    stats: WorkoutStats
    weekly_progress: List[DayBucket]
    workout_count: int
    scope: str
    generated_at: datetime


@router.get("/progress", response_model=ProgressApiResponse)
def get_progress(
    scope: Literal["all_time", "rolling_week"] = Query(
        "all_time",
        description="Weekly chart scope: every workout, or only the last 7 days",
    ),
    user_id: str = Depends(get_current_user),
    service: DashboardService = Depends(get_dashboard_service),
) -> ProgressApiResponse:
    """Get total weight lifted, time totals and the weekly chart."""
    try:
        result = service.get_progress(user_id, scope=scope)
    except InvalidInputError as e:
        logger.warning(f"Invalid workout data for user {user_id}: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    except WorkoutFetchError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return ProgressApiResponse(
        total_weight_kg=result.total_weight_kg,
        stats=result.stats,
        weekly_progress=result.weekly_progress,
        workout_count=result.workout_count,
        scope=result.scope,
        generated_at=result.generated_at,
    )
