"""
Dashboard router for the home screen.

This router provides the derived statistics shown on the home screen:
- Stat cards (estimated active minutes and calories)
- The weekly training-time chart
- Recent workout cards with keyword-matched images
"""
import logging
from datetime import datetime
from typing import List, Literal

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field

from api.deps import get_current_user, get_dashboard_service
from application.exceptions import InvalidInputError, WorkoutFetchError
from backend.core.dashboard_service import DashboardService
from domain.models import DayBucket, WorkoutStats

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Dashboard"],
)


# =============================================================================
# Response Models
# =============================================================================


class RecentWorkoutItem(BaseModel):
    """A workout card."""
    id: str
    name: str
    created_at: datetime
    exercise_count: int
    minutes: int
    image_url: str


class DashboardApiResponse(BaseModel):
    """Response model for the dashboard endpoint."""
    stats: WorkoutStats
    weekly_progress: List[DayBucket]
    workout_count: int
    scope: str
    generated_at: datetime
    recent_workouts: List[RecentWorkoutItem] = Field(default_factory=list)


# =============================================================================
# Endpoints
# =============================================================================


@router.get("/dashboard", response_model=DashboardApiResponse)
def get_dashboard(
    scope: Literal["all_time", "rolling_week"] = Query(
        "all_time",
        description="Weekly chart scope: every workout, or only the last 7 days",
    ),
    recent_limit: int = Query(5, ge=0, le=50, description="Workout cards to include"),
    user_id: str = Depends(get_current_user),
    service: DashboardService = Depends(get_dashboard_service),
) -> DashboardApiResponse:
    """
    Get the home screen dashboard.

    Minutes and calories are estimates derived from each workout's
    sets, reps and rest intervals.
    """
    try:
        result = service.get_dashboard(user_id, scope=scope, recent_limit=recent_limit)
    except InvalidInputError as e:
        logger.warning(f"Invalid workout data for user {user_id}: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    except WorkoutFetchError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return DashboardApiResponse(
        stats=result.stats,
        weekly_progress=result.weekly_progress,
        workout_count=result.workout_count,
        scope=result.scope,
        generated_at=result.generated_at,
        recent_workouts=[
            RecentWorkoutItem(
                id=w.id,
                name=w.name,
                created_at=w.created_at,
                exercise_count=w.exercise_count,
                minutes=w.minutes,
                image_url=w.image_url,
            )
            for w in result.recent_workouts
        ],
    )
