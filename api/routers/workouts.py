"""
Workouts router.

This router creates, edits and deletes workouts with their exercise
entries, and provides derived statistics for a single workout: estimated
minutes and calories, total load, and per-exercise breakdown with images.
"""
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Response
from pydantic import BaseModel, Field

from api.deps import (
    get_current_user,
    get_dashboard_service,
    get_save_workout_use_case,
    get_workout_repo,
)
from application.exceptions import InvalidInputError, WorkoutFetchError, WorkoutPersistError
from application.ports import WorkoutRepository
from application.use_cases import SaveWorkoutUseCase
from backend.core.dashboard_service import DashboardService
from domain.models import WorkoutDraft, WorkoutRecord, WorkoutStats

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/workouts",
    tags=["Workouts"],
)


# =============================================================================
# Response Models
# =============================================================================


class ExerciseLineResponse(BaseModel):
    """One exercise entry in a workout summary."""
    name: str
    sets: int
    reps: int
    weight: float
    rest_seconds: int
    minutes: float
    image_url: str


class WorkoutSummaryApiResponse(BaseModel):
    """Response model for the workout summary endpoint."""
    id: str
    name: str
    description: Optional[str] = None
    created_at: datetime
    stats: WorkoutStats
    total_weight_kg: float
    image_url: str
    exercises: List[ExerciseLineResponse] = Field(default_factory=list)


# =============================================================================
# Endpoints
# =============================================================================


@router.get("/{workout_id}/summary", response_model=WorkoutSummaryApiResponse)
def get_workout_summary(
    workout_id: str = Path(..., description="Workout UUID"),
    user_id: str = Depends(get_current_user),
    service: DashboardService = Depends(get_dashboard_service),
) -> WorkoutSummaryApiResponse:
    """
    Get derived statistics for one workout.

    Exercises are listed in their display order.
    """
    try:
        result = service.get_workout_summary(user_id, workout_id)
    except InvalidInputError as e:
        logger.warning(f"Invalid data for workout {workout_id}: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    except WorkoutFetchError as e:
        raise HTTPException(status_code=502, detail=str(e))

    if result is None:
        raise HTTPException(status_code=404, detail=f"Workout '{workout_id}' not found")

    return WorkoutSummaryApiResponse(
        id=result.id,
        name=result.name,
        description=result.description,
        created_at=result.created_at,
        stats=result.stats,
        total_weight_kg=result.total_weight_kg,
        image_url=result.image_url,
        exercises=[
            ExerciseLineResponse(
                name=e.name,
                sets=e.sets,
                reps=e.reps,
                weight=e.weight,
                rest_seconds=e.rest_seconds,
                minutes=e.minutes,
                image_url=e.image_url,
            )
            for e in result.exercises
        ],
    )


# =============================================================================
# Workout Editing
# =============================================================================


class WorkoutExerciseResponse(BaseModel):
    """One configured exercise entry of a saved workout."""
    id: Optional[str] = None
    exercise_id: Optional[str] = None
    name: str
    order_index: int
    sets: int
    reps: int
    weight: float
    rest_seconds: int


class WorkoutResponse(BaseModel):
    """A saved workout with its exercise entries in display order."""
    id: str
    name: str
    description: Optional[str] = None
    frequency: Optional[str] = None
    created_at: datetime
    exercises: List[WorkoutExerciseResponse] = Field(default_factory=list)


def _to_workout_response(row: Dict[str, Any]) -> WorkoutResponse:
    workout = WorkoutRecord.model_validate(row)
    return WorkoutResponse(
        id=workout.id,
        name=workout.name,
        description=workout.description,
        frequency=workout.frequency,
        created_at=workout.created_at,
        exercises=[
            WorkoutExerciseResponse(
                id=entry.id,
                exercise_id=entry.exercise.id if entry.exercise else None,
                name=entry.display_name,
                order_index=entry.order_index,
                sets=entry.sets,
                reps=entry.reps,
                weight=entry.weight,
                rest_seconds=entry.rest_seconds,
            )
            for entry in workout.ordered_sets
        ],
    )


def _save(
    use_case: SaveWorkoutUseCase,
    user_id: str,
    draft: WorkoutDraft,
    workout_id: Optional[str] = None,
) -> WorkoutResponse:
    try:
        result = use_case.execute(user_id, draft, workout_id=workout_id)
    except (WorkoutFetchError, WorkoutPersistError) as e:
        raise HTTPException(status_code=502, detail=str(e))

    if result.not_found:
        raise HTTPException(status_code=404, detail=result.error)
    if not result.success:
        raise HTTPException(
            status_code=422,
            detail={"message": result.error, "errors": result.validation_errors},
        )
    if result.workout is None:
        raise HTTPException(status_code=404, detail=f"Workout '{result.workout_id}' not found")
    return _to_workout_response(result.workout)


@router.post("", response_model=WorkoutResponse, status_code=201)
def create_workout(
    draft: WorkoutDraft,
    user_id: str = Depends(get_current_user),
    use_case: SaveWorkoutUseCase = Depends(get_save_workout_use_case),
) -> WorkoutResponse:
    """
    Create a workout with its exercise entries.

    The name must not be blank and at least one exercise is required.
    Entries are stored in list order.
    """
    return _save(use_case, user_id, draft)


@router.patch("/{workout_id}", response_model=WorkoutResponse)
def update_workout(
    draft: WorkoutDraft,
    workout_id: str = Path(..., description="Workout UUID"),
    user_id: str = Depends(get_current_user),
    use_case: SaveWorkoutUseCase = Depends(get_save_workout_use_case),
) -> WorkoutResponse:
    """
    Update a workout.

    Only the fields present in the body change. When ``exercises`` is sent
    it replaces the entry list: entries with an ``id`` are updated, entries
    without one are added, and stored entries not listed are removed.
    """
    return _save(use_case, user_id, draft, workout_id)


@router.delete("/{workout_id}", status_code=204, response_class=Response)
def delete_workout(
    workout_id: str = Path(..., description="Workout UUID"),
    user_id: str = Depends(get_current_user),
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
) -> Response:
    """Delete a workout and its exercise entries."""
    try:
        deleted = workout_repo.delete(workout_id, user_id)
    except WorkoutPersistError as e:
        raise HTTPException(status_code=502, detail=str(e))

    if not deleted:
        raise HTTPException(status_code=404, detail=f"Workout '{workout_id}' not found")
    return Response(status_code=204)
