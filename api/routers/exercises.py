"""
Exercises router for the shared exercise library.

Used by the workout editor to pick exercises, filtered by muscle group
or a name search.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from api.deps import get_current_user, get_exercises_repo
from application.exceptions import WorkoutFetchError
from application.ports import ExercisesRepository
from backend.core.exercise_images import get_exercise_image

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/exercises",
    tags=["Exercises"],
)


class ExerciseResponse(BaseModel):
    """A library exercise."""
    id: str
    name: str
    muscle_group: Optional[str] = None
    equipment: Optional[str] = None
    image_url: str


class ExerciseListResponse(BaseModel):
    """Response model for the exercise list endpoint."""
    exercises: List[ExerciseResponse]
    total: int


@router.get("", response_model=ExerciseListResponse)
def list_exercises(
    muscle_group: Optional[str] = Query(None, description="Filter by muscle group"),
    search: Optional[str] = Query(None, min_length=1, description="Name search"),
    user_id: str = Depends(get_current_user),
    exercises_repo: ExercisesRepository = Depends(get_exercises_repo),
) -> ExerciseListResponse:
    """List library exercises ordered by name."""
    try:
        rows = exercises_repo.list(muscle_group=muscle_group, search=search)
    except WorkoutFetchError as e:
        raise HTTPException(status_code=502, detail=str(e))

    exercises = [
        ExerciseResponse(
            id=str(row.get("id", "")),
            name=row.get("name", ""),
            muscle_group=row.get("muscle_group"),
            equipment=row.get("equipment"),
            image_url=get_exercise_image(row.get("name") or row.get("muscle_group")),
        )
        for row in rows
    ]
    return ExerciseListResponse(exercises=exercises, total=len(exercises))
