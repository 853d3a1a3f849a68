"""
Workout record - the unit the statistics are computed over.

A WorkoutRecord is a read-only snapshot of a ``workouts`` row pre-joined with
its ``workout_exercises`` rows. The data store owns the entity; services only
read snapshots passed to them per call.
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from domain.models.exercise import ExerciseSet


class WorkoutRecord(BaseModel):
    """
    A named, user-created collection of exercises.

    The Supabase join key ``workout_exercises`` populates ``exercise_sets``;
    a ``null`` or missing join yields an empty list.

    Examples:
        >>> workout = WorkoutRecord.model_validate({
        ...     "id": "w-1",
        ...     "name": "Treino de Peito",
        ...     "created_at": "2024-05-15T10:00:00+00:00",
        ...     "workout_exercises": [
        ...         {"sets": 3, "reps": 10, "weight": 20, "rest_seconds": 60},
        ...     ],
        ... })
        >>> len(workout.exercise_sets)
        1
    """

    id: str = Field(..., description="Workout identifier (UUID)")
    user_id: Optional[str] = Field(default=None, description="Owner (auth user id)")
    name: str = Field(default="", description="Free-text label")
    description: Optional[str] = Field(default=None)
    frequency: Optional[str] = Field(
        default=None, description="How often the workout is planned (free text)"
    )
    created_at: datetime = Field(..., description="When the workout was logged")

    exercise_sets: List[ExerciseSet] = Field(
        default_factory=list,
        validation_alias=AliasChoices("exercise_sets", "workout_exercises"),
        description="Configured exercise entries; order is display-only",
    )

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True, coerce_numbers_to_str=True)

    @field_validator("exercise_sets", mode="before")
    @classmethod
    def default_missing_sets(cls, v: Any) -> Any:
        if v is None:
            return []
        return v

    @field_validator("name", mode="before")
    @classmethod
    def default_missing_name(cls, v: Any) -> Any:
        if v is None:
            return ""
        return v

    @property
    def ordered_sets(self) -> List[ExerciseSet]:
        """Exercise entries in display order."""
        return sorted(self.exercise_sets, key=lambda s: s.order_index)

    @property
    def exercise_count(self) -> int:
        return len(self.exercise_sets)
