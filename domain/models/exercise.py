"""
Exercise models for the workout library and per-workout prescriptions.

ExerciseDefinition mirrors a row of the ``exercises`` library table.
ExerciseSet mirrors a row of ``workout_exercises``: one configured exercise
entry within a workout, carrying its own sets/reps/weight/rest parameters.
It is not a single physical set.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ExerciseDefinition(BaseModel):
    """
    An exercise from the shared exercise library.

    Examples:
        >>> ExerciseDefinition(id="ex-1", name="Supino Reto", muscle_group="peito")
    """

    id: Optional[str] = Field(default=None, description="Exercise identifier")
    name: str = Field(..., min_length=1, description="Display name")
    muscle_group: Optional[str] = Field(
        default=None, description="Primary muscle group (e.g., 'peito', 'costas')"
    )
    equipment: Optional[str] = Field(
        default=None, description="Equipment used (e.g., 'barra', 'halteres')"
    )

    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)


class ExerciseSet(BaseModel):
    """
    One configured exercise entry within a workout.

    Numeric fields that are absent or ``null`` in the stored row default to
    zero, so an incomplete entry contributes nothing to aggregates instead of
    failing. Negative, non-numeric or non-finite values are rejected.

    Examples:
        >>> exercise_set = ExerciseSet(sets=3, reps=10, weight=20, rest_seconds=60)
        >>> exercise_set.total_reps
        30
        >>> exercise_set.volume_kg
        600.0
    """

    id: Optional[str] = Field(default=None, description="workout_exercises row id")
    order_index: int = Field(default=0, description="Display position within the workout")

    sets: int = Field(default=0, ge=0, description="Number of sets performed")
    reps: int = Field(default=0, ge=0, description="Repetitions per set")
    weight: float = Field(
        default=0.0, ge=0, allow_inf_nan=False, description="Load in kilograms"
    )
    rest_seconds: int = Field(
        default=0, ge=0, description="Rest interval between sets, in seconds"
    )

    exercise: Optional[ExerciseDefinition] = Field(
        default=None,
        description="Library exercise this entry refers to",
        validation_alias="exercises",
    )

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True, coerce_numbers_to_str=True)

    @field_validator("sets", "reps", "weight", "rest_seconds", "order_index", mode="before")
    @classmethod
    def default_missing_to_zero(cls, v: Any) -> Any:
        """Absent numeric values contribute nothing."""
        if v is None:
            return 0
        return v

    @property
    def total_reps(self) -> int:
        """Repetitions across all sets."""
        return self.sets * self.reps

    @property
    def volume_kg(self) -> float:
        """Load moved across all sets (sets x reps x weight)."""
        return self.sets * self.reps * self.weight

    @property
    def display_name(self) -> str:
        if self.exercise is not None:
            return self.exercise.name
        return ""

    def __str__(self) -> str:
        parts = [self.display_name or "Exercise", f"{self.sets}x{self.reps}"]
        if self.weight:
            parts.append(f"@ {self.weight:g} kg")
        return " ".join(parts)
