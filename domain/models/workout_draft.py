"""
Workout drafts - user input for creating or editing a workout.

A draft carries what the user typed in the workout editor. Structural checks
(types, non-negative numbers) happen here; business rules such as "a workout
needs a name" live in the save use case so they can be reported together.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ExerciseEntryDraft(BaseModel):
    """
    One exercise entry as edited by the user.

    ``id`` is set when the entry already exists in ``workout_exercises``;
    entries without an id are added on save.
    """

    id: Optional[str] = Field(default=None, description="Existing workout_exercises row id")
    exercise_id: str = Field(..., min_length=1, description="Library exercise id")

    sets: int = Field(default=0, ge=0)
    reps: int = Field(default=0, ge=0)
    weight: float = Field(default=0.0, ge=0, allow_inf_nan=False, description="Load in kilograms")
    rest_seconds: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    @field_validator("sets", "reps", "weight", "rest_seconds", mode="before")
    @classmethod
    def default_missing_to_zero(cls, v: Any) -> Any:
        if v is None:
            return 0
        return v

    def to_row(self, order_index: int) -> Dict[str, Any]:
        """Column values for a ``workout_exercises`` insert or update."""
        return {
            "exercise_id": self.exercise_id,
            "order_index": order_index,
            "sets": self.sets,
            "reps": self.reps,
            "weight": self.weight,
            "rest_seconds": self.rest_seconds,
        }


class WorkoutDraft(BaseModel):
    """
    Workout header plus its exercise entries, in display order.

    When editing, only the fields the caller actually sent are applied
    (see ``model_fields_set``); ``exercises``, when sent, replaces the
    whole entry list.
    """

    name: str = Field(default="", max_length=200)
    description: Optional[str] = Field(default=None, max_length=2000)
    frequency: Optional[str] = Field(default=None, max_length=100)
    exercises: List[ExerciseEntryDraft] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("name", mode="before")
    @classmethod
    def default_missing_name(cls, v: Any) -> Any:
        if v is None:
            return ""
        return v

    @field_validator("exercises", mode="before")
    @classmethod
    def default_missing_exercises(cls, v: Any) -> Any:
        if v is None:
            return []
        return v

    def header(self, *, only_sent: bool = False) -> Dict[str, Any]:
        """Column values for a ``workouts`` insert or update."""
        fields = ("name", "description", "frequency")
        if only_sent:
            fields = tuple(f for f in fields if f in self.model_fields_set)
        return {f: getattr(self, f) for f in fields}
