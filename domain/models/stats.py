"""
Derived statistics shapes consumed by the dashboard and progress charts.
"""

from pydantic import BaseModel, ConfigDict, Field


class WorkoutStats(BaseModel):
    """Aggregate training time and estimated energy expenditure."""

    calories: int = Field(default=0, ge=0, description="Estimated kcal burned")
    minutes: int = Field(default=0, ge=0, description="Estimated active minutes")

    model_config = ConfigDict(frozen=True)


class DayBucket(BaseModel):
    """
    One weekday accumulator of the weekly training-time chart.

    ``percentage`` is the bucket's share of the busiest bucket (0-100) and
    drives the bar height; it is not rounded.
    """

    day: str = Field(..., description="Weekday label, Mon..Sun")
    minutes: int = Field(default=0, ge=0)
    percentage: float = Field(default=0.0, ge=0)
    is_today: bool = Field(default=False)

    model_config = ConfigDict(frozen=True)
