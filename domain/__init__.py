"""
Domain layer for the fitness dashboard.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).
"""

from domain.models import (
    DayBucket,
    ExerciseDefinition,
    ExerciseSet,
    WorkoutRecord,
    WorkoutStats,
)

__all__ = [
    "DayBucket",
    "ExerciseDefinition",
    "ExerciseSet",
    "WorkoutRecord",
    "WorkoutStats",
]
