"""
Domain models for the fitness dashboard.

These models are independent of infrastructure concerns (database, API):
- WorkoutRecord: a workout with its configured exercise entries
- ExerciseSet: one exercise entry (sets/reps/weight/rest)
- ExerciseDefinition: an exercise from the shared library
- WorkoutDraft, ExerciseEntryDraft: user input for creating/editing workouts
- WorkoutStats, DayBucket: derived statistics shapes

Usage:
    >>> from domain.models import WorkoutRecord

    >>> workout = WorkoutRecord.model_validate(row_from_supabase)
    >>> workout.ordered_sets
"""

from domain.models.exercise import ExerciseDefinition, ExerciseSet
from domain.models.stats import DayBucket, WorkoutStats
from domain.models.workout import WorkoutRecord
from domain.models.workout_draft import ExerciseEntryDraft, WorkoutDraft

__all__ = [
    "WorkoutRecord",
    "ExerciseSet",
    "ExerciseDefinition",
    "WorkoutDraft",
    "ExerciseEntryDraft",
    "WorkoutStats",
    "DayBucket",
]
