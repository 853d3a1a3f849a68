"""
Infrastructure Layer for the fitness dashboard API.

This package contains concrete implementations of repository interfaces:
- db/: Supabase database implementations
"""

# Re-export database repositories for convenient access
from infrastructure.db import (
    SupabaseWorkoutRepository,
    SupabaseExercisesRepository,
)

__all__ = [
    "SupabaseWorkoutRepository",
    "SupabaseExercisesRepository",
]
