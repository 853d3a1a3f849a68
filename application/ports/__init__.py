"""
Repository Interfaces (Ports).

This package defines abstract interfaces that decouple domain logic from
infrastructure (database, external services). Implementations are provided
in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the domain needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import WorkoutRepository

    class DashboardService:
        def __init__(self, workout_repo: WorkoutRepository):
            self.workout_repo = workout_repo
"""

# Workouts and their exercise entries
from application.ports.workout_repository import WorkoutRepository

# Exercise library
from application.ports.exercises_repository import ExercisesRepository

__all__ = [
    "WorkoutRepository",
    "ExercisesRepository",
]
