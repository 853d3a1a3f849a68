"""
Application Use Cases.

Use cases orchestrate domain logic and repository calls for a single
user-facing operation.
"""

from application.use_cases.save_workout import SaveWorkoutResult, SaveWorkoutUseCase

__all__ = [
    "SaveWorkoutUseCase",
    "SaveWorkoutResult",
]
