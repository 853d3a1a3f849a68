"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeWorkoutRepository, make_workout_row

    repo = FakeWorkoutRepository()
    repo.seed([make_workout_row(user_id="user1", name="Treino A")])
"""
from typing import Optional, Dict, Any, List
import uuid
from datetime import datetime, timezone

from tests.fakes.workout_repository import FakeWorkoutRepository
from tests.fakes.exercises_repository import FakeExercisesRepository


# =============================================================================
# Factory Functions
# =============================================================================


def make_exercise_row(
    *,
    sets: Any = 3,
    reps: Any = 10,
    weight: Any = 20,
    rest_seconds: Any = 60,
    name: Optional[str] = None,
    order_index: int = 0,
) -> Dict[str, Any]:
    """
    Build a workout_exercises row as returned by the nested Supabase select.

    Args:
        sets, reps, weight, rest_seconds: Prescription values (may be None)
        name: Library exercise name; omitted join when None
        order_index: Display position

    Returns:
        Row dict
    """
    row: Dict[str, Any] = {
        "id": str(uuid.uuid4()),
        "order_index": order_index,
        "sets": sets,
        "reps": reps,
        "weight": weight,
        "rest_seconds": rest_seconds,
    }
    if name is not None:
        row["exercises"] = {"id": f"ex-{order_index}", "name": name}
    return row


def make_workout_row(
    *,
    user_id: str = "test_user",
    name: str = "Treino",
    created_at: Optional[datetime] = None,
    exercises: Optional[List[Dict[str, Any]]] = None,
    workout_id: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Build a workouts row joined with its workout_exercises.

    Args:
        user_id: Owner
        name: Workout name
        created_at: Creation instant (defaults to 2024-05-15 10:00 UTC, a Wednesday)
        exercises: workout_exercises rows
        workout_id: Explicit ID, or a fresh UUID

    Returns:
        Row dict with ISO 8601 created_at
    """
    if created_at is None:
        created_at = datetime(2024, 5, 15, 10, 0, tzinfo=timezone.utc)
    return {
        "id": workout_id or str(uuid.uuid4()),
        "user_id": user_id,
        "name": name,
        "description": None,
        "frequency": None,
        "created_at": created_at.isoformat(),
        "workout_exercises": exercises if exercises is not None else [],
    }


def create_workout_repo(
    *,
    user_id: str = "test_user",
    num_workouts: int = 0,
) -> FakeWorkoutRepository:
    """
    Create a FakeWorkoutRepository with optional pre-populated workouts.

    Each generated workout holds one 3x10 @ 20 kg entry with 60 s rest
    (4.5 estimated minutes).

    Args:
        user_id: User ID for generated workouts
        num_workouts: Number of sample workouts to create

    Returns:
        Pre-populated FakeWorkoutRepository
    """
    repo = FakeWorkoutRepository()
    repo.seed([
        make_workout_row(
            user_id=user_id,
            name=f"Treino {i + 1}",
            exercises=[make_exercise_row(name="Supino Reto")],
        )
        for i in range(num_workouts)
    ])
    return repo


__all__ = [
    "FakeWorkoutRepository",
    "FakeExercisesRepository",
    "make_exercise_row",
    "make_workout_row",
    "create_workout_repo",
]
