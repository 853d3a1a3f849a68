"""
Workout Repository Interface (Port).

This module defines the abstract interface for reading and writing workouts
and their configured exercise entries. Implementations may use Supabase,
in-memory storage, or other backends.
"""
from typing import Protocol, Optional, List, Dict, Any


class WorkoutRepository(Protocol):
    """
    Abstract interface for workout persistence.

    Rows are returned pre-joined: each workout dict carries a
    ``workout_exercises`` list, and each entry carries its library exercise
    under ``exercises``. Callers validate rows into domain models.

    Writes are scoped: workout writes by owner, entry writes by parent
    workout. Reads return rows; writes return the affected row.
    """

    def list_for_user(self, user_id: str) -> List[Dict[str, Any]]:
        """
        Get all workouts owned by a user.

        Args:
            user_id: Auth user ID

        Returns:
            List of workout rows, ordered by created_at desc

        Raises:
            WorkoutFetchError: If the data store cannot be read
        """
        ...

    def get(
        self,
        workout_id: str,
        user_id: str,
    ) -> Optional[Dict[str, Any]]:
        """
        Get a single workout by ID.

        Args:
            workout_id: Workout UUID
            user_id: Auth user ID (for authorization)

        Returns:
            Workout row or None if not found/unauthorized

        Raises:
            WorkoutFetchError: If the data store cannot be read
        """
        ...

    # =========================================================================
    # Writes
    # =========================================================================

    def create(self, user_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert a workout owned by the user.

        Args:
            user_id: Auth user ID (owner)
            data: Header columns (name, description, frequency)

        Returns:
            The inserted workouts row, including its generated id

        Raises:
            WorkoutPersistError: If the insert fails
        """
        ...

    def update(
        self,
        workout_id: str,
        user_id: str,
        updates: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        """
        Update header columns of a workout owned by the user.

        Returns:
            The updated workouts row, or None if not found/unauthorized

        Raises:
            WorkoutPersistError: If the update fails
        """
        ...

    def delete(self, workout_id: str, user_id: str) -> bool:
        """
        Delete a workout owned by the user, with its exercise entries.

        Returns:
            True if a row was deleted, False if not found/unauthorized

        Raises:
            WorkoutPersistError: If the delete fails
        """
        ...

    def add_exercise(self, workout_id: str, entry: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert a workout_exercises row.

        Args:
            workout_id: Parent workout (ownership checked by the caller)
            entry: exercise_id, order_index, sets, reps, weight, rest_seconds

        Returns:
            The inserted workout_exercises row

        Raises:
            WorkoutPersistError: If the insert fails
        """
        ...

    def update_exercise(
        self,
        workout_id: str,
        entry_id: str,
        updates: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        """
        Update a workout_exercises row belonging to the workout.

        Returns:
            The updated row, or None if the entry is not part of the workout

        Raises:
            WorkoutPersistError: If the update fails
        """
        ...

    def remove_exercise(self, workout_id: str, entry_id: str) -> bool:
        """
        Delete a workout_exercises row belonging to the workout.

        Returns:
            True if a row was deleted

        Raises:
            WorkoutPersistError: If the delete fails
        """
        ...
