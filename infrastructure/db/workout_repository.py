"""
Supabase Workout Repository Implementation.

This module implements the WorkoutRepository protocol using Supabase.
Workouts are read from the ``workouts`` table with their
``workout_exercises`` rows and library ``exercises`` embedded in one query.
"""
from typing import Optional, List, Dict, Any
import logging

from supabase import Client

from application.exceptions import WorkoutFetchError, WorkoutPersistError

logger = logging.getLogger(__name__)

# Nested projection: workout -> exercise entries -> library exercise
WORKOUT_SELECT = """
    *,
    workout_exercises (
        id,
        order_index,
        sets,
        reps,
        weight,
        rest_seconds,
        exercises (
            id,
            name,
            muscle_group,
            equipment
        )
    )
"""


class SupabaseWorkoutRepository:
    """
    Supabase implementation of WorkoutRepository.

    Handles workout retrieval and persistence. Workout reads and writes are
    scoped by user_id; entry writes are scoped by workout_id.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def list_for_user(self, user_id: str) -> List[Dict[str, Any]]:
        """Get all workouts owned by a user, newest first."""
        try:
            result = self._client.table("workouts") \
                .select(WORKOUT_SELECT) \
                .eq("user_id", user_id) \
                .order("created_at", desc=True) \
                .execute()
        except Exception as e:
            logger.exception(f"Error fetching workouts for user {user_id}")
            raise WorkoutFetchError(f"Failed to fetch workouts: {e}") from e

        rows = result.data or []
        logger.debug(f"Fetched {len(rows)} workouts for user {user_id}")
        return rows

    def get(
        self,
        workout_id: str,
        user_id: str,
    ) -> Optional[Dict[str, Any]]:
        """Get a single workout owned by the user."""
        try:
            result = self._client.table("workouts") \
                .select(WORKOUT_SELECT) \
                .eq("id", workout_id) \
                .eq("user_id", user_id) \
                .limit(1) \
                .execute()
        except Exception as e:
            logger.exception(f"Error fetching workout {workout_id}")
            raise WorkoutFetchError(f"Failed to fetch workout {workout_id}: {e}") from e

        if result.data and len(result.data) > 0:
            return result.data[0]
        return None

    # =========================================================================
    # Writes
    # =========================================================================

    def create(self, user_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a workout owned by the user."""
        try:
            result = self._client.table("workouts").insert({**data, "user_id": user_id}).execute()
        except Exception as e:
            logger.exception(f"Error creating workout for user {user_id}")
            raise WorkoutPersistError(f"Failed to create workout: {e}") from e

        if not result.data:
            raise WorkoutPersistError("Failed to create workout: no row returned")
        logger.info(f"Workout created for user {user_id}, id: {result.data[0].get('id')}")
        return result.data[0]

    def update(
        self,
        workout_id: str,
        user_id: str,
        updates: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        """Update header columns of a workout owned by the user."""
        try:
            result = self._client.table("workouts") \
                .update(updates) \
                .eq("id", workout_id) \
                .eq("user_id", user_id) \
                .execute()
        except Exception as e:
            logger.exception(f"Error updating workout {workout_id}")
            raise WorkoutPersistError(f"Failed to update workout {workout_id}: {e}") from e

        if result.data and len(result.data) > 0:
            return result.data[0]
        logger.warning(f"No workout {workout_id} for user {user_id} (0 rows updated)")
        return None

    def delete(self, workout_id: str, user_id: str) -> bool:
        """Delete a workout owned by the user. Entries go with it (ON DELETE CASCADE)."""
        try:
            logger.info(f"Attempting to delete workout {workout_id} for user {user_id}")
            result = self._client.table("workouts") \
                .delete() \
                .eq("id", workout_id) \
                .eq("user_id", user_id) \
                .execute()
        except Exception as e:
            logger.exception(f"Error deleting workout {workout_id}")
            raise WorkoutPersistError(f"Failed to delete workout {workout_id}: {e}") from e

        deleted_count = len(result.data) if result.data else 0
        if deleted_count > 0:
            logger.info(f"Workout {workout_id} deleted successfully ({deleted_count} row(s))")
            return True
        logger.warning(f"No workout found with id {workout_id} for user {user_id} (0 rows deleted)")
        return False

    def add_exercise(self, workout_id: str, entry: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a workout_exercises row."""
        try:
            result = self._client.table("workout_exercises") \
                .insert({**entry, "workout_id": workout_id}) \
                .execute()
        except Exception as e:
            logger.exception(f"Error adding exercise to workout {workout_id}")
            raise WorkoutPersistError(f"Failed to add exercise: {e}") from e

        if not result.data:
            raise WorkoutPersistError("Failed to add exercise: no row returned")
        return result.data[0]

    def update_exercise(
        self,
        workout_id: str,
        entry_id: str,
        updates: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        """Update a workout_exercises row belonging to the workout."""
        try:
            result = self._client.table("workout_exercises") \
                .update(updates) \
                .eq("id", entry_id) \
                .eq("workout_id", workout_id) \
                .execute()
        except Exception as e:
            logger.exception(f"Error updating exercise entry {entry_id}")
            raise WorkoutPersistError(f"Failed to update exercise entry {entry_id}: {e}") from e

        if result.data and len(result.data) > 0:
            return result.data[0]
        return None

    def remove_exercise(self, workout_id: str, entry_id: str) -> bool:
        """Delete a workout_exercises row belonging to the workout."""
        try:
            result = self._client.table("workout_exercises") \
                .delete() \
                .eq("id", entry_id) \
                .eq("workout_id", workout_id) \
                .execute()
        except Exception as e:
            logger.exception(f"Error removing exercise entry {entry_id}")
            raise WorkoutPersistError(f"Failed to remove exercise entry {entry_id}: {e}") from e

        return bool(result.data)
