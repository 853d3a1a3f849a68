"""
Supabase implementation of ExercisesRepository.

This module provides the concrete Supabase implementation for querying
the shared exercise library.
"""
import logging
from typing import Optional, List, Dict, Any

from supabase import Client

from application.exceptions import WorkoutFetchError

logger = logging.getLogger(__name__)


class SupabaseExercisesRepository:
    """
    Supabase implementation of ExercisesRepository protocol.

    Supports filtering by muscle group and a case-insensitive name search.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def list(
        self,
        *,
        muscle_group: Optional[str] = None,
        search: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        Get library exercises ordered by name.

        Args:
            muscle_group: Exact muscle group filter
            search: Case-insensitive name substring

        Returns:
            List of exercise dictionaries
        """
        try:
            query = self._client.table("exercises") \
                .select("*") \
                .order("name", desc=False)

            if muscle_group:
                query = query.eq("muscle_group", muscle_group)

            if search:
                query = query.ilike("name", f"%{search}%")

            result = query.execute()
        except Exception as e:
            logger.exception("Error fetching exercises")
            raise WorkoutFetchError(f"Failed to fetch exercises: {e}") from e

        return result.data or []
