"""
Exercises Repository Interface (Port).

This module defines the abstract interface for querying the shared exercise
library (the ``exercises`` table).
"""
from typing import Protocol, Optional, List, Dict, Any


class ExercisesRepository(Protocol):
    """Abstract interface for reading the exercise library."""

    def list(
        self,
        *,
        muscle_group: Optional[str] = None,
        search: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        Get library exercises, ordered by name.

        Args:
            muscle_group: Only exercises for this muscle group (exact match)
            search: Case-insensitive substring of the exercise name

        Returns:
            List of exercise rows (id, name, muscle_group, equipment)

        Raises:
            WorkoutFetchError: If the data store cannot be read
        """
        ...
