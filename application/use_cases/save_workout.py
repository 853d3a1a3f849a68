"""
SaveWorkout Use Case.

Orchestrates workout persistence with validation, handling both
create (new workout) and update (existing workout) operations.
A saved workout always has a name and at least one exercise entry.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from application.ports import WorkoutRepository
from domain.models import ExerciseEntryDraft, WorkoutDraft

logger = logging.getLogger(__name__)


@dataclass
class SaveWorkoutResult:
    """Result of the SaveWorkout use case execution."""

    success: bool
    workout: Optional[Dict[str, Any]] = None
    workout_id: Optional[str] = None
    is_update: bool = False
    not_found: bool = False
    error: Optional[str] = None
    validation_errors: List[str] = field(default_factory=list)


class SaveWorkoutUseCase:
    """
    Use case for saving workouts with validation.

    Orchestrates the following workflow:
    1. For updates, load the workout (owner-scoped)
    2. Validate the workout as it will look after the save
    3. Create or update the workout header
    4. Update, add and remove exercise entries; list position becomes order_index
    5. Return the saved workout, re-read with its joined entries

    Data store failures (WorkoutFetchError, WorkoutPersistError) propagate.

    Usage:
        >>> use_case = SaveWorkoutUseCase(workout_repo=workout_repo)
        >>> result = use_case.execute("user-123", WorkoutDraft(name="Treino A", exercises=[...]))
        >>> if result.success:
        ...     print(f"Saved workout: {result.workout_id}")
    """

    def __init__(
        self,
        workout_repo: WorkoutRepository,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            workout_repo: Repository for persisting workouts
        """
        self._workout_repo = workout_repo

    def execute(
        self,
        user_id: str,
        draft: WorkoutDraft,
        *,
        workout_id: Optional[str] = None,
    ) -> SaveWorkoutResult:
        """
        Execute the save workout workflow.

        Args:
            user_id: Auth user ID (owner)
            draft: Workout input. For updates only the fields that were
                sent are applied, and ``exercises`` replaces the entry list.
            workout_id: Existing workout to update, or None to create

        Returns:
            SaveWorkoutResult with success status and saved workout row
        """
        is_update = workout_id is not None
        existing = None

        if is_update:
            existing = self._workout_repo.get(workout_id, user_id)
            if existing is None:
                logger.warning(f"Workout {workout_id} not found for user {user_id}")
                return SaveWorkoutResult(
                    success=False,
                    workout_id=workout_id,
                    is_update=True,
                    not_found=True,
                    error=f"Workout '{workout_id}' not found",
                )

        validation_errors = self._validate_workout(draft, existing)
        if validation_errors:
            logger.warning(f"Workout validation failed: {validation_errors}")
            return SaveWorkoutResult(
                success=False,
                workout_id=workout_id,
                is_update=is_update,
                error="Workout validation failed",
                validation_errors=validation_errors,
            )

        operation = "update" if is_update else "create"
        logger.info(f"Saving workout ({operation}) for user {user_id}")

        if is_update:
            updates = draft.header(only_sent=True)
            if updates and self._workout_repo.update(workout_id, user_id, updates) is None:
                return SaveWorkoutResult(
                    success=False,
                    workout_id=workout_id,
                    is_update=True,
                    not_found=True,
                    error=f"Workout '{workout_id}' not found",
                )
            if "exercises" in draft.model_fields_set:
                self._sync_exercises(workout_id, draft.exercises, existing)
        else:
            saved = self._workout_repo.create(user_id, draft.header())
            workout_id = str(saved["id"])
            self._sync_exercises(workout_id, draft.exercises, None)

        workout = self._workout_repo.get(workout_id, user_id)

        logger.info(f"Workout saved successfully: {workout_id}")
        return SaveWorkoutResult(
            success=True,
            workout=workout,
            workout_id=workout_id,
            is_update=is_update,
        )

    def _validate_workout(
        self,
        draft: WorkoutDraft,
        existing: Optional[Dict[str, Any]],
    ) -> List[str]:
        """
        Validate workout business rules against the post-save state.

        Pydantic handles structural validation (types, negative numbers).

        Returns:
            List of validation error messages (empty if valid)
        """
        errors: List[str] = []
        sent = draft.model_fields_set if existing is not None else None
        existing_entries = (existing or {}).get("workout_exercises") or []

        if sent is None or "name" in sent:
            name = draft.name
        else:
            name = existing.get("name") or ""
        if not name.strip():
            errors.append("Workout name is required")

        if sent is None or "exercises" in sent:
            exercise_count = len(draft.exercises)
        else:
            exercise_count = len(existing_entries)
        if exercise_count == 0:
            errors.append("Workout must contain at least one exercise")

        known_ids = {str(e.get("id")) for e in existing_entries}
        for i, entry in enumerate(draft.exercises):
            if entry.id is not None and entry.id not in known_ids:
                errors.append(f"Exercise {i + 1}: entry '{entry.id}' is not part of this workout")

        return errors

    def _sync_exercises(
        self,
        workout_id: str,
        entries: List[ExerciseEntryDraft],
        existing: Optional[Dict[str, Any]],
    ) -> None:
        """Make the stored entries match ``entries``, in order."""
        kept = set()
        for index, entry in enumerate(entries):
            row = entry.to_row(index)
            if entry.id is not None:
                self._workout_repo.update_exercise(workout_id, entry.id, row)
                kept.add(entry.id)
            else:
                self._workout_repo.add_exercise(workout_id, row)

        for old in (existing or {}).get("workout_exercises") or []:
            old_id = str(old.get("id"))
            if old_id not in kept:
                logger.info(f"Removing exercise entry {old_id} from workout {workout_id}")
                self._workout_repo.remove_exercise(workout_id, old_id)
