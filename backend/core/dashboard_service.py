"""
Dashboard Service for the home and progress screens.

This module provides the business logic behind the dashboard endpoints:
- Fetching a user's workouts through the WorkoutRepository port
- Running the statistics aggregations over the fetched snapshot
- Shaping the results into response DTOs (stat cards, weekly chart,
  recent workout cards, per-workout summary)

The aggregations themselves live in backend.core.stats_service and are
pure; this service owns the I/O and the clock.
"""
from typing import Callable, Optional, List
from dataclasses import dataclass, field
from datetime import datetime
import logging

from application.ports.workout_repository import WorkoutRepository
from backend.settings import get_settings
from backend.core.exercise_images import get_exercise_image
from backend.core.stats_service import (
    WeeklyScope,
    calculate_stats,
    calculate_total_weight,
    calculate_weekly_progress,
    calculate_workout_minutes,
    coerce_workouts,
    estimate_exercise_duration_minutes,
)
from domain.models import DayBucket, WorkoutRecord, WorkoutStats

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _default_clock() -> datetime:
    return datetime.now(get_settings().stats_zone)


# =============================================================================
# Response DTOs
# =============================================================================


@dataclass
class RecentWorkout:
    """A workout card on the home screen."""
    id: str
    name: str
    created_at: datetime
    exercise_count: int
    minutes: int
    image_url: str


@dataclass
class DashboardResponse:
    """Response for the dashboard endpoint."""
    stats: WorkoutStats
    weekly_progress: List[DayBucket]
    workout_count: int
    scope: str
    generated_at: datetime
    recent_workouts: List[RecentWorkout] = field(default_factory=list)


@dataclass
class ProgressResponse:
    """Response for the progress endpoint."""
    total_weight_kg: float
    stats: WorkoutStats
    weekly_progress: List[DayBucket]
    workout_count: int
    scope: str
    generated_at: datetime


@dataclass
class ExerciseLine:
    """One exercise entry within a workout summary."""
    name: str
    sets: int
    reps: int
    weight: float
    rest_seconds: int
    minutes: float
    image_url: str


@dataclass
class WorkoutSummaryResponse:
    """Response for the per-workout summary endpoint."""
    id: str
    name: str
    description: Optional[str]
    created_at: datetime
    stats: WorkoutStats
    total_weight_kg: float
    image_url: str
    exercises: List[ExerciseLine] = field(default_factory=list)


# =============================================================================
# Dashboard Service
# =============================================================================


class DashboardService:
    """
    Service for dashboard and progress statistics.

    Provides business logic on top of repository data access:
    - Stat cards (minutes, calories, total weight)
    - Weekly training-time chart
    - Workout cards with keyword-matched images
    """

    def __init__(
        self,
        workout_repo: WorkoutRepository,
        clock: Optional[Clock] = None,
    ):
        """
        Initialize the dashboard service.

        Args:
            workout_repo: Repository for workout data access
            clock: Returns the evaluation instant for the weekly chart.
                Defaults to the current time in the configured stats timezone.
        """
        self._workout_repo = workout_repo
        self._clock = clock or _default_clock

    def _load_workouts(self, user_id: str) -> List[WorkoutRecord]:
        rows = self._workout_repo.list_for_user(user_id)
        return coerce_workouts(rows)

    def get_dashboard(
        self,
        user_id: str,
        *,
        scope: WeeklyScope = "all_time",
        recent_limit: int = 5,
    ) -> DashboardResponse:
        """
        Get the home screen dashboard.

        Args:
            user_id: User ID
            scope: Weekly chart scope ("all_time" or "rolling_week")
            recent_limit: Number of workout cards to include

        Returns:
            DashboardResponse with stats, weekly chart and recent workouts
        """
        workouts = self._load_workouts(user_id)
        now = self._clock()

        recent = sorted(workouts, key=lambda w: w.created_at, reverse=True)[:recent_limit]
        recent_cards = [
            RecentWorkout(
                id=w.id,
                name=w.name,
                created_at=w.created_at,
                exercise_count=w.exercise_count,
                minutes=calculate_workout_minutes(w),
                image_url=get_exercise_image(w.name),
            )
            for w in recent
        ]

        logger.info(f"Built dashboard for user {user_id} from {len(workouts)} workouts")

        return DashboardResponse(
            stats=calculate_stats(workouts),
            weekly_progress=calculate_weekly_progress(workouts, now, scope=scope),
            workout_count=len(workouts),
            scope=scope,
            generated_at=now,
            recent_workouts=recent_cards,
        )

    def get_progress(
        self,
        user_id: str,
        *,
        scope: WeeklyScope = "all_time",
    ) -> ProgressResponse:
        """
        Get the progress screen data.

        Args:
            user_id: User ID
            scope: Weekly chart scope ("all_time" or "rolling_week")

        Returns:
            ProgressResponse with total weight, stats and weekly chart
        """
        workouts = self._load_workouts(user_id)
        now = self._clock()

        return ProgressResponse(
            total_weight_kg=calculate_total_weight(workouts),
            stats=calculate_stats(workouts),
            weekly_progress=calculate_weekly_progress(workouts, now, scope=scope),
            workout_count=len(workouts),
            scope=scope,
            generated_at=now,
        )

    def get_workout_summary(
        self,
        user_id: str,
        workout_id: str,
    ) -> Optional[WorkoutSummaryResponse]:
        """
        Get derived statistics for a single workout.

        Args:
            user_id: User ID
            workout_id: Workout UUID

        Returns:
            WorkoutSummaryResponse or None if the workout is not found
        """
        row = self._workout_repo.get(workout_id, user_id)
        if row is None:
            logger.warning(f"Workout not found: {workout_id}")
            return None

        workout = coerce_workouts([row])[0]

        exercises = [
            ExerciseLine(
                name=s.display_name,
                sets=s.sets,
                reps=s.reps,
                weight=s.weight,
                rest_seconds=s.rest_seconds,
                minutes=round(estimate_exercise_duration_minutes(s), 2),
                image_url=get_exercise_image(s.display_name),
            )
            for s in workout.ordered_sets
        ]

        return WorkoutSummaryResponse(
            id=workout.id,
            name=workout.name,
            description=workout.description,
            created_at=workout.created_at,
            stats=calculate_stats([workout]),
            total_weight_kg=calculate_total_weight([workout]),
            image_url=get_exercise_image(workout.name),
            exercises=exercises,
        )
