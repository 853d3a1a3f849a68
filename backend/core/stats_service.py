"""
Derived statistics for the dashboard and progress screens.

This module turns a user's stored workouts into aggregate metrics:
- Estimated active minutes per exercise entry and in total
- Estimated calories burned
- A Monday-first 7-day histogram of training minutes for the weekly chart
- Total load lifted (sets x reps x weight)

Every function is a pure single-pass fold over the input. Nothing here
performs I/O or reads the wall clock: the evaluation instant for the weekly
chart is passed in by the caller.
"""
from typing import Iterable, List, Literal, Mapping, Optional, Union
from datetime import datetime, timedelta
import logging
import math

from pydantic import ValidationError

from application.exceptions import InvalidInputError
from domain.models import DayBucket, ExerciseSet, WorkoutRecord, WorkoutStats

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

# Heuristic time under tension per repetition. Not a measured value.
SECONDS_PER_REP = 3

# Fixed conversion from active minutes to kcal.
CALORIES_PER_MINUTE = 7.8

WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

WeeklyScope = Literal["all_time", "rolling_week"]
WEEKLY_SCOPES = ("all_time", "rolling_week")

WorkoutInput = Union[WorkoutRecord, Mapping]


# =============================================================================
# Helpers
# =============================================================================


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves away from zero for positive values.

    Python's round() uses banker's rounding (round(4.5) == 4); the statistics
    are defined with halves rounding up (4.5 -> 5).
    """
    return int(math.floor(value + 0.5))


def to_monday_first(day_of_week: int) -> int:
    """
    Remap a Sunday-first day number to a Monday-first bucket index.

    Sunday-first numbering puts Sunday at 0 and Saturday at 6. The chart
    starts on Monday, so Monday becomes 0 and Sunday becomes 6.

    Args:
        day_of_week: Day number with Sunday == 0

    Returns:
        Bucket index with Monday == 0

    Raises:
        InvalidInputError: If day_of_week is not an integer in 0..6
    """
    if isinstance(day_of_week, bool) or not isinstance(day_of_week, int) or not 0 <= day_of_week <= 6:
        raise InvalidInputError(f"day_of_week must be an integer in 0..6, got {day_of_week!r}")
    return 6 if day_of_week == 0 else day_of_week - 1


def weekday_bucket(moment: datetime) -> int:
    """Monday-first bucket index (0..6) of the calendar day of `moment`."""
    sunday_first = moment.isoweekday() % 7
    return to_monday_first(sunday_first)


def _check_exercise_set(exercise_set: ExerciseSet, workout_label: str) -> None:
    """Reject values that would poison the sums (negative, NaN, non-numeric)."""
    for field_name in ("sets", "reps", "weight", "rest_seconds"):
        value = getattr(exercise_set, field_name)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidInputError(
                f"Workout {workout_label}: '{field_name}' must be numeric, got {value!r}"
            )
        if not math.isfinite(value) or value < 0:
            raise InvalidInputError(
                f"Workout {workout_label}: '{field_name}' must be a non-negative number, got {value!r}"
            )


def _coerce_exercise_set(exercise_set: Union[ExerciseSet, Mapping, None]) -> Optional[ExerciseSet]:
    if exercise_set is None or isinstance(exercise_set, ExerciseSet):
        return exercise_set
    if isinstance(exercise_set, Mapping):
        try:
            return ExerciseSet.model_validate(exercise_set)
        except ValidationError as e:
            raise InvalidInputError(f"Invalid exercise set: {e}") from e
    raise InvalidInputError(f"Unsupported exercise set type: {type(exercise_set).__name__}")


def coerce_workouts(workouts: Optional[Iterable[WorkoutInput]]) -> List[WorkoutRecord]:
    """
    Validate input into WorkoutRecord models.

    Accepts models or raw rows (as returned by the data store). ``None`` is
    treated as an empty collection.

    Raises:
        InvalidInputError: If any workout or exercise entry is malformed
    """
    if workouts is None:
        return []

    records: List[WorkoutRecord] = []
    for index, item in enumerate(workouts):
        if isinstance(item, WorkoutRecord):
            record = item
        elif isinstance(item, Mapping):
            try:
                record = WorkoutRecord.model_validate(item)
            except ValidationError as e:
                label = item.get("id", f"#{index}")
                raise InvalidInputError(f"Invalid workout {label}: {e}") from e
        else:
            raise InvalidInputError(
                f"Unsupported workout type at index {index}: {type(item).__name__}"
            )

        for exercise_set in record.exercise_sets:
            _check_exercise_set(exercise_set, record.id)
        records.append(record)

    return records


def _workout_minutes(workout: WorkoutRecord) -> float:
    return sum(
        (estimate_exercise_duration_minutes(s) for s in workout.exercise_sets),
        0.0,
    )


def _in_zone_of(moment: datetime, reference: datetime) -> datetime:
    """Express `moment` in the timezone of `reference` when both are aware."""
    if reference.tzinfo is not None and moment.tzinfo is not None:
        return moment.astimezone(reference.tzinfo)
    return moment


# =============================================================================
# Aggregations
# =============================================================================


def estimate_exercise_duration_minutes(exercise_set: Union[ExerciseSet, Mapping, None]) -> float:
    """
    Estimate the minutes spent on one exercise entry.

    Formula: (sets * reps * 3s + sets * rest_seconds) / 60

    Models a fixed 3 seconds of work per repetition plus the rest taken
    after every set. This is a heuristic, not a measurement.

    Args:
        exercise_set: The exercise entry (model or raw row). None counts as 0.

    Returns:
        Estimated minutes, unrounded
    """
    exercise_set = _coerce_exercise_set(exercise_set)
    if exercise_set is None:
        return 0.0

    work_seconds = exercise_set.sets * exercise_set.reps * SECONDS_PER_REP
    rest_seconds = exercise_set.sets * exercise_set.rest_seconds
    return (work_seconds + rest_seconds) / 60


def calculate_stats(workouts: Optional[Iterable[WorkoutInput]]) -> WorkoutStats:
    """
    Calculate total active minutes and calories across workouts.

    Minutes are summed unrounded and rounded once at the end. Calories are
    derived from the unrounded minutes and also rounded once.

    Args:
        workouts: Workouts with their exercise entries

    Returns:
        WorkoutStats with rounded minutes and calories

    Raises:
        InvalidInputError: If any workout is malformed
    """
    records = coerce_workouts(workouts)
    total_minutes = sum((_workout_minutes(w) for w in records), 0.0)

    stats = WorkoutStats(
        minutes=round_half_up(total_minutes),
        calories=round_half_up(total_minutes * CALORIES_PER_MINUTE),
    )
    logger.debug(
        f"Calculated stats for {len(records)} workouts: "
        f"{stats.minutes} min, {stats.calories} kcal"
    )
    return stats


def calculate_weekly_progress(
    workouts: Optional[Iterable[WorkoutInput]],
    now: datetime,
    *,
    scope: WeeklyScope = "all_time",
) -> List[DayBucket]:
    """
    Build the Monday-first weekly training-time histogram.

    Each workout's minutes land in the bucket of the weekday it was created
    on (there is no separate "performed at" timestamp).

    With ``scope="all_time"`` there is no calendar-week boundary: a workout
    from any earlier Monday still adds to the Monday bucket. With
    ``scope="rolling_week"`` only workouts created during the 7 days ending
    on `now`'s date are counted.

    Args:
        workouts: Workouts with their exercise entries
        now: Evaluation instant; decides the "today" bucket and, when aware,
            the timezone creation timestamps are read in
        scope: "all_time" or "rolling_week"

    Returns:
        Exactly 7 DayBuckets, Mon..Sun. Exactly one has is_today=True.

    Raises:
        InvalidInputError: If any workout is malformed, `now` is not a
            datetime, or scope is unknown
    """
    if scope not in WEEKLY_SCOPES:
        raise InvalidInputError(f"Unknown weekly scope '{scope}'. Use one of: {WEEKLY_SCOPES}")
    if not isinstance(now, datetime):
        raise InvalidInputError(f"now must be a datetime, got {type(now).__name__}")

    records = coerce_workouts(workouts)

    today = now.date()
    window_start = today - timedelta(days=6)

    totals = [0.0] * len(WEEKDAY_LABELS)
    for workout in records:
        created = _in_zone_of(workout.created_at, now)
        if scope == "rolling_week" and not window_start <= created.date() <= today:
            continue
        totals[weekday_bucket(created)] += _workout_minutes(workout)

    minutes = [round_half_up(total) for total in totals]
    peak = max(max(minutes), 1)
    today_index = weekday_bucket(now)

    return [
        DayBucket(
            day=label,
            minutes=minutes[index],
            percentage=minutes[index] / peak * 100,
            is_today=index == today_index,
        )
        for index, label in enumerate(WEEKDAY_LABELS)
    ]


def calculate_total_weight(workouts: Optional[Iterable[WorkoutInput]]) -> float:
    """
    Total load lifted: sum of sets * reps * weight over every exercise entry.

    Returned as accumulated, unrounded.
    """
    records = coerce_workouts(workouts)
    return sum(
        (s.volume_kg for workout in records for s in workout.exercise_sets),
        0.0,
    )


def calculate_workout_minutes(workout: WorkoutInput) -> int:
    """Rounded estimated minutes for a single workout."""
    records = coerce_workouts([workout])
    return round_half_up(_workout_minutes(records[0]))
