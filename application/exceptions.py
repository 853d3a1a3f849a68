"""
Application-layer exceptions.

These exceptions are used across the domain, application and infrastructure
layers. Routers translate them into HTTP responses.
"""


class InvalidInputError(ValueError):
    """Workout data failed validation before aggregation.

    Raised for negative counts, non-numeric or non-finite values, and
    unknown aggregation options. Absent values are not errors: they
    default to zero at the model boundary.
    """

    pass


class WorkoutFetchError(Exception):
    """Error while reading workouts or exercises from the data store.

    Wraps Supabase/network failures so callers can surface them
    without depending on the client library's exception types.
    """

    pass


class WorkoutPersistError(Exception):
    """Error while writing workouts or their exercise entries.

    Wraps Supabase/network failures on insert, update and delete.
    """

    pass
