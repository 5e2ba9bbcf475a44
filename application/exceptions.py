"""
Application-layer exceptions.

Raised by the services in backend/core and translated to HTTP responses by
the routers. Each carries the user-facing message.
"""


class WorkoutTrackerError(Exception):
    """Base class for expected, user-facing failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UserNotFoundError(WorkoutTrackerError):
    """The authenticated subject has no local user record yet."""

    def __init__(self, message: str = "No user exists in the database"):
        super().__init__(message)


class NotFoundError(WorkoutTrackerError):
    """A program or exercise does not exist or belongs to another user."""

    pass


class DuplicateNameError(WorkoutTrackerError):
    """A program or exercise with the same name (ignoring case) exists."""

    pass


class InvalidMuscleGroupError(WorkoutTrackerError):
    """The muscle group is not part of the exercise's program."""

    pass


class TargetSetsReachedError(WorkoutTrackerError):
    """All target sets for today have already been logged."""

    def __init__(self, message: str = "Target sets already reached"):
        super().__init__(message)


class NoDataError(WorkoutTrackerError):
    """No sets exist in the requested window."""

    pass


class InsufficientHistoryError(WorkoutTrackerError):
    """A comparison was requested without two completed sessions."""

    pass
