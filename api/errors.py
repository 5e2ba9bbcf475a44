"""
Translation of application exceptions to HTTP errors.

Routers catch WorkoutTrackerError and re-raise the result of
to_http_exception(), so every error body is ``{"detail": message}``.
"""

from fastapi import HTTPException

from application.exceptions import (
    DuplicateNameError,
    InsufficientHistoryError,
    InvalidMuscleGroupError,
    NoDataError,
    NotFoundError,
    TargetSetsReachedError,
    UserNotFoundError,
    WorkoutTrackerError,
)

STATUS_CODES = {
    NotFoundError: 404,
    NoDataError: 404,
    DuplicateNameError: 400,
    InvalidMuscleGroupError: 400,
    TargetSetsReachedError: 400,
    InsufficientHistoryError: 400,
    UserNotFoundError: 401,
}


def to_http_exception(error: WorkoutTrackerError) -> HTTPException:
    """Map an application exception to its HTTPException (400 if unmapped)."""
    for exc_type, status_code in STATUS_CODES.items():
        if isinstance(error, exc_type):
            return HTTPException(status_code=status_code, detail=error.message)
    return HTTPException(status_code=400, detail=error.message)
