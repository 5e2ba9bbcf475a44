"""
Exercises router.

Endpoints for managing exercises, logging sets and reading reports:
- Create, rename, delete and list exercises within a program
- Log a set for today (rejected once the target sets are reached)
- Today's sets, raw sets and per-day history for a week, month or year
- Single-day and today's session reports
- Period analytics and today-vs-previous comparison

The catch-all ``/{workout_program_id}/{muscle_group_id}`` listing is
registered last so it never shadows the fixed-prefix routes above it.
"""

import logging
from datetime import date
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, status

from api.deps import (
    get_current_db_user,
    get_exercise_service,
    get_report_service,
)
from api.errors import to_http_exception
from api.schemas import (
    AnalyticsResponse,
    ApiResponse,
    ComparisonResponse,
    CreateExerciseRequest,
    DailyProgressResponse,
    DayReportResponse,
    DeleteExerciseRequest,
    ExerciseDetailsResponse,
    ExerciseResponse,
    LogSetRequest,
    RenameExerciseRequest,
    SetResponse,
)
from application.exceptions import WorkoutTrackerError
from backend.core.exercise_service import ExerciseService
from backend.core.grouping import TimeFrame
from backend.core.report_service import ReportService
from domain.models import User

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/exercises",
    tags=["Exercises"],
)


# =============================================================================
# Exercise Management
# =============================================================================


@router.post(
    "/{workout_program_id}/add",
    response_model=ApiResponse[ExerciseResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_exercise(
    request: CreateExerciseRequest,
    workout_program_id: int = Path(..., gt=0),
    user: User = Depends(get_current_db_user),
    service: ExerciseService = Depends(get_exercise_service),
):
    """
    Add an exercise to a workout program.

    Every muscle group must belong to the program. Exercise names are unique
    within a program (case-insensitive).
    """
    try:
        exercise = service.create_exercise(
            user.id,
            workout_program_id,
            name=request.name,
            notes=request.notes,
            target_sets=request.target_sets,
            min_reps=request.min_reps,
            max_reps=request.max_reps,
            unit=request.unit,
            muscle_group_ids=request.muscle_group_ids,
        )
    except WorkoutTrackerError as e:
        raise to_http_exception(e)

    return ApiResponse[ExerciseResponse](
        message="Exercise created successfully",
        data=ExerciseResponse.model_validate(exercise),
    )


@router.put("/rename", response_model=ApiResponse[ExerciseResponse])
def rename_exercise(
    request: RenameExerciseRequest,
    user: User = Depends(get_current_db_user),
    service: ExerciseService = Depends(get_exercise_service),
):
    """Rename an exercise. The new name must be unique within its program."""
    try:
        exercise = service.rename_exercise(user.id, request.exercise_id, request.name)
    except WorkoutTrackerError as e:
        raise to_http_exception(e)

    return ApiResponse[ExerciseResponse](
        message="Exercise name updated successfully",
        data=ExerciseResponse.model_validate(exercise),
    )


@router.delete("/delete", response_model=ApiResponse[ExerciseResponse])
def delete_exercise(
    request: DeleteExerciseRequest,
    user: User = Depends(get_current_db_user),
    service: ExerciseService = Depends(get_exercise_service),
):
    """Delete an exercise with its sets and muscle group tags."""
    try:
        exercise = service.delete_exercise(user.id, request.exercise_id)
    except WorkoutTrackerError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"Failed to delete exercise {request.exercise_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete exercise")

    return ApiResponse[ExerciseResponse](
        message="Exercise deleted successfully",
        data=ExerciseResponse.model_validate(exercise),
    )


# =============================================================================
# Set Logging
# =============================================================================


@router.post(
    "/set/add/{exercise_id}",
    response_model=ApiResponse[SetResponse],
    status_code=status.HTTP_201_CREATED,
)
def log_set(
    request: LogSetRequest,
    exercise_id: int = Path(..., gt=0),
    user: User = Depends(get_current_db_user),
    service: ExerciseService = Depends(get_exercise_service),
):
    """
    Log a set for today.

    Returns 400 once today's target sets have been logged.
    """
    try:
        workout_set = service.log_set(
            user.id,
            exercise_id,
            weight=request.weight,
            reps=request.reps,
        )
    except WorkoutTrackerError as e:
        raise to_http_exception(e)

    return ApiResponse[SetResponse](
        message="Set added successfully",
        data=SetResponse.model_validate(workout_set),
    )


# =============================================================================
# Details and History
# =============================================================================


@router.get("/details/{exercise_id}", response_model=ApiResponse[ExerciseDetailsResponse])
def get_exercise_details(
    exercise_id: int = Path(..., gt=0),
    user: User = Depends(get_current_db_user),
    service: ReportService = Depends(get_report_service),
):
    """Exercise metadata with the sets logged today."""
    try:
        details = service.get_exercise_details(user.id, exercise_id)
    except WorkoutTrackerError as e:
        raise to_http_exception(e)

    return ApiResponse[ExerciseDetailsResponse](
        message="Exercise details fetched successfully",
        data=ExerciseDetailsResponse.model_validate(details),
    )


@router.get(
    "/details/time-frame/{time_frame}/{exercise_id}",
    response_model=ApiResponse[List[SetResponse]],
)
def get_time_frame_sets(
    time_frame: TimeFrame,
    exercise_id: int = Path(..., gt=0),
    user: User = Depends(get_current_db_user),
    service: ReportService = Depends(get_report_service),
):
    """All sets logged in the current week, month or year, oldest first."""
    try:
        sets = service.get_time_frame_sets(user.id, exercise_id, time_frame)
    except WorkoutTrackerError as e:
        raise to_http_exception(e)

    return ApiResponse[List[SetResponse]](
        message="Exercise data fetched successfully",
        data=[SetResponse.model_validate(s) for s in sets],
    )


@router.get(
    "/history/{time_frame}/{exercise_id}",
    response_model=ApiResponse[List[DailyProgressResponse]],
)
def get_history(
    time_frame: TimeFrame,
    exercise_id: int = Path(..., gt=0),
    user: User = Depends(get_current_db_user),
    service: ReportService = Depends(get_report_service),
):
    """Per-day totals and achievement rate for the current period."""
    try:
        history = service.get_history(user.id, exercise_id, time_frame)
    except WorkoutTrackerError as e:
        raise to_http_exception(e)

    return ApiResponse[List[DailyProgressResponse]](
        message="Exercise history fetched successfully",
        data=[DailyProgressResponse.model_validate(row) for row in history],
    )


# =============================================================================
# Reports
# =============================================================================


@router.get("/report/{exercise_id}/{day}", response_model=ApiResponse[DayReportResponse])
def get_day_report(
    day: date,
    exercise_id: int = Path(..., gt=0),
    user: User = Depends(get_current_db_user),
    service: ReportService = Depends(get_report_service),
):
    """Sets and session metrics for one UTC day (YYYY-MM-DD)."""
    try:
        report = service.get_day_report(user.id, exercise_id, day)
    except WorkoutTrackerError as e:
        raise to_http_exception(e)

    return ApiResponse[DayReportResponse](
        message="Exercise report fetched successfully",
        data=DayReportResponse.model_validate(report),
    )


@router.get("/session-report/{exercise_id}", response_model=ApiResponse[DayReportResponse])
def get_session_report(
    exercise_id: int = Path(..., gt=0),
    user: User = Depends(get_current_db_user),
    service: ReportService = Depends(get_report_service),
):
    """Sets and session metrics for today."""
    try:
        report = service.get_session_report(user.id, exercise_id)
    except WorkoutTrackerError as e:
        raise to_http_exception(e)

    return ApiResponse[DayReportResponse](
        message="Session report fetched successfully",
        data=DayReportResponse.model_validate(report),
    )


@router.get(
    "/analytics/{time_frame}/{exercise_id}",
    response_model=ApiResponse[AnalyticsResponse],
)
def get_analytics(
    time_frame: TimeFrame,
    exercise_id: int = Path(..., gt=0),
    user: User = Depends(get_current_db_user),
    service: ReportService = Depends(get_report_service),
):
    """Stats cards, personal bests, consistency and progress for the period."""
    try:
        analytics = service.get_analytics(user.id, exercise_id, time_frame)
    except WorkoutTrackerError as e:
        raise to_http_exception(e)

    return ApiResponse[AnalyticsResponse](
        message="Exercise analytics fetched successfully",
        data=AnalyticsResponse.model_validate(analytics),
    )


@router.get("/compare/{exercise_id}", response_model=ApiResponse[ComparisonResponse])
def compare_sessions(
    exercise_id: int = Path(..., gt=0),
    user: User = Depends(get_current_db_user),
    service: ReportService = Depends(get_report_service),
):
    """
    Compare today's completed session with the previous completed session.

    ``today`` and ``improvements`` are null until today's session reaches
    the target sets. Returns 400 when there is no earlier completed session.
    """
    try:
        comparison = service.compare(user.id, exercise_id)
    except WorkoutTrackerError as e:
        raise to_http_exception(e)

    return ApiResponse[ComparisonResponse](
        message="Comparison fetched successfully",
        data=ComparisonResponse.model_validate(comparison),
    )


# =============================================================================
# Listing
# =============================================================================


@router.get(
    "/{workout_program_id}/{muscle_group_id}",
    response_model=ApiResponse[List[ExerciseResponse]],
)
def list_exercises(
    workout_program_id: int = Path(..., gt=0),
    muscle_group_id: int = Path(..., gt=0),
    user: User = Depends(get_current_db_user),
    service: ExerciseService = Depends(get_exercise_service),
):
    """Exercises in a program tagged with the given muscle group."""
    try:
        exercises = service.list_exercises(user.id, workout_program_id, muscle_group_id)
    except WorkoutTrackerError as e:
        raise to_http_exception(e)

    return ApiResponse[List[ExerciseResponse]](
        message="Exercises fetched successfully",
        data=[ExerciseResponse.model_validate(e) for e in exercises],
    )
