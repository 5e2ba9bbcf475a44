"""
Workout programs router.

Endpoints for creating, listing, renaming and deleting a user's workout
programs. Muscle groups are created together with their program.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, status

from api.deps import get_current_db_user, get_program_service
from api.errors import to_http_exception
from api.schemas import (
    ApiResponse,
    CreateWorkoutProgramRequest,
    DeleteWorkoutProgramRequest,
    RenameWorkoutProgramRequest,
    WorkoutProgramResponse,
)
from application.exceptions import WorkoutTrackerError
from backend.core.program_service import ProgramService
from domain.models import User

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/workout-program",
    tags=["Workout Programs"],
)


# =============================================================================
# Create / Read
# =============================================================================


@router.post(
    "/add",
    response_model=ApiResponse[WorkoutProgramResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_workout_program(
    request: CreateWorkoutProgramRequest,
    user: User = Depends(get_current_db_user),
    service: ProgramService = Depends(get_program_service),
):
    """
    Create a workout program with its training days and muscle groups.

    Returns 400 if the user already has a program with the same name
    (case-insensitive).
    """
    try:
        program = service.create_program(
            user.id,
            name=request.name,
            description=request.description,
            workout_days=request.workout_days,
            muscle_groups=request.muscle_groups,
        )
    except WorkoutTrackerError as e:
        raise to_http_exception(e)

    return ApiResponse[WorkoutProgramResponse](
        message="Workout program created successfully",
        data=WorkoutProgramResponse.model_validate(program),
    )


@router.get("/all", response_model=ApiResponse[List[WorkoutProgramResponse]])
def list_workout_programs(
    user: User = Depends(get_current_db_user),
    service: ProgramService = Depends(get_program_service),
):
    """List the user's workout programs with their muscle groups."""
    programs = service.list_programs(user.id)
    return ApiResponse[List[WorkoutProgramResponse]](
        message="Your workouts fetched successfully",
        data=[WorkoutProgramResponse.model_validate(p) for p in programs],
    )


@router.get("/{workout_program_id}", response_model=ApiResponse[WorkoutProgramResponse])
def get_workout_program(
    workout_program_id: int = Path(..., gt=0),
    user: User = Depends(get_current_db_user),
    service: ProgramService = Depends(get_program_service),
):
    """Get one program with its muscle groups and exercises."""
    try:
        program = service.get_program(user.id, workout_program_id)
    except WorkoutTrackerError as e:
        raise to_http_exception(e)

    return ApiResponse[WorkoutProgramResponse](
        message="Workout program retrieved successfully",
        data=WorkoutProgramResponse.model_validate(program),
    )


# =============================================================================
# Update / Delete
# =============================================================================


@router.put("/rename", response_model=ApiResponse[WorkoutProgramResponse])
def rename_workout_program(
    request: RenameWorkoutProgramRequest,
    user: User = Depends(get_current_db_user),
    service: ProgramService = Depends(get_program_service),
):
    """Rename a program. The new name must be unique among the user's programs."""
    try:
        program = service.rename_program(user.id, request.workout_program_id, request.name)
    except WorkoutTrackerError as e:
        raise to_http_exception(e)

    return ApiResponse[WorkoutProgramResponse](
        message="Workout program name updated successfully",
        data=WorkoutProgramResponse.model_validate(program),
    )


@router.delete("/delete", response_model=ApiResponse[WorkoutProgramResponse])
def delete_workout_program(
    request: DeleteWorkoutProgramRequest,
    user: User = Depends(get_current_db_user),
    service: ProgramService = Depends(get_program_service),
):
    """
    Delete a program with its exercises, sets and muscle groups.

    Returns the deleted program.
    """
    try:
        program = service.delete_program(user.id, request.workout_program_id)
    except WorkoutTrackerError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"Failed to delete workout program {request.workout_program_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete workout program")

    return ApiResponse[WorkoutProgramResponse](
        message="Workout program deleted successfully",
        data=WorkoutProgramResponse.model_validate(program),
    )
