"""
Pydantic schemas for API requests and responses.

Organized by feature/domain:
- common: Response envelope
- programs: Users, workout programs, exercises and sets
- reports: History, reports, analytics and comparisons
"""

from api.schemas.common import ApiResponse
from api.schemas.programs import (
    CreateWorkoutProgramRequest,
    RenameWorkoutProgramRequest,
    DeleteWorkoutProgramRequest,
    CreateExerciseRequest,
    RenameExerciseRequest,
    DeleteExerciseRequest,
    LogSetRequest,
    UserResponse,
    MuscleGroupResponse,
    ExerciseResponse,
    WorkoutProgramResponse,
    SetResponse,
    ExerciseDetailsResponse,
)
from api.schemas.reports import (
    DailyProgressResponse,
    DayReportResponse,
    ComparisonResponse,
    AnalyticsResponse,
)

__all__ = [
    "ApiResponse",
    "CreateWorkoutProgramRequest",
    "RenameWorkoutProgramRequest",
    "DeleteWorkoutProgramRequest",
    "CreateExerciseRequest",
    "RenameExerciseRequest",
    "DeleteExerciseRequest",
    "LogSetRequest",
    "UserResponse",
    "MuscleGroupResponse",
    "ExerciseResponse",
    "WorkoutProgramResponse",
    "SetResponse",
    "ExerciseDetailsResponse",
    "DailyProgressResponse",
    "DayReportResponse",
    "ComparisonResponse",
    "AnalyticsResponse",
]
