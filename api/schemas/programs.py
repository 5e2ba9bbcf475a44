"""
Pydantic models for users, workout programs, exercises and sets.

Request models validate input at the API boundary (422 on bad bodies);
response models mirror the domain entities.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from api.schemas.common import AttributeModel
from domain.models import MuscleGroupName, WeightUnit, WorkoutDay


# =============================================================================
# Requests
# =============================================================================


class CreateWorkoutProgramRequest(BaseModel):
    """Body for POST /workout-program/add."""
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    workout_days: List[WorkoutDay] = Field(..., min_length=1)
    muscle_groups: List[MuscleGroupName] = Field(..., min_length=1)


class RenameWorkoutProgramRequest(BaseModel):
    """Body for PUT /workout-program/rename."""
    model_config = ConfigDict(str_strip_whitespace=True)

    workout_program_id: int = Field(..., gt=0)
    name: str = Field(..., min_length=1, max_length=100)


class DeleteWorkoutProgramRequest(BaseModel):
    """Body for DELETE /workout-program/delete."""
    workout_program_id: int = Field(..., gt=0)


class CreateExerciseRequest(BaseModel):
    """Body for POST /exercises/{workout_program_id}/add."""
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=100)
    notes: Optional[str] = Field(default=None, max_length=1000)
    target_sets: int = Field(..., ge=1)
    min_reps: int = Field(..., ge=1)
    max_reps: int = Field(..., ge=1)
    unit: WeightUnit = WeightUnit.KG
    muscle_group_ids: List[int] = Field(..., min_length=1)

    @model_validator(mode="after")
    def validate_rep_range(self) -> "CreateExerciseRequest":
        """Ensure the rep range is ordered."""
        if self.max_reps < self.min_reps:
            raise ValueError("Maximum reps must be greater than or equal to minimum reps")
        return self


class RenameExerciseRequest(BaseModel):
    """Body for PUT /exercises/rename."""
    model_config = ConfigDict(str_strip_whitespace=True)

    exercise_id: int = Field(..., gt=0)
    name: str = Field(..., min_length=1, max_length=100)


class DeleteExerciseRequest(BaseModel):
    """Body for DELETE /exercises/delete."""
    exercise_id: int = Field(..., gt=0)


class LogSetRequest(BaseModel):
    """Body for POST /exercises/set/add/{exercise_id}."""
    weight: float = Field(..., ge=0)
    reps: int = Field(..., ge=1)


# =============================================================================
# Responses
# =============================================================================


class UserResponse(AttributeModel):
    id: int
    external_id: str
    email: Optional[str] = None
    created_at: Optional[datetime] = None


class MuscleGroupResponse(AttributeModel):
    id: int
    name: MuscleGroupName
    workout_program_id: int


class ExerciseResponse(AttributeModel):
    id: int
    name: str
    notes: Optional[str] = None
    target_sets: int
    min_reps: int
    max_reps: int
    unit: WeightUnit
    workout_program_id: int
    workout_program_name: Optional[str] = None
    muscle_groups: List[MuscleGroupResponse] = Field(default_factory=list)


class WorkoutProgramResponse(AttributeModel):
    id: int
    name: str
    description: Optional[str] = None
    workout_days: List[WorkoutDay]
    muscle_groups: List[MuscleGroupResponse] = Field(default_factory=list)
    exercises: List[ExerciseResponse] = Field(default_factory=list)
    created_at: Optional[datetime] = None


class SetResponse(AttributeModel):
    id: int
    weight: float
    reps: int
    exercise_id: int
    created_at: datetime
    valid_upto: Optional[datetime] = None


class ExerciseDetailsResponse(AttributeModel):
    """An exercise with today's sets."""
    exercise: ExerciseResponse
    sets: List[SetResponse] = Field(default_factory=list)
