"""
Exercise entity.

An exercise belongs to exactly one workout program and is tagged with one or
more of that program's muscle groups. Rep targets are expressed as an
inclusive [min_reps, max_reps] range and the number of sets a user intends to
complete per session.

Examples:
    >>> exercise = Exercise(
    ...     id=1,
    ...     name="Bench Press",
    ...     target_sets=3,
    ...     min_reps=8,
    ...     max_reps=12,
    ...     unit=WeightUnit.KG,
    ...     workout_program_id=7,
    ... )
    >>> exercise.rep_range
    '8-12'
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from domain.models.workout_program import MuscleGroup


class WeightUnit(str, Enum):
    """Unit a lift is recorded in."""

    KG = "KG"
    LBS = "LBS"


class Exercise(BaseModel):
    """An exercise inside a workout program."""

    id: int
    name: str = Field(..., min_length=1)
    notes: Optional[str] = None
    target_sets: int = Field(..., ge=1, description="Sets planned per session")
    min_reps: int = Field(..., ge=1)
    max_reps: int = Field(..., ge=1)
    unit: WeightUnit = WeightUnit.KG
    workout_program_id: int
    workout_program_name: Optional[str] = None
    muscle_groups: List[MuscleGroup] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_rep_range(self) -> "Exercise":
        """Ensure the rep range is ordered."""
        if self.max_reps < self.min_reps:
            raise ValueError("max_reps must be greater than or equal to min_reps")
        return self

    @property
    def rep_range(self) -> str:
        """Rep range formatted as ``min-max``."""
        return f"{self.min_reps}-{self.max_reps}"
