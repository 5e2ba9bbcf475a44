"""
Workout program aggregate and its muscle groups.

A program is owned by one user, trains on a fixed set of weekdays and is split
into muscle groups. Muscle groups are created together with the program and
exercises are filed under them.
"""

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, List, Optional

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from domain.models.exercise import Exercise


class WorkoutDay(str, Enum):
    """Day of the week a program is trained on."""

    SUNDAY = "SUNDAY"
    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"
    SATURDAY = "SATURDAY"


class MuscleGroupName(str, Enum):
    """Muscle groups a program can be split into."""

    CHEST = "CHEST"
    TRICEPS = "TRICEPS"
    BACK = "BACK"
    BICEPS = "BICEPS"
    SHOULDERS = "SHOULDERS"
    LEGS = "LEGS"


class MuscleGroup(BaseModel):
    """A muscle group belonging to one workout program."""

    id: int
    name: MuscleGroupName
    workout_program_id: int


class WorkoutProgram(BaseModel):
    """A user's workout program."""

    id: int
    user_id: int
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    workout_days: List[WorkoutDay] = Field(..., min_length=1)
    muscle_groups: List[MuscleGroup] = Field(default_factory=list)
    exercises: List["Exercise"] = Field(default_factory=list)
    created_at: Optional[datetime] = None
