"""
Logged set entity.

A set is one performance of an exercise at a given weight for a number of
reps. ``created_at`` is fixed at creation and always timezone-aware (UTC).
``valid_upto`` is the end of the UTC day the set was logged on and scopes
"today's sets" lookups.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class WorkoutSet(BaseModel):
    """A single logged set."""

    id: int
    weight: float = Field(..., ge=0)
    reps: int = Field(..., ge=1)
    exercise_id: int
    created_at: datetime
    valid_upto: Optional[datetime] = None

    @property
    def volume(self) -> float:
        """Weight moved in this set (weight x reps)."""
        return self.weight * self.reps
