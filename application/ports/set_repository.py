"""
Set Repository Interface (Port).

Logged sets are the raw input of every report. The repository filters by
exercise, creation time and validity window; all aggregation happens in
backend.core.
"""
from datetime import datetime
from typing import Protocol, Optional, List, Dict, Any


class SetRepository(Protocol):
    """Abstract interface for the sets table."""

    def list_for_exercise(
        self,
        exercise_id: int,
        *,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        descending: bool = False,
    ) -> List[Dict[str, Any]]:
        """
        List an exercise's sets ordered by created_at.

        Args:
            exercise_id: Exercise ID
            start: Inclusive lower bound on created_at
            end: Inclusive upper bound on created_at
            descending: Newest first instead of oldest first

        Returns:
            List of set dictionaries
        """
        ...

    def list_valid_upto(self, exercise_id: int, valid_upto: datetime) -> List[Dict[str, Any]]:
        """
        List the sets logged in one validity window, oldest first.

        Args:
            exercise_id: Exercise ID
            valid_upto: End-of-day marker the sets were stamped with

        Returns:
            List of set dictionaries
        """
        ...

    def create(
        self,
        exercise_id: int,
        *,
        weight: float,
        reps: int,
        created_at: datetime,
        valid_upto: datetime,
    ) -> Dict[str, Any]:
        """Insert a set row and return it."""
        ...

    def delete_for_exercises(self, exercise_ids: List[int]) -> int:
        """Delete all sets of the given exercises. Returns the number deleted."""
        ...
