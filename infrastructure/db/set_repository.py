"""
Supabase Set Repository Implementation.

Implements SetRepository against the sets table. Timestamps are sent as ISO
8601 strings; ownership is checked by the caller through the exercise.
"""
from datetime import datetime
from typing import Optional, List, Dict, Any
import logging

from supabase import Client

logger = logging.getLogger(__name__)


class SupabaseSetRepository:
    """Supabase implementation of SetRepository."""

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected)
        """
        self._client = client

    def list_for_exercise(
        self,
        exercise_id: int,
        *,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        descending: bool = False,
    ) -> List[Dict[str, Any]]:
        """List an exercise's sets by created_at."""
        query = self._client.table("sets") \
            .select("*") \
            .eq("exercise_id", exercise_id)
        if start is not None:
            query = query.gte("created_at", start.isoformat())
        if end is not None:
            query = query.lte("created_at", end.isoformat())

        result = query.order("created_at", desc=descending).execute()
        return result.data or []

    def list_valid_upto(self, exercise_id: int, valid_upto: datetime) -> List[Dict[str, Any]]:
        """List the sets stamped with a validity marker."""
        result = self._client.table("sets") \
            .select("*") \
            .eq("exercise_id", exercise_id) \
            .eq("valid_upto", valid_upto.isoformat()) \
            .order("created_at") \
            .execute()
        return result.data or []

    def create(
        self,
        exercise_id: int,
        *,
        weight: float,
        reps: int,
        created_at: datetime,
        valid_upto: datetime,
    ) -> Dict[str, Any]:
        """Insert a set row."""
        result = self._client.table("sets") \
            .insert({
                "exercise_id": exercise_id,
                "weight": weight,
                "reps": reps,
                "created_at": created_at.isoformat(),
                "valid_upto": valid_upto.isoformat(),
            }) \
            .execute()
        return result.data[0]

    def delete_for_exercises(self, exercise_ids: List[int]) -> int:
        """Delete all sets of the given exercises."""
        if not exercise_ids:
            return 0
        result = self._client.table("sets") \
            .delete() \
            .in_("exercise_id", exercise_ids) \
            .execute()
        deleted = len(result.data or [])
        logger.info(f"Deleted {deleted} sets for exercises {exercise_ids}")
        return deleted
