"""
Supabase Workout Program Repository Implementation.

Implements WorkoutProgramRepository against the workout_programs and
muscle_groups tables. Exercises and their muscle groups are embedded through
PostgREST resource embedding (exercise_muscle_groups is the join table).
"""
from typing import Optional, List, Dict, Any
import logging

from supabase import Client

from infrastructure.db.filters import escape_like

logger = logging.getLogger(__name__)

PROGRAM_LIST_COLUMNS = "*, muscle_groups(*)"
PROGRAM_DETAIL_COLUMNS = "*, muscle_groups(*), exercises(*, muscle_groups(*))"


class SupabaseWorkoutProgramRepository:
    """
    Supabase-backed workout program repository.

    Queries against:
    - workout_programs: Program metadata, owned by users.id
    - muscle_groups: One row per muscle group per program
    - exercises: Embedded on detail reads
    """

    def __init__(self, client: Client):
        """
        Initialize repository with Supabase client.

        Args:
            client: Authenticated Supabase client
        """
        self._client = client

    def list_for_user(self, user_id: int) -> List[Dict[str, Any]]:
        """Get all programs for a user, newest first."""
        response = (
            self._client.table("workout_programs")
            .select(PROGRAM_LIST_COLUMNS)
            .eq("user_id", user_id)
            .order("created_at", desc=True)
            .execute()
        )
        return response.data or []

    def get_for_user(self, user_id: int, program_id: int) -> Optional[Dict[str, Any]]:
        """Get one program with muscle groups and exercises."""
        response = (
            self._client.table("workout_programs")
            .select(PROGRAM_DETAIL_COLUMNS)
            .eq("id", program_id)
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        program = response.data[0]
        program["exercises"] = sorted(program.get("exercises") or [], key=lambda e: e["id"])
        return program

    def find_by_name(
        self,
        user_id: int,
        name: str,
        *,
        exclude_id: Optional[int] = None,
    ) -> Optional[Dict[str, Any]]:
        """Find a user's program by name (case-insensitive)."""
        query = (
            self._client.table("workout_programs")
            .select("id, name")
            .eq("user_id", user_id)
            .ilike("name", escape_like(name))
        )
        if exclude_id is not None:
            query = query.neq("id", exclude_id)
        response = query.limit(1).execute()
        return response.data[0] if response.data else None

    def create(
        self,
        user_id: int,
        *,
        name: str,
        description: Optional[str],
        workout_days: List[str],
    ) -> Dict[str, Any]:
        """Insert a program row."""
        response = (
            self._client.table("workout_programs")
            .insert({
                "user_id": user_id,
                "name": name,
                "description": description,
                "workout_days": workout_days,
            })
            .execute()
        )
        return response.data[0]

    def add_muscle_groups(self, program_id: int, names: List[str]) -> List[Dict[str, Any]]:
        """Create muscle group rows for a program."""
        if not names:
            return []
        response = (
            self._client.table("muscle_groups")
            .insert([{"name": name, "workout_program_id": program_id} for name in names])
            .execute()
        )
        return response.data or []

    def rename(self, program_id: int, name: str) -> Dict[str, Any]:
        """Update a program's name."""
        response = (
            self._client.table("workout_programs")
            .update({"name": name})
            .eq("id", program_id)
            .execute()
        )
        return response.data[0]

    def delete_muscle_groups(self, program_id: int) -> int:
        """Delete a program's muscle groups."""
        response = (
            self._client.table("muscle_groups")
            .delete()
            .eq("workout_program_id", program_id)
            .execute()
        )
        return len(response.data or [])

    def delete(self, program_id: int) -> bool:
        """Delete a program row."""
        response = (
            self._client.table("workout_programs")
            .delete()
            .eq("id", program_id)
            .execute()
        )
        return len(response.data or []) > 0
