"""
Supabase Exercise Repository Implementation.

Implements ExerciseRepository against the exercises table. Ownership is
checked by inner-joining workout_programs and filtering on its user_id;
muscle groups are embedded through the exercise_muscle_groups join table.
"""
from typing import Optional, List, Dict, Any
import logging

from supabase import Client

from infrastructure.db.filters import escape_like

logger = logging.getLogger(__name__)

EXERCISE_DETAIL_COLUMNS = (
    "*, workout_program:workout_programs!inner(id, name, user_id), muscle_groups(*)"
)


class SupabaseExerciseRepository:
    """Supabase implementation of ExerciseRepository."""

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected)
        """
        self._client = client

    def get_for_user(self, user_id: int, exercise_id: int) -> Optional[Dict[str, Any]]:
        """Get an exercise if its program belongs to the user."""
        response = (
            self._client.table("exercises")
            .select(EXERCISE_DETAIL_COLUMNS)
            .eq("id", exercise_id)
            .eq("workout_program.user_id", user_id)
            .limit(1)
            .execute()
        )
        return response.data[0] if response.data else None

    def list_for_program(
        self,
        program_id: int,
        *,
        muscle_group_id: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """List a program's exercises, optionally for one muscle group."""
        if muscle_group_id is None:
            query = (
                self._client.table("exercises")
                .select("*, muscle_groups(*)")
                .eq("workout_program_id", program_id)
            )
        else:
            query = (
                self._client.table("exercises")
                .select("*, muscle_groups(*), tagged:exercise_muscle_groups!inner(muscle_group_id)")
                .eq("workout_program_id", program_id)
                .eq("tagged.muscle_group_id", muscle_group_id)
            )
        response = query.order("created_at").execute()

        rows = response.data or []
        for row in rows:
            row.pop("tagged", None)
        return rows

    def find_by_name(
        self,
        program_id: int,
        name: str,
        *,
        exclude_id: Optional[int] = None,
    ) -> Optional[Dict[str, Any]]:
        """Find an exercise in a program by name (case-insensitive)."""
        query = (
            self._client.table("exercises")
            .select("id, name")
            .eq("workout_program_id", program_id)
            .ilike("name", escape_like(name))
        )
        if exclude_id is not None:
            query = query.neq("id", exclude_id)
        response = query.limit(1).execute()
        return response.data[0] if response.data else None

    def create(
        self,
        program_id: int,
        *,
        name: str,
        notes: Optional[str],
        target_sets: int,
        min_reps: int,
        max_reps: int,
        unit: str,
    ) -> Dict[str, Any]:
        """Insert an exercise row."""
        response = (
            self._client.table("exercises")
            .insert({
                "workout_program_id": program_id,
                "name": name,
                "notes": notes,
                "target_sets": target_sets,
                "min_reps": min_reps,
                "max_reps": max_reps,
                "unit": unit,
            })
            .execute()
        )
        return response.data[0]

    def link_muscle_groups(self, exercise_id: int, muscle_group_ids: List[int]) -> None:
        """Tag an exercise with muscle groups."""
        if not muscle_group_ids:
            return
        self._client.table("exercise_muscle_groups").insert([
            {"exercise_id": exercise_id, "muscle_group_id": mg_id}
            for mg_id in muscle_group_ids
        ]).execute()

    def unlink_muscle_groups(self, exercise_ids: List[int]) -> int:
        """Remove muscle group tags from exercises."""
        if not exercise_ids:
            return 0
        response = (
            self._client.table("exercise_muscle_groups")
            .delete()
            .in_("exercise_id", exercise_ids)
            .execute()
        )
        return len(response.data or [])

    def rename(self, exercise_id: int, name: str) -> Dict[str, Any]:
        """Update an exercise's name."""
        response = (
            self._client.table("exercises")
            .update({"name": name})
            .eq("id", exercise_id)
            .execute()
        )
        return response.data[0]

    def delete(self, exercise_ids: List[int]) -> int:
        """Delete exercise rows."""
        if not exercise_ids:
            return 0
        response = (
            self._client.table("exercises")
            .delete()
            .in_("id", exercise_ids)
            .execute()
        )
        return len(response.data or [])
