"""
Exercise Repository Interface (Port).

Covers the exercises table and the exercise_muscle_groups join table.
"""
from typing import Protocol, Optional, List, Dict, Any


class ExerciseRepository(Protocol):
    """
    Abstract interface for exercise persistence.

    Exercise dictionaries carry a "muscle_groups" list and, where the
    program is joined, a "workout_program" dict with its id, name and
    user_id.
    """

    def get_for_user(self, user_id: int, exercise_id: int) -> Optional[Dict[str, Any]]:
        """
        Get an exercise whose program is owned by ``user_id``.

        Args:
            user_id: Local user ID
            exercise_id: Exercise ID

        Returns:
            Exercise dictionary, or None if missing or owned by someone else
        """
        ...

    def list_for_program(
        self,
        program_id: int,
        *,
        muscle_group_id: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """
        List a program's exercises, oldest first.

        Args:
            program_id: Program ID
            muscle_group_id: Only exercises tagged with this muscle group

        Returns:
            List of exercise dictionaries
        """
        ...

    def find_by_name(
        self,
        program_id: int,
        name: str,
        *,
        exclude_id: Optional[int] = None,
    ) -> Optional[Dict[str, Any]]:
        """Find an exercise in a program by name, ignoring case."""
        ...

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
        """Insert an exercise row and return it."""
        ...

    def link_muscle_groups(self, exercise_id: int, muscle_group_ids: List[int]) -> None:
        """Tag an exercise with muscle groups."""
        ...

    def unlink_muscle_groups(self, exercise_ids: List[int]) -> int:
        """Remove all muscle group tags from the given exercises."""
        ...

    def rename(self, exercise_id: int, name: str) -> Dict[str, Any]:
        """Update an exercise's name and return the updated row."""
        ...

    def delete(self, exercise_ids: List[int]) -> int:
        """
        Delete exercise rows.

        Does not cascade; callers remove sets and tags first.

        Returns:
            Number of rows deleted
        """
        ...
