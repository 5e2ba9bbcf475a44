"""
Workout Program Repository Interface (Port).

Covers the workout_programs table and the muscle_groups created with each
program. Ownership is enforced by passing the local user ID.
"""
from typing import Protocol, Optional, List, Dict, Any


class WorkoutProgramRepository(Protocol):
    """
    Abstract interface for workout program persistence.

    Program dictionaries carry a "muscle_groups" list. ``get_for_user`` also
    embeds "exercises", each with its own "muscle_groups".
    """

    def list_for_user(self, user_id: int) -> List[Dict[str, Any]]:
        """
        Get all programs owned by a user, newest first.

        Args:
            user_id: Local user ID

        Returns:
            List of program dictionaries with muscle groups
        """
        ...

    def get_for_user(self, user_id: int, program_id: int) -> Optional[Dict[str, Any]]:
        """
        Get one program with its muscle groups and exercises.

        Args:
            user_id: Local user ID (owner)
            program_id: Program ID

        Returns:
            Program dictionary, or None if missing or owned by someone else
        """
        ...

    def find_by_name(
        self,
        user_id: int,
        name: str,
        *,
        exclude_id: Optional[int] = None,
    ) -> Optional[Dict[str, Any]]:
        """
        Find a user's program by name, ignoring case.

        Args:
            user_id: Local user ID
            name: Program name
            exclude_id: Program ID to ignore (used when renaming)

        Returns:
            Program dictionary or None
        """
        ...

    def create(
        self,
        user_id: int,
        *,
        name: str,
        description: Optional[str],
        workout_days: List[str],
    ) -> Dict[str, Any]:
        """Insert a program row and return it."""
        ...

    def add_muscle_groups(self, program_id: int, names: List[str]) -> List[Dict[str, Any]]:
        """Create one muscle group row per name for a program."""
        ...

    def rename(self, program_id: int, name: str) -> Dict[str, Any]:
        """Update a program's name and return the updated row."""
        ...

    def delete_muscle_groups(self, program_id: int) -> int:
        """Delete a program's muscle groups. Returns the number deleted."""
        ...

    def delete(self, program_id: int) -> bool:
        """
        Delete a program row.

        Does not cascade; callers remove dependent rows first.

        Returns:
            True if deleted, False if not found
        """
        ...
