"""
Program Service.

Business rules for workout programs:
- Program names are unique per user, ignoring case
- Muscle groups are created together with the program
- Deleting a program removes its sets, exercise tags, exercises and muscle
  groups first, in that order, then the program itself
"""
from typing import Dict, List, Optional
import logging

from application.exceptions import DuplicateNameError, NotFoundError
from application.ports import (
    ExerciseRepository,
    SetRepository,
    WorkoutProgramRepository,
)
from domain.converters import db_row_to_program
from domain.models import MuscleGroupName, WorkoutDay, WorkoutProgram

logger = logging.getLogger(__name__)

DUPLICATE_PROGRAM_MESSAGE = "You already have a workout program with this name"
DUPLICATE_RENAME_MESSAGE = "A workout program with this name already exists"
PROGRAM_NOT_FOUND_MESSAGE = "Workout program not found"


def _unique(values: List[str]) -> List[str]:
    """Drop repeats, keeping first-seen order."""
    return list(dict.fromkeys(values))


class ProgramService:
    """Service for creating, renaming and deleting workout programs."""

    def __init__(
        self,
        program_repo: WorkoutProgramRepository,
        exercise_repo: ExerciseRepository,
        set_repo: SetRepository,
    ):
        """
        Initialize the program service.

        Args:
            program_repo: Repository for programs and muscle groups
            exercise_repo: Repository for exercises (cascade deletes)
            set_repo: Repository for logged sets (cascade deletes)
        """
        self.program_repo = program_repo
        self.exercise_repo = exercise_repo
        self.set_repo = set_repo

    def create_program(
        self,
        user_id: int,
        *,
        name: str,
        description: Optional[str],
        workout_days: List[WorkoutDay],
        muscle_groups: List[MuscleGroupName],
    ) -> WorkoutProgram:
        """
        Create a program and its muscle groups.

        Raises:
            DuplicateNameError: If the user already has a program with this name
        """
        name = name.strip()
        if self.program_repo.find_by_name(user_id, name):
            raise DuplicateNameError(DUPLICATE_PROGRAM_MESSAGE)

        row = self.program_repo.create(
            user_id,
            name=name,
            description=description,
            workout_days=_unique([WorkoutDay(d).value for d in workout_days]),
        )
        row["muscle_groups"] = self.program_repo.add_muscle_groups(
            row["id"],
            _unique([MuscleGroupName(mg).value for mg in muscle_groups]),
        )
        logger.info(f"Created workout program {row['id']} for user {user_id}")
        return db_row_to_program(row)

    def list_programs(self, user_id: int) -> List[WorkoutProgram]:
        """All of a user's programs with their muscle groups."""
        return [db_row_to_program(row) for row in self.program_repo.list_for_user(user_id)]

    def get_program(self, user_id: int, program_id: int) -> WorkoutProgram:
        """
        Get a program with muscle groups and exercises.

        Raises:
            NotFoundError: If missing or owned by another user
        """
        row = self.program_repo.get_for_user(user_id, program_id)
        if not row:
            raise NotFoundError(PROGRAM_NOT_FOUND_MESSAGE)
        return db_row_to_program(row)

    def rename_program(self, user_id: int, program_id: int, name: str) -> WorkoutProgram:
        """
        Rename a program.

        Raises:
            NotFoundError: If missing or owned by another user
            DuplicateNameError: If another of the user's programs has the name
        """
        program = self.get_program(user_id, program_id)
        name = name.strip()
        if self.program_repo.find_by_name(user_id, name, exclude_id=program_id):
            raise DuplicateNameError(DUPLICATE_RENAME_MESSAGE)

        row = self.program_repo.rename(program_id, name)
        return program.model_copy(update={"name": row.get("name", name)})

    def delete_program(self, user_id: int, program_id: int) -> WorkoutProgram:
        """
        Delete a program and everything under it.

        Returns:
            The program as it was before deletion

        Raises:
            NotFoundError: If missing or owned by another user
        """
        program = self.get_program(user_id, program_id)
        exercise_ids = [exercise.id for exercise in program.exercises]

        try:
            deleted_sets = self.set_repo.delete_for_exercises(exercise_ids)
            self.exercise_repo.unlink_muscle_groups(exercise_ids)
            self.exercise_repo.delete(exercise_ids)
            self.program_repo.delete_muscle_groups(program_id)
            self.program_repo.delete(program_id)
        except Exception as e:
            logger.exception(f"Failed deleting workout program {program_id}: {e}")
            raise

        logger.info(
            f"Deleted workout program {program_id} "
            f"({len(exercise_ids)} exercises, {deleted_sets} sets)"
        )
        return program

    def delete_all_programs(self, user_id: int) -> Dict[str, int]:
        """
        Delete every program a user owns.

        Returns:
            Counts of deleted programs and exercises
        """
        programs = self.program_repo.list_for_user(user_id)
        exercises = 0
        for row in programs:
            deleted = self.delete_program(user_id, row["id"])
            exercises += len(deleted.exercises)
        return {"workout_programs": len(programs), "exercises": exercises}
