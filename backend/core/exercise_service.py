"""
Exercise Service.

Business rules for exercises and set logging:
- Exercise names are unique within a program, ignoring case
- An exercise may only be tagged with its own program's muscle groups
- A set is stamped with the end of the UTC day it was logged on; once an
  exercise has ``target_sets`` sets for that day, further sets are rejected
- Deleting an exercise removes its sets and muscle group tags first
"""
from datetime import datetime, timezone
from typing import List, Optional
import logging

from application.exceptions import (
    DuplicateNameError,
    InvalidMuscleGroupError,
    NotFoundError,
    TargetSetsReachedError,
)
from application.ports import (
    ExerciseRepository,
    SetRepository,
    WorkoutProgramRepository,
)
from backend.core.grouping import end_of_day, to_utc
from domain.converters import db_row_to_exercise, db_row_to_set
from domain.models import Exercise, WeightUnit, WorkoutSet

logger = logging.getLogger(__name__)

DUPLICATE_EXERCISE_MESSAGE = "An exercise with this name already exists in this workout program"
EXERCISE_NOT_FOUND_MESSAGE = "Exercise not found"
PROGRAM_NOT_FOUND_MESSAGE = "Workout program not found"


class ExerciseService:
    """Service for managing exercises and logging sets."""

    def __init__(
        self,
        program_repo: WorkoutProgramRepository,
        exercise_repo: ExerciseRepository,
        set_repo: SetRepository,
    ):
        self.program_repo = program_repo
        self.exercise_repo = exercise_repo
        self.set_repo = set_repo

    def _get_program_row(self, user_id: int, program_id: int) -> dict:
        row = self.program_repo.get_for_user(user_id, program_id)
        if not row:
            raise NotFoundError(PROGRAM_NOT_FOUND_MESSAGE)
        return row

    def get_exercise(self, user_id: int, exercise_id: int) -> Exercise:
        """
        Get an exercise owned (through its program) by the user.

        Raises:
            NotFoundError: If missing or owned by another user
        """
        row = self.exercise_repo.get_for_user(user_id, exercise_id)
        if not row:
            raise NotFoundError(EXERCISE_NOT_FOUND_MESSAGE)
        return db_row_to_exercise(row)

    def create_exercise(
        self,
        user_id: int,
        program_id: int,
        *,
        name: str,
        notes: Optional[str],
        target_sets: int,
        min_reps: int,
        max_reps: int,
        unit: WeightUnit,
        muscle_group_ids: List[int],
    ) -> Exercise:
        """
        Add an exercise to a program.

        Raises:
            NotFoundError: If the program is missing or owned by another user
            InvalidMuscleGroupError: If a muscle group is not in the program
            DuplicateNameError: If the program already has the exercise name
        """
        program = self._get_program_row(user_id, program_id)

        muscle_groups = {mg["id"]: mg for mg in program.get("muscle_groups") or []}
        muscle_group_ids = list(dict.fromkeys(muscle_group_ids))
        unknown = [mg_id for mg_id in muscle_group_ids if mg_id not in muscle_groups]
        if unknown:
            raise InvalidMuscleGroupError(
                f"Muscle group {unknown[0]} does not belong to this workout program"
            )

        name = name.strip()
        if self.exercise_repo.find_by_name(program_id, name):
            raise DuplicateNameError(DUPLICATE_EXERCISE_MESSAGE)

        row = self.exercise_repo.create(
            program_id,
            name=name,
            notes=notes,
            target_sets=target_sets,
            min_reps=min_reps,
            max_reps=max_reps,
            unit=WeightUnit(unit).value,
        )
        self.exercise_repo.link_muscle_groups(row["id"], muscle_group_ids)

        row["muscle_groups"] = [muscle_groups[mg_id] for mg_id in muscle_group_ids]
        row["workout_program"] = {"id": program["id"], "name": program["name"]}
        logger.info(f"Created exercise {row['id']} in program {program_id}")
        return db_row_to_exercise(row)

    def list_exercises(
        self,
        user_id: int,
        program_id: int,
        muscle_group_id: Optional[int] = None,
    ) -> List[Exercise]:
        """
        List a program's exercises, optionally for a single muscle group.

        Raises:
            NotFoundError: If the program is missing or owned by another user
        """
        self._get_program_row(user_id, program_id)
        rows = self.exercise_repo.list_for_program(program_id, muscle_group_id=muscle_group_id)
        return [db_row_to_exercise(row) for row in rows]

    def rename_exercise(self, user_id: int, exercise_id: int, name: str) -> Exercise:
        """
        Rename an exercise.

        Raises:
            NotFoundError: If missing or owned by another user
            DuplicateNameError: If another exercise in the program has the name
        """
        exercise = self.get_exercise(user_id, exercise_id)
        name = name.strip()
        if self.exercise_repo.find_by_name(
            exercise.workout_program_id, name, exclude_id=exercise_id
        ):
            raise DuplicateNameError(DUPLICATE_EXERCISE_MESSAGE)

        row = self.exercise_repo.rename(exercise_id, name)
        return exercise.model_copy(update={"name": row.get("name", name)})

    def delete_exercise(self, user_id: int, exercise_id: int) -> Exercise:
        """
        Delete an exercise with its sets and muscle group tags.

        Returns:
            The exercise as it was before deletion

        Raises:
            NotFoundError: If missing or owned by another user
        """
        exercise = self.get_exercise(user_id, exercise_id)

        try:
            deleted_sets = self.set_repo.delete_for_exercises([exercise_id])
            self.exercise_repo.unlink_muscle_groups([exercise_id])
            self.exercise_repo.delete([exercise_id])
        except Exception as e:
            logger.exception(f"Failed deleting exercise {exercise_id}: {e}")
            raise

        logger.info(f"Deleted exercise {exercise_id} ({deleted_sets} sets)")
        return exercise

    def log_set(
        self,
        user_id: int,
        exercise_id: int,
        *,
        weight: float,
        reps: int,
        now: Optional[datetime] = None,
    ) -> WorkoutSet:
        """
        Log a set for today.

        Args:
            user_id: Local user ID
            exercise_id: Exercise to log against
            weight: Weight lifted (>= 0)
            reps: Reps completed (>= 1)
            now: Logging time, defaults to the current UTC time

        Raises:
            NotFoundError: If the exercise is missing or owned by another user
            TargetSetsReachedError: If today's target sets are already logged
        """
        exercise = self.get_exercise(user_id, exercise_id)
        now = to_utc(now or datetime.now(timezone.utc))
        valid_upto = end_of_day(now)

        todays_sets = self.set_repo.list_valid_upto(exercise_id, valid_upto)
        if len(todays_sets) >= exercise.target_sets:
            raise TargetSetsReachedError()

        row = self.set_repo.create(
            exercise_id,
            weight=weight,
            reps=reps,
            created_at=now,
            valid_upto=valid_upto,
        )
        logger.debug(
            f"Logged set {len(todays_sets) + 1}/{exercise.target_sets} "
            f"for exercise {exercise_id}"
        )
        return db_row_to_set(row)
