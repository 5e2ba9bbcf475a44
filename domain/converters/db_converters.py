"""
Converters: Database rows -> domain models.

Rows come from Supabase as dictionaries. Timestamps arrive as ISO strings
(with a trailing "Z" or an explicit offset) and are normalized to aware UTC
datetimes so the grouping engine never sees naive values.

Database schema:
- users: id, external_id, email, created_at
- workout_programs: id, user_id, name, description, workout_days[], created_at
- muscle_groups: id, name, workout_program_id
- exercises: id, name, notes, target_sets, min_reps, max_reps, unit,
  workout_program_id, created_at
- exercise_muscle_groups: exercise_id, muscle_group_id
- sets: id, weight, reps, exercise_id, created_at, valid_upto
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from domain.models import Exercise, MuscleGroup, User, WorkoutProgram, WorkoutSet


def _parse_datetime(value: Any) -> Optional[datetime]:
    """Parse a timestamp into an aware UTC datetime."""
    if value is None:
        return None
    if isinstance(value, str):
        if value.endswith("Z"):
            value = value[:-1] + "+00:00"
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            return None
    if not isinstance(value, datetime):
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def db_row_to_user(row: Dict[str, Any]) -> User:
    """Convert a users row to a User."""
    return User(
        id=row["id"],
        external_id=row["external_id"],
        email=row.get("email"),
        created_at=_parse_datetime(row.get("created_at")),
    )


def db_row_to_muscle_group(row: Dict[str, Any]) -> MuscleGroup:
    """Convert a muscle_groups row to a MuscleGroup."""
    return MuscleGroup(
        id=row["id"],
        name=row["name"],
        workout_program_id=row["workout_program_id"],
    )


def _muscle_groups(row: Dict[str, Any]) -> List[MuscleGroup]:
    return [db_row_to_muscle_group(mg) for mg in row.get("muscle_groups") or []]


def db_row_to_exercise(row: Dict[str, Any]) -> Exercise:
    """
    Convert an exercises row to an Exercise.

    Picks up the embedded "workout_program" (for the program name) and
    "muscle_groups" when the query joined them.
    """
    program = row.get("workout_program") or {}
    return Exercise(
        id=row["id"],
        name=row["name"],
        notes=row.get("notes"),
        target_sets=row["target_sets"],
        min_reps=row["min_reps"],
        max_reps=row["max_reps"],
        unit=row.get("unit") or "KG",
        workout_program_id=row["workout_program_id"],
        workout_program_name=program.get("name"),
        muscle_groups=_muscle_groups(row),
    )


def db_row_to_program(row: Dict[str, Any]) -> WorkoutProgram:
    """Convert a workout_programs row (with embedded relations) to a WorkoutProgram."""
    return WorkoutProgram(
        id=row["id"],
        user_id=row["user_id"],
        name=row["name"],
        description=row.get("description"),
        workout_days=row.get("workout_days") or [],
        muscle_groups=_muscle_groups(row),
        exercises=[db_row_to_exercise(ex) for ex in row.get("exercises") or []],
        created_at=_parse_datetime(row.get("created_at")),
    )


def db_row_to_set(row: Dict[str, Any]) -> WorkoutSet:
    """Convert a sets row to a WorkoutSet."""
    return WorkoutSet(
        id=row["id"],
        weight=row["weight"],
        reps=row["reps"],
        exercise_id=row["exercise_id"],
        created_at=_parse_datetime(row["created_at"]),
        valid_upto=_parse_datetime(row.get("valid_upto")),
    )


def db_rows_to_sets(rows: List[Dict[str, Any]]) -> List[WorkoutSet]:
    """Convert sets rows, keeping their order."""
    return [db_row_to_set(row) for row in rows]
