"""
Domain converters for transforming database rows into domain models.

All converters are pure functions with no side effects.

Examples:
    >>> from domain.converters import db_row_to_set

    >>> s = db_row_to_set({
    ...     "id": 1,
    ...     "weight": 80,
    ...     "reps": 10,
    ...     "exercise_id": 3,
    ...     "created_at": "2024-01-15T09:30:00Z",
    ... })
    >>> s.created_at.tzinfo is not None
    True
"""

from domain.converters.db_converters import (
    db_row_to_exercise,
    db_row_to_muscle_group,
    db_row_to_program,
    db_row_to_set,
    db_row_to_user,
    db_rows_to_sets,
)

__all__ = [
    "db_row_to_user",
    "db_row_to_muscle_group",
    "db_row_to_exercise",
    "db_row_to_program",
    "db_row_to_set",
    "db_rows_to_sets",
]
