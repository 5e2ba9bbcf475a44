"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Fakes built on one FakeStore see each other's rows (ownership joins work)
- Supports seeding with test data
- Supports reset() for test isolation

Usage:
    from tests.fakes import create_fake_repos

    repos = create_fake_repos()
    user = repos.users.create("user_abc", "lifter@example.com")
    program = repos.programs.seed_program(user_id=user["id"], name="Push Day")
"""
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Dict, List, Sequence, Tuple

from tests.fakes.store import FakeStore
from tests.fakes.user_repository import FakeUserRepository
from tests.fakes.workout_program_repository import FakeWorkoutProgramRepository
from tests.fakes.exercise_repository import FakeExerciseRepository
from tests.fakes.set_repository import FakeSetRepository


@dataclass
class FakeRepos:
    """One set of fakes sharing a store."""
    store: FakeStore = field(default_factory=FakeStore)

    def __post_init__(self):
        self.users = FakeUserRepository(self.store)
        self.programs = FakeWorkoutProgramRepository(self.store)
        self.exercises = FakeExerciseRepository(self.store)
        self.sets = FakeSetRepository(self.store)

    def reset(self) -> None:
        self.store.reset()


# =============================================================================
# Factory Functions
# =============================================================================


def create_fake_repos() -> FakeRepos:
    """Create fresh fakes over an empty store."""
    return FakeRepos()


def make_set_rows(
    exercise_id: int,
    start: datetime,
    sets: Sequence[Tuple[float, int]],
    *,
    rest_minutes: int = 2,
) -> List[Dict[str, Any]]:
    """
    Build set rows for one session, spaced ``rest_minutes`` apart.

    Args:
        exercise_id: Exercise the sets belong to
        start: Time of the first set (aware UTC)
        sets: (weight, reps) pairs in logging order
        rest_minutes: Gap between consecutive sets

    Returns:
        Rows ready for FakeSetRepository.seed()
    """
    return [
        {
            "exercise_id": exercise_id,
            "weight": weight,
            "reps": reps,
            "created_at": start + timedelta(minutes=i * rest_minutes),
        }
        for i, (weight, reps) in enumerate(sets)
    ]


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Fake implementations
    "FakeStore",
    "FakeUserRepository",
    "FakeWorkoutProgramRepository",
    "FakeExerciseRepository",
    "FakeSetRepository",
    "FakeRepos",
    # Factory functions
    "create_fake_repos",
    "make_set_rows",
]
