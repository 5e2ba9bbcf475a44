"""
Fake UserRepository for testing.

In-memory implementation of UserRepository backed by a FakeStore.
"""
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from tests.fakes.store import FakeStore


class FakeUserRepository:
    """In-memory fake implementation of UserRepository."""

    def __init__(self, store: Optional[FakeStore] = None):
        self._store = store or FakeStore()

    def reset(self) -> None:
        """Clear all users (and everything else in the shared store)."""
        self._store.reset()

    def seed(self, users: List[Dict[str, Any]]) -> None:
        """
        Seed the repository with test users.

        Args:
            users: List of user dicts. Must include 'external_id'.
        """
        for user in users:
            self._store.insert("users", {
                "email": None,
                "created_at": datetime.now(timezone.utc).isoformat(),
                **user,
            })

    def count(self) -> int:
        return self._store.count("users")

    # =========================================================================
    # UserRepository Protocol Methods
    # =========================================================================

    def get_by_external_id(self, external_id: str) -> Optional[Dict[str, Any]]:
        for row in self._store.rows("users"):
            if row["external_id"] == external_id:
                return dict(row)
        return None

    def create(self, external_id: str, email: Optional[str] = None) -> Dict[str, Any]:
        return self._store.insert("users", {
            "external_id": external_id,
            "email": email,
            "created_at": datetime.now(timezone.utc).isoformat(),
        })
