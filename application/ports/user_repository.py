"""
User Repository Interface (Port).

Maps identity-provider subjects (Clerk user IDs) to local user rows.
"""
from typing import Protocol, Optional, Dict, Any


class UserRepository(Protocol):
    """Abstract interface for the users table."""

    def get_by_external_id(self, external_id: str) -> Optional[Dict[str, Any]]:
        """
        Find a user by Clerk subject.

        Args:
            external_id: Clerk user ID (JWT ``sub``)

        Returns:
            User dictionary or None if not found
        """
        ...

    def create(self, external_id: str, email: Optional[str] = None) -> Dict[str, Any]:
        """
        Create a user.

        Args:
            external_id: Clerk user ID
            email: Primary email address, if known

        Returns:
            Created user dictionary with generated ID
        """
        ...
