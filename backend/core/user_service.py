"""
User Service.

Links Clerk subjects to local user rows. Every other service works with the
local integer user ID, so routers resolve it through ``resolve`` first.
"""
from typing import Optional, Tuple
import logging

from application.exceptions import UserNotFoundError
from application.ports import UserRepository
from domain.converters import db_row_to_user
from domain.models import User

logger = logging.getLogger(__name__)


class UserService:
    """Service for syncing and resolving users."""

    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    def sync(self, external_id: str, email: Optional[str] = None) -> Tuple[User, bool]:
        """
        Ensure a local user exists for a Clerk subject.

        Args:
            external_id: Clerk user ID
            email: Email to store when the user is created

        Returns:
            (user, created) where created is True if the row was just inserted
        """
        row = self.user_repo.get_by_external_id(external_id)
        if row:
            return db_row_to_user(row), False

        row = self.user_repo.create(external_id, email)
        logger.info(f"Synced new user {external_id}")
        return db_row_to_user(row), True

    def resolve(self, external_id: str) -> User:
        """
        Look up the local user for a Clerk subject.

        Raises:
            UserNotFoundError: If the subject was never synced
        """
        row = self.user_repo.get_by_external_id(external_id)
        if not row:
            raise UserNotFoundError()
        return db_row_to_user(row)
