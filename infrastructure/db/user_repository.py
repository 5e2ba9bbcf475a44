"""
Supabase User Repository Implementation.
"""
from typing import Optional, Dict, Any
import logging

from supabase import Client

logger = logging.getLogger(__name__)


class SupabaseUserRepository:
    """Supabase implementation of UserRepository (users table)."""

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected)
        """
        self._client = client

    def get_by_external_id(self, external_id: str) -> Optional[Dict[str, Any]]:
        """Find a user by Clerk subject."""
        result = self._client.table("users") \
            .select("*") \
            .eq("external_id", external_id) \
            .limit(1) \
            .execute()
        return result.data[0] if result.data else None

    def create(self, external_id: str, email: Optional[str] = None) -> Dict[str, Any]:
        """Create a user row."""
        result = self._client.table("users") \
            .insert({"external_id": external_id, "email": email}) \
            .execute()
        logger.info(f"Created user for external id {external_id}")
        return result.data[0]
