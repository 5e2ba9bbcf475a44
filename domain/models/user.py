"""
Local user record linked to an identity-provider subject.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class User(BaseModel):
    """A user known to the tracker, keyed by the Clerk subject."""

    id: int
    external_id: str = Field(..., min_length=1, description="Clerk user ID")
    email: Optional[str] = None
    created_at: Optional[datetime] = None
