"""
Health check router.

This router provides the liveness endpoint for monitoring and load balancers,
as well as the test-environment data reset endpoint.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException

from api.deps import get_current_db_user, get_program_service, get_settings
from backend.core.program_service import ProgramService
from backend.settings import Settings
from domain.models import User

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Health"],
)


# =============================================================================
# Health Check Endpoints
# =============================================================================


@router.get("/health")
def health():
    """
    Simple liveness endpoint for the workout tracker API.

    Returns:
        dict: Status indicator for health checks
    """
    return {"status": "ok"}


# =============================================================================
# Testing Endpoints
# =============================================================================


@router.post("/testing/reset-user-data")
def reset_user_data_endpoint(
    user: User = Depends(get_current_db_user),
    x_test_secret: Optional[str] = Header(None, alias="X-Test-Secret"),
    settings: Settings = Depends(get_settings),
    service: ProgramService = Depends(get_program_service),
):
    """
    Delete all of the caller's workout programs, exercises and sets.

    **WARNING:** This endpoint permanently deletes user data.
    Only available in test environments.

    Keeps:
    - The local user row (authentication continues to work)
    """
    if not settings.is_test:
        raise HTTPException(
            status_code=403,
            detail="This endpoint is only available in test environment"
        )

    # Secret is optional; validated only when both sides provide one
    if settings.test_reset_secret and x_test_secret:
        if x_test_secret != settings.test_reset_secret:
            logger.warning(f"Reset user data attempted by {user.external_id} with invalid secret")
            raise HTTPException(
                status_code=403,
                detail="Invalid X-Test-Secret header"
            )

    logger.info(f"Resetting user data for {user.external_id} (environment: {settings.environment})")

    try:
        deleted = service.delete_all_programs(user.id)
    except Exception as e:
        logger.error(f"Failed to reset user data for {user.external_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to reset user data")

    return {
        "success": True,
        "deleted": deleted,
        "user_id": user.external_id,
        "reset_at": datetime.now(timezone.utc).isoformat(),
    }
