"""
Users router.

Creates the local user row for an authenticated subject the first time
the client signs in; every other endpoint requires that row to exist.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from api.deps import get_current_user, get_user_service
from api.schemas import ApiResponse, UserResponse
from backend.core.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/users",
    tags=["Users"],
)


@router.get("/sync", response_model=ApiResponse[UserResponse])
def sync_user(
    response: Response,
    email: Optional[str] = Query(None, description="Email from the identity provider"),
    external_id: str = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    """
    Create the local user for the authenticated subject.

    Returns 201 when the user is created and 200 when it already exists.
    """
    user, created = service.sync(external_id, email)
    if created:
        response.status_code = status.HTTP_201_CREATED
        message = "User created successfully"
    else:
        message = "User already exists"

    return ApiResponse[UserResponse](
        message=message,
        data=UserResponse.model_validate(user),
    )
