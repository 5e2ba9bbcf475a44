"""
Response envelope shared by every /api/v1 endpoint.

Successful responses are wrapped as ``{"message", "success", "data"}``.
Errors are raised as HTTPException and come back as ``{"detail": message}``.
"""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Standard success envelope."""
    message: str
    success: bool = True
    data: Optional[T] = None


class AttributeModel(BaseModel):
    """Base for response models built from domain objects and dataclasses."""
    model_config = ConfigDict(from_attributes=True)
