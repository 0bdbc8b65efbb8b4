"""
Common API schemas.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ErrorResponse(BaseModel):
    """Error body returned by every error handler."""

    error: str
    message: Optional[str] = None
    type: str


class MessageResponse(BaseModel):
    """Acknowledgement for mutations that return no resource."""

    message: str


class TimestampMixin(BaseModel):
    """Mixin for timestamp fields."""

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class EntityResponse(BaseModel):
    """Base for responses built straight from domain dataclasses."""

    model_config = ConfigDict(from_attributes=True)
