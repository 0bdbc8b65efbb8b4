"""
Job experience API schemas.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from .common import EntityResponse, TimestampMixin


class JobExperienceCreateRequest(BaseModel):
    """Job experience creation request schema."""

    company: str = Field(..., min_length=1, max_length=255)
    position: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    start_date: Optional[date] = Field(None, description="ISO 8601 date")
    end_date: Optional[date] = Field(None, description="ISO 8601 date")
    skills_gained: Optional[str] = None


class JobExperienceResponse(EntityResponse, TimestampMixin):
    id: int
    user_id: int
    company: str
    position: str
    description: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    skills_gained: Optional[str] = None
