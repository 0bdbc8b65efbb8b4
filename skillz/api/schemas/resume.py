"""
Resume API schemas.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .common import EntityResponse, TimestampMixin


class ResumeCreateRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    content: Optional[str] = None


class ResumeUpdateRequest(BaseModel):
    """Partial update. Sending neither field is rejected."""

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    content: Optional[str] = None


class ResumeResponse(EntityResponse, TimestampMixin):
    id: int
    user_id: int
    title: str
    content: str = ""


class ResumeSkillResponse(EntityResponse):
    """A skill on a resume with the owner's current level and XP."""

    skill_id: int
    user_level: int
    user_experience: int
    skill_name: str
    description: Optional[str] = None
    skill_type: Optional[str] = None
    max_level: Optional[int] = None
    icon: Optional[str] = None
    category_name: Optional[str] = None
    category_color: Optional[str] = None


class BuildResumeRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    skill_ids: List[int] = Field(..., min_length=1)


class AppendSkillsRequest(BaseModel):
    skill_ids: List[int] = Field(..., min_length=1)


class BuildResumeResponse(BaseModel):
    resume: ResumeResponse
    associated_skill_ids: List[int]
    skipped: Dict[int, str] = Field(
        default_factory=dict,
        description="Skills that could not be linked, with the reason",
    )
