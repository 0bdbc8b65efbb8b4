"""
Skill catalog and skill ledger API schemas.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from skillz.config.settings import settings
from skillz.domain.value_objects.skill_grant import SkillGrant
from skillz.domain.value_objects.skill_type import SkillType

from .common import EntityResponse


class SkillCategoryResponse(EntityResponse):
    id: int
    name: str
    description: Optional[str] = None
    color: Optional[str] = None
    icon: Optional[str] = None


class SkillResponse(EntityResponse):
    id: int
    name: str
    description: Optional[str] = None
    skill_type: SkillType
    max_level: int
    icon: Optional[str] = None
    category_id: Optional[int] = None
    category_name: Optional[str] = None
    category_color: Optional[str] = None


class SkillTreeNodeResponse(EntityResponse):
    """Tree node with its skill, plus the caller's overlay on the user tree."""

    node_id: int
    skill_id: int
    parent_skill_id: Optional[int] = None
    position_x: int
    position_y: int
    tier: int
    unlock_requirement: Optional[str] = None
    skill_name: str
    description: Optional[str] = None
    skill_type: str
    max_level: int
    icon: Optional[str] = None
    category_name: Optional[str] = None
    category_color: Optional[str] = None
    user_level: int = 0
    user_experience: int = 0
    is_unlocked: bool = False


class UserSkillResponse(EntityResponse):
    id: Optional[int] = None
    user_id: int
    skill_id: int
    level: int
    experience_points: int
    unlocked_at: Optional[datetime] = None
    last_updated: Optional[datetime] = None
    skill_name: Optional[str] = None
    description: Optional[str] = None
    skill_type: Optional[str] = None
    max_level: Optional[int] = None
    icon: Optional[str] = None
    category_name: Optional[str] = None
    category_color: Optional[str] = None


class SetUserSkillLevelRequest(BaseModel):
    """Direct level/XP assignment."""

    level: Optional[int] = Field(None, ge=0)
    experience_points: Optional[int] = Field(None, ge=0)


class SkillGrantSchema(BaseModel):
    skill_id: int
    level: int = Field(default_factory=lambda: settings.DEFAULT_GRANT_LEVEL, ge=0)
    experience_points: int = Field(
        default_factory=lambda: settings.DEFAULT_GRANT_EXPERIENCE, ge=0
    )


class UnlockSkillsRequest(BaseModel):
    """
    Grants to apply from a job experience.

    Either ``grants`` or the parallel arrays ``skill_ids``/``levels``/
    ``experience_points`` may be sent. In the array form a missing or zero
    entry falls back to the default level or XP.
    """

    grants: Optional[List[SkillGrantSchema]] = None
    skill_ids: Optional[List[int]] = None
    levels: Optional[List[Optional[int]]] = None
    experience_points: Optional[List[Optional[int]]] = None

    @model_validator(mode="after")
    def check_grants_present(self):
        if not self.grants and not self.skill_ids:
            raise ValueError("grants or skill_ids must be a non-empty list")
        return self

    def to_grants(self) -> List[SkillGrant]:
        """Normalise either wire form into domain grants."""
        if self.grants:
            return [
                SkillGrant(
                    skill_id=grant.skill_id,
                    level=grant.level,
                    experience_points=grant.experience_points,
                )
                for grant in self.grants
            ]

        levels = self.levels or []
        experience = self.experience_points or []
        grants = []
        for index, skill_id in enumerate(self.skill_ids):
            level = levels[index] if index < len(levels) else None
            xp = experience[index] if index < len(experience) else None
            grants.append(
                SkillGrant(
                    skill_id=skill_id,
                    level=level or settings.DEFAULT_GRANT_LEVEL,
                    experience_points=xp or settings.DEFAULT_GRANT_EXPERIENCE,
                )
            )
        return grants


class UnlockedSkillResponse(EntityResponse):
    skill_id: int
    skill_name: Optional[str] = None
    level_granted: int
    experience_points_granted: int
    level: int
    experience_points: int
    newly_unlocked: bool


class UnlockSkillsResponse(BaseModel):
    message: str = "Skills unlocked successfully"
    job_experience_id: int
    unlocked: List[UnlockedSkillResponse]


class SkillUnlockResponse(EntityResponse):
    """One provenance row."""

    id: int
    job_experience_id: int
    skill_id: int
    skill_name: Optional[str] = None
    level_granted: int
    experience_points_granted: int
    created_at: Optional[datetime] = None
