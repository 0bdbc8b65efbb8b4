"""Skill catalog domain entities."""

from dataclasses import dataclass
from typing import Optional

from skillz.domain.value_objects.skill_type import SkillType


@dataclass
class SkillCategory:
    """Skill category entity."""

    name: str
    color: Optional[str] = None
    icon: Optional[str] = None
    description: Optional[str] = None
    id: Optional[int] = None

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Category name is required")


@dataclass
class Skill:
    """Skill catalog entry. Reference data, never edited by users."""

    name: str
    skill_type: SkillType
    max_level: int = 10
    description: Optional[str] = None
    icon: Optional[str] = None
    category_id: Optional[int] = None
    category_name: Optional[str] = None
    category_color: Optional[str] = None
    id: Optional[int] = None

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Skill name is required")
        if self.max_level < 1:
            raise ValueError("Skill max_level must be at least 1")
        if not isinstance(self.skill_type, SkillType):
            self.skill_type = SkillType(self.skill_type)

    def clamp_level(self, level: int) -> int:
        """Clamp a level to [0, max_level]."""
        return max(0, min(level, self.max_level))


@dataclass
class SkillTreeNode:
    """Placement of a skill in the tree.

    ``tier`` orders the layout only; it does not gate unlocking.
    """

    skill_id: int
    parent_skill_id: Optional[int] = None
    position_x: int = 0
    position_y: int = 0
    tier: int = 1
    unlock_requirement: Optional[str] = None
    id: Optional[int] = None

    @property
    def is_root(self) -> bool:
        return self.parent_skill_id is None


@dataclass
class SkillTreeEntry:
    """Tree node joined with its skill, category and optional user overlay."""

    node_id: int
    skill_id: int
    parent_skill_id: Optional[int]
    position_x: int
    position_y: int
    tier: int
    skill_name: str
    skill_type: str
    max_level: int
    unlock_requirement: Optional[str] = None
    description: Optional[str] = None
    icon: Optional[str] = None
    category_name: Optional[str] = None
    category_color: Optional[str] = None
    user_level: int = 0
    user_experience: int = 0
    is_unlocked: bool = False
