"""
Domain package.
"""

from .entities import *
from .exceptions import *
from .value_objects import *

__all__ = [
    # Entities
    "JobExperience",
    "Resume",
    "ResumeSkillView",
    "Skill",
    "SkillCategory",
    "SkillForest",
    "SkillTreeNode",
    "SkillUnlock",
    "UserSkill",

    # Exceptions
    "ConflictError",
    "NotFoundError",
    "ValidationError",

    # Value Objects
    "ComparisonSide",
    "DragPayload",
    "ItemType",
    "SkillGrant",
    "SkillType",
]
