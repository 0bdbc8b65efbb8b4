"""
Domain value objects package.
"""

from .comparison import ComparisonSide, DragPayload, ItemType
from .skill_grant import SkillGrant
from .skill_type import SkillType

__all__ = [
    "ComparisonSide",
    "DragPayload",
    "ItemType",
    "SkillGrant",
    "SkillType",
]
