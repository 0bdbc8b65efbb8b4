"""
Database models package.
"""

from .base import Base, BaseModel
from .job_experience import JobExperienceModel
from .resume import ResumeModel
from .resume_skill import ResumeSkillModel
from .skill import SkillModel
from .skill_category import SkillCategoryModel
from .skill_tree_node import SkillTreeNodeModel
from .skill_unlock import SkillUnlockModel
from .user_skill import UserSkillModel

__all__ = [
    "Base",
    "BaseModel",
    "JobExperienceModel",
    "ResumeModel",
    "ResumeSkillModel",
    "SkillCategoryModel",
    "SkillModel",
    "SkillTreeNodeModel",
    "SkillUnlockModel",
    "UserSkillModel",
]
