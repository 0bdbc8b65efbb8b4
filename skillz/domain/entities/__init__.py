"""
Domain entities package.
"""

from .job_experience import JobExperience, SkillUnlock
from .resume import Resume, ResumeSkillView
from .skill import Skill, SkillCategory, SkillTreeEntry, SkillTreeNode
from .skill_forest import SkillForest, SkillForestError
from .user_skill import UserSkill

__all__ = [
    "JobExperience",
    "Resume",
    "ResumeSkillView",
    "Skill",
    "SkillCategory",
    "SkillForest",
    "SkillForestError",
    "SkillTreeEntry",
    "SkillTreeNode",
    "SkillUnlock",
    "UserSkill",
]
