"""
Repository implementations package.
"""

from .job_experience_repository import JobExperienceRepository, SkillUnlockRepository
from .resume_repository import ResumeRepository, ResumeSkillRepository
from .skill_catalog_repository import SkillCatalogRepository
from .transaction_repository import TransactionService
from .user_skill_repository import UserSkillRepository

__all__ = [
    "JobExperienceRepository",
    "ResumeRepository",
    "ResumeSkillRepository",
    "SkillCatalogRepository",
    "SkillUnlockRepository",
    "TransactionService",
    "UserSkillRepository",
]
