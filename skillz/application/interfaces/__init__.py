"""
Application interfaces package.
"""

from .gateways import CareerGatewayInterface
from .repositories import (
    JobExperienceRepositoryInterface,
    ResumeRepositoryInterface,
    ResumeSkillRepositoryInterface,
    SkillCatalogRepositoryInterface,
    SkillUnlockRepositoryInterface,
    UserSkillRepositoryInterface,
)

__all__ = [
    "CareerGatewayInterface",
    "JobExperienceRepositoryInterface",
    "ResumeRepositoryInterface",
    "ResumeSkillRepositoryInterface",
    "SkillCatalogRepositoryInterface",
    "SkillUnlockRepositoryInterface",
    "UserSkillRepositoryInterface",
]
