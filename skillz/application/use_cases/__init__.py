"""
Use cases package.

Each use case orchestrates repositories and services for one operation and
owns the commit of its unit of work.
"""

from .build_resume_from_skills import (
    AppendSkillsToResumeUseCase,
    BuildResumeFromSkillsUseCase,
    BuildResumeResult,
)
from .manage_job_experiences import (
    CreateJobExperienceRequest,
    CreateJobExperienceUseCase,
    DeleteJobExperienceUseCase,
    GetJobExperienceUseCase,
    ListJobExperiencesUseCase,
    ListJobUnlocksUseCase,
)
from .manage_resume_skills import (
    AddSkillToResumeUseCase,
    GetResumeSkillsUseCase,
    RemoveSkillFromResumeUseCase,
)
from .manage_resumes import (
    CreateResumeRequest,
    CreateResumeUseCase,
    DeleteResumeUseCase,
    GetResumeUseCase,
    ListResumesUseCase,
    UpdateResumeRequest,
    UpdateResumeUseCase,
)
from .manage_user_skills import (
    DeleteUserSkillUseCase,
    ListSkillUnlocksUseCase,
    SetUserSkillLevelRequest,
    SetUserSkillLevelUseCase,
)
from .unlock_skills import UnlockSkillsRequest, UnlockSkillsResult, UnlockSkillsUseCase

__all__ = [
    "AddSkillToResumeUseCase",
    "AppendSkillsToResumeUseCase",
    "BuildResumeFromSkillsUseCase",
    "BuildResumeResult",
    "CreateJobExperienceRequest",
    "CreateJobExperienceUseCase",
    "CreateResumeRequest",
    "CreateResumeUseCase",
    "DeleteJobExperienceUseCase",
    "DeleteResumeUseCase",
    "DeleteUserSkillUseCase",
    "GetJobExperienceUseCase",
    "GetResumeSkillsUseCase",
    "GetResumeUseCase",
    "ListJobExperiencesUseCase",
    "ListJobUnlocksUseCase",
    "ListResumesUseCase",
    "ListSkillUnlocksUseCase",
    "RemoveSkillFromResumeUseCase",
    "SetUserSkillLevelRequest",
    "SetUserSkillLevelUseCase",
    "UnlockSkillsRequest",
    "UnlockSkillsResult",
    "UnlockSkillsUseCase",
    "UpdateResumeRequest",
    "UpdateResumeUseCase",
]
