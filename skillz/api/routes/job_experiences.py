"""Job experience endpoints, including the skill unlock trigger."""

from typing import List

from fastapi import APIRouter, status

from skillz.api.dependencies import (
    CurrentUserId,
    JobExperienceRepositoryDep,
    SkillUnlockEngineDep,
    SkillUnlockRepositoryDep,
    TransactionServiceDep,
)
from skillz.api.schemas.common import MessageResponse
from skillz.api.schemas.job_experience import (
    JobExperienceCreateRequest,
    JobExperienceResponse,
)
from skillz.api.schemas.skill import (
    SkillUnlockResponse,
    UnlockedSkillResponse,
    UnlockSkillsRequest,
    UnlockSkillsResponse,
)
from skillz.application.use_cases.manage_job_experiences import (
    CreateJobExperienceRequest,
    CreateJobExperienceUseCase,
    DeleteJobExperienceUseCase,
    GetJobExperienceUseCase,
    ListJobExperiencesUseCase,
    ListJobUnlocksUseCase,
)
from skillz.application.use_cases.unlock_skills import (
    UnlockSkillsRequest as UnlockSkillsCommand,
)
from skillz.application.use_cases.unlock_skills import UnlockSkillsUseCase
from skillz.config.logging import get_logger

logger = get_logger(__name__)

# Registered ahead of the skills router so "/skills/user/jobs" never
# resolves as "/skills/user/{skill_id}".
router = APIRouter(prefix="/skills/user/jobs", tags=["job-experiences"])


@router.get("", response_model=List[JobExperienceResponse])
async def list_job_experiences(
    user_id: CurrentUserId, job_experience_repository: JobExperienceRepositoryDep
):
    """List the caller's job experiences, most recent start date first."""
    use_case = ListJobExperiencesUseCase(job_experience_repository)
    return await use_case.execute(user_id)


@router.post(
    "", response_model=JobExperienceResponse, status_code=status.HTTP_201_CREATED
)
async def create_job_experience(
    payload: JobExperienceCreateRequest,
    user_id: CurrentUserId,
    job_experience_repository: JobExperienceRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    use_case = CreateJobExperienceUseCase(job_experience_repository, transaction_service)
    return await use_case.execute(
        CreateJobExperienceRequest(user_id=user_id, **payload.model_dump())
    )


@router.get("/{job_id}", response_model=JobExperienceResponse)
async def get_job_experience(
    job_id: int,
    user_id: CurrentUserId,
    job_experience_repository: JobExperienceRepositoryDep,
):
    use_case = GetJobExperienceUseCase(job_experience_repository)
    return await use_case.execute(user_id, job_id)


@router.delete("/{job_id}", response_model=MessageResponse)
async def delete_job_experience(
    job_id: int,
    user_id: CurrentUserId,
    job_experience_repository: JobExperienceRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    """Delete a job experience. Skills it unlocked stay in the ledger."""
    use_case = DeleteJobExperienceUseCase(job_experience_repository, transaction_service)
    await use_case.execute(user_id, job_id)
    return MessageResponse(message="Job experience deleted successfully")


@router.get("/{job_id}/unlocks", response_model=List[SkillUnlockResponse])
async def list_job_unlocks(
    job_id: int,
    user_id: CurrentUserId,
    job_experience_repository: JobExperienceRepositoryDep,
    skill_unlock_repository: SkillUnlockRepositoryDep,
):
    use_case = ListJobUnlocksUseCase(job_experience_repository, skill_unlock_repository)
    return await use_case.execute(user_id, job_id)


@router.post("/{job_id}/unlock-skills", response_model=UnlockSkillsResponse)
async def unlock_skills(
    job_id: int,
    payload: UnlockSkillsRequest,
    user_id: CurrentUserId,
    job_experience_repository: JobExperienceRepositoryDep,
    unlock_engine: SkillUnlockEngineDep,
):
    """Apply skill grants from one of the caller's job experiences."""
    use_case = UnlockSkillsUseCase(job_experience_repository, unlock_engine)
    result = await use_case.execute(
        UnlockSkillsCommand(
            user_id=user_id, job_experience_id=job_id, grants=payload.to_grants()
        )
    )
    return UnlockSkillsResponse(
        job_experience_id=result.job_experience_id,
        unlocked=[UnlockedSkillResponse.model_validate(a) for a in result.applied],
    )
