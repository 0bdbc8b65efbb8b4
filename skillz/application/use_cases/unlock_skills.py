"""Unlock skills use case."""

from dataclasses import dataclass, field
from typing import List

from skillz.application.interfaces.repositories import JobExperienceRepositoryInterface
from skillz.application.services.unlock_engine import AppliedGrant, SkillUnlockEngine
from skillz.config.logging import get_logger
from skillz.domain.exceptions.not_found_error import JobExperienceNotFoundError
from skillz.domain.exceptions.validation_error import RequiredFieldError
from skillz.domain.value_objects.skill_grant import SkillGrant

logger = get_logger(__name__)


@dataclass
class UnlockSkillsRequest:
    """Request for unlocking skills from a job experience."""

    user_id: int
    job_experience_id: int
    grants: List[SkillGrant] = field(default_factory=list)


@dataclass
class UnlockSkillsResult:
    """Grants that were applied, in request order."""

    job_experience_id: int
    applied: List[AppliedGrant]


class UnlockSkillsUseCase:
    """Use case for applying job-experience grants to the skill ledger."""

    def __init__(
        self,
        job_experience_repo: JobExperienceRepositoryInterface,
        unlock_engine: SkillUnlockEngine,
    ):
        self.job_experience_repo = job_experience_repo
        self.unlock_engine = unlock_engine

    async def execute(self, request: UnlockSkillsRequest) -> UnlockSkillsResult:
        if not request.grants:
            raise RequiredFieldError("grants")

        job = await self.job_experience_repo.get_for_user(
            request.job_experience_id, request.user_id
        )
        if job is None:
            raise JobExperienceNotFoundError(request.job_experience_id)

        logger.info(
            "Unlocking skills from job experience",
            user_id=request.user_id,
            job_experience_id=job.id,
            grants=len(request.grants),
        )

        applied = await self.unlock_engine.apply_grants(
            request.user_id, job.id, request.grants
        )
        return UnlockSkillsResult(job_experience_id=job.id, applied=applied)
