"""Job experience use cases."""

from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from skillz.application.interfaces.repositories import (
    JobExperienceRepositoryInterface,
    SkillUnlockRepositoryInterface,
)
from skillz.config.logging import get_logger
from skillz.domain.entities.job_experience import JobExperience, SkillUnlock
from skillz.domain.exceptions.not_found_error import JobExperienceNotFoundError
from skillz.domain.exceptions.validation_error import ValidationError
from skillz.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)

logger = get_logger(__name__)


@dataclass
class CreateJobExperienceRequest:
    """Request for creating a job experience."""

    user_id: int
    company: str
    position: str
    description: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    skills_gained: Optional[str] = None


class CreateJobExperienceUseCase:
    def __init__(
        self,
        job_experience_repo: JobExperienceRepositoryInterface,
        transaction_service: TransactionService,
    ):
        self.job_experience_repo = job_experience_repo
        self.transaction_service = transaction_service

    async def execute(self, request: CreateJobExperienceRequest) -> JobExperience:
        try:
            job = JobExperience(
                user_id=request.user_id,
                company=request.company,
                position=request.position,
                description=request.description,
                start_date=request.start_date,
                end_date=request.end_date,
                skills_gained=request.skills_gained,
            )
        except ValueError as e:
            raise ValidationError(str(e)) from e

        created = await self.transaction_service.execute_in_transaction(
            lambda: self.job_experience_repo.create(job)
        )
        logger.info(
            "Job experience created",
            user_id=request.user_id,
            job_experience_id=created.id,
        )
        return created


class GetJobExperienceUseCase:
    def __init__(self, job_experience_repo: JobExperienceRepositoryInterface):
        self.job_experience_repo = job_experience_repo

    async def execute(self, user_id: int, job_experience_id: int) -> JobExperience:
        job = await self.job_experience_repo.get_for_user(job_experience_id, user_id)
        if job is None:
            raise JobExperienceNotFoundError(job_experience_id)
        return job


class ListJobExperiencesUseCase:
    def __init__(self, job_experience_repo: JobExperienceRepositoryInterface):
        self.job_experience_repo = job_experience_repo

    async def execute(self, user_id: int) -> List[JobExperience]:
        return await self.job_experience_repo.list_for_user(user_id)


class DeleteJobExperienceUseCase:
    """Delete a job experience and its provenance. The ledger is untouched."""

    def __init__(
        self,
        job_experience_repo: JobExperienceRepositoryInterface,
        transaction_service: TransactionService,
    ):
        self.job_experience_repo = job_experience_repo
        self.transaction_service = transaction_service

    async def execute(self, user_id: int, job_experience_id: int) -> None:
        job = await self.job_experience_repo.get_for_user(job_experience_id, user_id)
        if job is None:
            raise JobExperienceNotFoundError(job_experience_id)

        await self.job_experience_repo.delete(job.id)
        await self.transaction_service.commit()
        logger.info(
            "Job experience deleted", user_id=user_id, job_experience_id=job.id
        )


class ListJobUnlocksUseCase:
    """Provenance rows produced by one of the user's jobs."""

    def __init__(
        self,
        job_experience_repo: JobExperienceRepositoryInterface,
        skill_unlock_repo: SkillUnlockRepositoryInterface,
    ):
        self.job_experience_repo = job_experience_repo
        self.skill_unlock_repo = skill_unlock_repo

    async def execute(self, user_id: int, job_experience_id: int) -> List[SkillUnlock]:
        job = await self.job_experience_repo.get_for_user(job_experience_id, user_id)
        if job is None:
            raise JobExperienceNotFoundError(job_experience_id)
        return await self.skill_unlock_repo.list_for_job(job.id)
