"""Resume-skill association use cases."""

from typing import List

from skillz.application.interfaces.repositories import (
    ResumeRepositoryInterface,
    ResumeSkillRepositoryInterface,
    UserSkillRepositoryInterface,
)
from skillz.config.logging import get_logger
from skillz.domain.entities.resume import ResumeSkillView
from skillz.domain.exceptions.conflict_error import DuplicateResumeSkillError
from skillz.domain.exceptions.not_found_error import (
    ResumeNotFoundError,
    ResumeSkillNotFoundError,
    SkillNotUnlockedError,
)
from skillz.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)
from skillz.infrastructure.monitoring.metrics import record_resume_skill_operation

logger = get_logger(__name__)


class AddSkillToResumeUseCase:
    """Showcase one of the owner's unlocked skills on a resume."""

    def __init__(
        self,
        resume_repo: ResumeRepositoryInterface,
        user_skill_repo: UserSkillRepositoryInterface,
        resume_skill_repo: ResumeSkillRepositoryInterface,
        transaction_service: TransactionService,
    ):
        self.resume_repo = resume_repo
        self.user_skill_repo = user_skill_repo
        self.resume_skill_repo = resume_skill_repo
        self.transaction_service = transaction_service

    async def execute(self, user_id: int, resume_id: int, skill_id: int) -> None:
        """
        Raises:
            ResumeNotFoundError: resume missing or owned by someone else
            SkillNotUnlockedError: the owner has not unlocked the skill
            DuplicateResumeSkillError: the skill is already on the resume
        """
        resume = await self.resume_repo.get_for_user(resume_id, user_id)
        if resume is None:
            record_resume_skill_operation("add", "resume_not_found")
            raise ResumeNotFoundError(resume_id)

        user_skill = await self.user_skill_repo.get(user_id, skill_id)
        if user_skill is None or not user_skill.is_unlocked:
            record_resume_skill_operation("add", "not_unlocked")
            raise SkillNotUnlockedError(skill_id)

        if await self.resume_skill_repo.exists(resume.id, skill_id):
            record_resume_skill_operation("add", "duplicate")
            raise DuplicateResumeSkillError(resume.id, skill_id)

        await self.resume_skill_repo.add(resume.id, skill_id)
        await self.transaction_service.commit()

        record_resume_skill_operation("add", "success")
        logger.info("Skill added to resume", resume_id=resume.id, skill_id=skill_id)


class RemoveSkillFromResumeUseCase:
    """Unlink a skill from a resume. The ledger row is never touched."""

    def __init__(
        self,
        resume_repo: ResumeRepositoryInterface,
        resume_skill_repo: ResumeSkillRepositoryInterface,
        transaction_service: TransactionService,
    ):
        self.resume_repo = resume_repo
        self.resume_skill_repo = resume_skill_repo
        self.transaction_service = transaction_service

    async def execute(self, user_id: int, resume_id: int, skill_id: int) -> None:
        resume = await self.resume_repo.get_for_user(resume_id, user_id)
        if resume is None:
            record_resume_skill_operation("remove", "resume_not_found")
            raise ResumeNotFoundError(resume_id)

        removed = await self.resume_skill_repo.remove(resume.id, skill_id)
        if not removed:
            record_resume_skill_operation("remove", "not_found")
            raise ResumeSkillNotFoundError(resume.id, skill_id)

        await self.transaction_service.commit()
        record_resume_skill_operation("remove", "success")
        logger.info(
            "Skill removed from resume", resume_id=resume.id, skill_id=skill_id
        )


class GetResumeSkillsUseCase:
    def __init__(
        self,
        resume_repo: ResumeRepositoryInterface,
        resume_skill_repo: ResumeSkillRepositoryInterface,
    ):
        self.resume_repo = resume_repo
        self.resume_skill_repo = resume_skill_repo

    async def execute(self, user_id: int, resume_id: int) -> List[ResumeSkillView]:
        """Live view of the resume's skills, ordered by skill name.

        Associations whose ledger row was deleted are not returned.
        """
        resume = await self.resume_repo.get_for_user(resume_id, user_id)
        if resume is None:
            raise ResumeNotFoundError(resume_id)
        return await self.resume_skill_repo.list_view(resume.id, resume.user_id)
