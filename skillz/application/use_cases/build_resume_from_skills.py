"""Resume builder use cases: create or extend a resume from skills."""

from dataclasses import dataclass, field
from typing import Dict, List

from skillz.application.interfaces.repositories import (
    ResumeRepositoryInterface,
    SkillCatalogRepositoryInterface,
)
from skillz.application.services.resume_content import format_skills_section
from skillz.application.use_cases.manage_resume_skills import AddSkillToResumeUseCase
from skillz.config.logging import get_logger
from skillz.domain.entities.resume import Resume
from skillz.domain.entities.skill import Skill
from skillz.domain.exceptions import (
    ConflictError,
    NotFoundError,
    RequiredFieldError,
    ResumeNotFoundError,
    ValidationError,
)
from skillz.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)

logger = get_logger(__name__)


@dataclass
class BuildResumeResult:
    """Resume written, plus which skills could be linked to it."""

    resume: Resume
    associated_skill_ids: List[int] = field(default_factory=list)
    skipped: Dict[int, str] = field(default_factory=dict)


class _SkillsSectionWriter:
    def __init__(
        self,
        skill_catalog_repo: SkillCatalogRepositoryInterface,
        resume_repo: ResumeRepositoryInterface,
        add_skill: AddSkillToResumeUseCase,
        transaction_service: TransactionService,
    ):
        self.skill_catalog_repo = skill_catalog_repo
        self.resume_repo = resume_repo
        self.add_skill = add_skill
        self.transaction_service = transaction_service

    async def _resolve_skills(self, skill_ids: List[int]) -> List[Skill]:
        if not skill_ids:
            raise RequiredFieldError("skill_ids")

        ordered_ids = list(dict.fromkeys(skill_ids))
        found = await self.skill_catalog_repo.get_skills_by_ids(ordered_ids)
        skills = [found[skill_id] for skill_id in ordered_ids if skill_id in found]
        if not skills:
            raise ValidationError("None of the selected skills exist")
        return skills

    async def _associate(
        self, user_id: int, resume: Resume, skill_ids: List[int]
    ) -> BuildResumeResult:
        result = BuildResumeResult(resume=resume)
        for skill_id in dict.fromkeys(skill_ids):
            try:
                await self.add_skill.execute(user_id, resume.id, skill_id)
            except (NotFoundError, ConflictError) as e:
                result.skipped[skill_id] = str(e)
                continue
            result.associated_skill_ids.append(skill_id)

        logger.info(
            "Skills section written",
            resume_id=resume.id,
            associated=len(result.associated_skill_ids),
            skipped=len(result.skipped),
        )
        return result


class BuildResumeFromSkillsUseCase(_SkillsSectionWriter):
    async def execute(
        self, user_id: int, title: str, skill_ids: List[int]
    ) -> BuildResumeResult:
        if not title or not title.strip():
            raise RequiredFieldError("title")
        skills = await self._resolve_skills(skill_ids)

        resume = Resume(
            user_id=user_id, title=title, content=format_skills_section(skills)
        )
        created = await self.transaction_service.execute_in_transaction(
            lambda: self.resume_repo.create(resume)
        )
        return await self._associate(user_id, created, skill_ids)


class AppendSkillsToResumeUseCase(_SkillsSectionWriter):
    async def execute(
        self, user_id: int, resume_id: int, skill_ids: List[int]
    ) -> BuildResumeResult:
        resume = await self.resume_repo.get_for_user(resume_id, user_id)
        if resume is None:
            raise ResumeNotFoundError(resume_id)
        skills = await self._resolve_skills(skill_ids)

        resume.append_section(format_skills_section(skills))
        updated = await self.transaction_service.execute_in_transaction(
            lambda: self.resume_repo.update(resume)
        )
        return await self._associate(user_id, updated, skill_ids)
