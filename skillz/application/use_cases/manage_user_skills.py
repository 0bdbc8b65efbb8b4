"""User skill ledger use cases outside of job grants."""

from dataclasses import dataclass
from typing import List, Optional

from skillz.application.interfaces.repositories import (
    SkillCatalogRepositoryInterface,
    SkillUnlockRepositoryInterface,
    UserSkillRepositoryInterface,
)
from skillz.config.logging import get_logger
from skillz.domain.entities.job_experience import SkillUnlock
from skillz.domain.entities.user_skill import UserSkill
from skillz.domain.exceptions.not_found_error import NotFoundError, SkillNotFoundError
from skillz.domain.exceptions.validation_error import OutOfRangeError
from skillz.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)
from skillz.infrastructure.monitoring.metrics import record_skill_level_set

logger = get_logger(__name__)


@dataclass
class SetUserSkillLevelRequest:
    """Direct level/XP assignment for one skill."""

    user_id: int
    skill_id: int
    level: Optional[int] = None
    experience_points: Optional[int] = None


class SetUserSkillLevelUseCase:
    """Set a skill's level or XP directly. Writes no provenance."""

    def __init__(
        self,
        skill_catalog_repo: SkillCatalogRepositoryInterface,
        user_skill_repo: UserSkillRepositoryInterface,
        transaction_service: TransactionService,
    ):
        self.skill_catalog_repo = skill_catalog_repo
        self.user_skill_repo = user_skill_repo
        self.transaction_service = transaction_service

    async def execute(self, request: SetUserSkillLevelRequest) -> UserSkill:
        if request.level is not None and request.level < 0:
            raise OutOfRangeError("level", request.level, minimum=0)
        if request.experience_points is not None and request.experience_points < 0:
            raise OutOfRangeError(
                "experience_points", request.experience_points, minimum=0
            )

        skill = await self.skill_catalog_repo.get_skill(request.skill_id)
        if skill is None:
            raise SkillNotFoundError(request.skill_id)

        existing = await self.user_skill_repo.get(request.user_id, request.skill_id)

        async def operation() -> UserSkill:
            if existing is None:
                user_skill = UserSkill(user_id=request.user_id, skill_id=skill.id)
                user_skill.set_progress(
                    skill.max_level,
                    level=request.level or 0,
                    experience_points=request.experience_points or 0,
                )
                return await self.user_skill_repo.create(user_skill)

            existing.set_progress(
                skill.max_level,
                level=request.level,
                experience_points=request.experience_points,
            )
            return await self.user_skill_repo.update(existing)

        user_skill = await self.transaction_service.execute_in_transaction(operation)
        record_skill_level_set("created" if existing is None else "updated")

        logger.info(
            "User skill level set",
            user_id=request.user_id,
            skill_id=skill.id,
            level=user_skill.level,
            experience_points=user_skill.experience_points,
        )
        return user_skill


class DeleteUserSkillUseCase:
    """Remove a skill from the user's ledger.

    Resume associations for the skill are kept and filtered out on read.
    """

    def __init__(
        self,
        user_skill_repo: UserSkillRepositoryInterface,
        transaction_service: TransactionService,
    ):
        self.user_skill_repo = user_skill_repo
        self.transaction_service = transaction_service

    async def execute(self, user_id: int, skill_id: int) -> None:
        deleted = await self.user_skill_repo.delete(user_id, skill_id)
        if not deleted:
            raise NotFoundError("User skill", "Skill not found")

        await self.transaction_service.commit()
        logger.info("User skill deleted", user_id=user_id, skill_id=skill_id)


class ListSkillUnlocksUseCase:
    """Which of the user's jobs granted a given skill."""

    def __init__(self, skill_unlock_repo: SkillUnlockRepositoryInterface):
        self.skill_unlock_repo = skill_unlock_repo

    async def execute(self, user_id: int, skill_id: int) -> List[SkillUnlock]:
        return await self.skill_unlock_repo.list_for_user_skill(user_id, skill_id)
