"""
Skill unlock engine.

Applies the skill grants recorded against a job experience to the user's
skill ledger and appends one provenance row per applied grant.
"""

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
from skillz.domain.value_objects.skill_grant import SkillGrant
from skillz.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)
from skillz.infrastructure.monitoring.metrics import record_skill_grant

logger = get_logger(__name__)


@dataclass
class AppliedGrant:
    """What one grant actually did to the ledger."""

    skill_id: int
    level_granted: int
    experience_points_granted: int
    level: int
    experience_points: int
    newly_unlocked: bool
    skill_name: Optional[str] = None


class SkillUnlockEngine:
    """Merge grants into the ledger: level max-wins, XP accumulates."""

    def __init__(
        self,
        skill_catalog_repo: SkillCatalogRepositoryInterface,
        user_skill_repo: UserSkillRepositoryInterface,
        skill_unlock_repo: SkillUnlockRepositoryInterface,
        transaction_service: TransactionService,
    ):
        self.skill_catalog_repo = skill_catalog_repo
        self.user_skill_repo = user_skill_repo
        self.skill_unlock_repo = skill_unlock_repo
        self.transaction_service = transaction_service
        self.logger = logger

    async def apply_grants(
        self, user_id: int, job_experience_id: int, grants: List[SkillGrant]
    ) -> List[AppliedGrant]:
        """
        Apply grants in order, committing after each one.

        Grants for skills missing from the catalog are skipped. A storage
        failure on one grant leaves the earlier grants committed and
        propagates to the caller.

        Args:
            user_id: Owner of the job experience and the ledger rows
            job_experience_id: Job the grants are attributed to
            grants: Requested grants, possibly repeating a skill

        Returns:
            The applied grants, in request order
        """
        skills = await self.skill_catalog_repo.get_skills_by_ids(
            grant.skill_id for grant in grants
        )

        applied = []
        for grant in grants:
            skill = skills.get(grant.skill_id)
            if skill is None:
                record_skill_grant("skipped")
                self.logger.debug(
                    "Skipping grant for unknown skill",
                    skill_id=grant.skill_id,
                    job_experience_id=job_experience_id,
                )
                continue

            try:
                result = await self._apply_one(
                    user_id, job_experience_id, grant, skill.max_level
                )
                await self.transaction_service.commit()
            except Exception as e:
                await self.transaction_service.rollback()
                self.logger.error(
                    "Failed to apply skill grant",
                    user_id=user_id,
                    job_experience_id=job_experience_id,
                    skill_id=grant.skill_id,
                    applied_so_far=len(applied),
                    error=str(e),
                )
                raise

            result.skill_name = skill.name
            record_skill_grant("created" if result.newly_unlocked else "updated")
            applied.append(result)

        self.logger.info(
            "Skill grants applied",
            user_id=user_id,
            job_experience_id=job_experience_id,
            requested=len(grants),
            applied=len(applied),
        )
        return applied

    async def _apply_one(
        self, user_id: int, job_experience_id: int, grant: SkillGrant, max_level: int
    ) -> AppliedGrant:
        existing = await self.user_skill_repo.get(user_id, grant.skill_id)

        if existing is None:
            stored = await self.user_skill_repo.create(
                UserSkill.from_grant(user_id, grant, max_level)
            )
        else:
            existing.apply_grant(grant, max_level)
            stored = await self.user_skill_repo.update(existing)

        level_granted = grant.clamped_level(max_level)
        await self.skill_unlock_repo.create(
            SkillUnlock(
                job_experience_id=job_experience_id,
                skill_id=grant.skill_id,
                level_granted=level_granted,
                experience_points_granted=grant.experience_points,
            )
        )

        return AppliedGrant(
            skill_id=grant.skill_id,
            level_granted=level_granted,
            experience_points_granted=grant.experience_points,
            level=stored.level,
            experience_points=stored.experience_points,
            newly_unlocked=existing is None,
        )
