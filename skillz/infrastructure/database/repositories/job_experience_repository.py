"""Job experience and unlock provenance repository implementations."""

from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from skillz.application.interfaces.repositories import (
    JobExperienceRepositoryInterface,
    SkillUnlockRepositoryInterface,
)
from skillz.config.logging import get_logger
from skillz.domain.entities.job_experience import JobExperience, SkillUnlock
from skillz.infrastructure.database.models.job_experience import JobExperienceModel
from skillz.infrastructure.database.models.skill import SkillModel
from skillz.infrastructure.database.models.skill_unlock import SkillUnlockModel

logger = get_logger(__name__)


class JobExperienceRepository(JobExperienceRepositoryInterface):
    """Job experience repository implementation."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, job_experience: JobExperience) -> JobExperience:
        """Create a new job experience."""
        model = JobExperienceModel(
            user_id=job_experience.user_id,
            company=job_experience.company,
            position=job_experience.position,
            description=job_experience.description,
            start_date=job_experience.start_date,
            end_date=job_experience.end_date,
            skills_gained=job_experience.skills_gained,
            created_at=job_experience.created_at,
            updated_at=job_experience.updated_at,
        )

        self.db.add(model)
        await self.db.flush()
        await self.db.refresh(model)

        return self._model_to_entity(model)

    async def get_for_user(
        self, job_experience_id: int, user_id: int
    ) -> Optional[JobExperience]:
        """Get a job experience only if it belongs to the user."""
        stmt = select(JobExperienceModel).where(
            JobExperienceModel.id == job_experience_id,
            JobExperienceModel.user_id == user_id,
        )
        result = await self.db.execute(stmt)
        model = result.scalar_one_or_none()

        return self._model_to_entity(model) if model else None

    async def list_for_user(self, user_id: int) -> List[JobExperience]:
        """List a user's job experiences, most recent start first."""
        stmt = (
            select(JobExperienceModel)
            .where(JobExperienceModel.user_id == user_id)
            .order_by(
                JobExperienceModel.start_date.desc().nulls_last(),
                JobExperienceModel.id.desc(),
            )
        )
        result = await self.db.execute(stmt)

        return [self._model_to_entity(model) for model in result.scalars().all()]

    async def delete(self, job_experience_id: int) -> bool:
        """Delete a job experience and its unlock provenance."""
        unlocks = await self.db.execute(
            delete(SkillUnlockModel).where(
                SkillUnlockModel.job_experience_id == job_experience_id
            )
        )
        result = await self.db.execute(
            delete(JobExperienceModel).where(JobExperienceModel.id == job_experience_id)
        )

        logger.debug(
            "Deleted job experience",
            job_experience_id=job_experience_id,
            provenance_rows=unlocks.rowcount,
        )
        return result.rowcount > 0

    def _model_to_entity(self, model: JobExperienceModel) -> JobExperience:
        """Convert SQLAlchemy model to domain entity."""
        return JobExperience(
            id=model.id,
            user_id=model.user_id,
            company=model.company,
            position=model.position,
            description=model.description,
            start_date=model.start_date,
            end_date=model.end_date,
            skills_gained=model.skills_gained,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


class SkillUnlockRepository(SkillUnlockRepositoryInterface):
    """Unlock provenance repository implementation."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, skill_unlock: SkillUnlock) -> SkillUnlock:
        """Append a provenance record."""
        model = SkillUnlockModel(
            job_experience_id=skill_unlock.job_experience_id,
            skill_id=skill_unlock.skill_id,
            level_granted=skill_unlock.level_granted,
            experience_points_granted=skill_unlock.experience_points_granted,
        )

        self.db.add(model)
        await self.db.flush()
        await self.db.refresh(model)

        return self._model_to_entity(model)

    async def list_for_job(self, job_experience_id: int) -> List[SkillUnlock]:
        """List provenance records produced by one job experience."""
        stmt = (
            select(SkillUnlockModel, SkillModel.name)
            .join(SkillModel, SkillUnlockModel.skill_id == SkillModel.id)
            .where(SkillUnlockModel.job_experience_id == job_experience_id)
            .order_by(SkillUnlockModel.id)
        )
        result = await self.db.execute(stmt)

        return [self._model_to_entity(model, name) for model, name in result.all()]

    async def list_for_user_skill(self, user_id: int, skill_id: int) -> List[SkillUnlock]:
        """List provenance records for one skill across the user's jobs."""
        stmt = (
            select(SkillUnlockModel, SkillModel.name)
            .join(SkillModel, SkillUnlockModel.skill_id == SkillModel.id)
            .join(
                JobExperienceModel,
                SkillUnlockModel.job_experience_id == JobExperienceModel.id,
            )
            .where(
                JobExperienceModel.user_id == user_id,
                SkillUnlockModel.skill_id == skill_id,
            )
            .order_by(SkillUnlockModel.id)
        )
        result = await self.db.execute(stmt)

        return [self._model_to_entity(model, name) for model, name in result.all()]

    def _model_to_entity(
        self, model: SkillUnlockModel, skill_name: Optional[str] = None
    ) -> SkillUnlock:
        """Convert SQLAlchemy model to domain entity."""
        return SkillUnlock(
            id=model.id,
            job_experience_id=model.job_experience_id,
            skill_id=model.skill_id,
            level_granted=model.level_granted,
            experience_points_granted=model.experience_points_granted,
            created_at=model.created_at,
            skill_name=skill_name,
        )
