"""Resume and resume-skill repository implementations."""

from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from skillz.application.interfaces.repositories import (
    ResumeRepositoryInterface,
    ResumeSkillRepositoryInterface,
)
from skillz.domain.entities.resume import Resume, ResumeSkillView
from skillz.domain.exceptions.conflict_error import DuplicateResumeSkillError
from skillz.infrastructure.database.models.resume import ResumeModel
from skillz.infrastructure.database.models.resume_skill import ResumeSkillModel
from skillz.infrastructure.database.models.skill import SkillModel
from skillz.infrastructure.database.models.skill_category import SkillCategoryModel
from skillz.infrastructure.database.models.user_skill import UserSkillModel


class ResumeRepository(ResumeRepositoryInterface):
    """Resume repository implementation."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, resume: Resume) -> Resume:
        """Create a new resume."""
        model = ResumeModel(
            user_id=resume.user_id,
            title=resume.title,
            content=resume.content,
            created_at=resume.created_at,
            updated_at=resume.updated_at,
        )

        self.db.add(model)
        await self.db.flush()
        await self.db.refresh(model)

        return self._model_to_entity(model)

    async def get_for_user(self, resume_id: int, user_id: int) -> Optional[Resume]:
        """Get a resume only if it belongs to the user."""
        model = await self._get_model(resume_id, user_id)
        return self._model_to_entity(model) if model else None

    async def list_for_user(self, user_id: int) -> List[Resume]:
        """List a user's resumes, most recently updated first."""
        stmt = (
            select(ResumeModel)
            .where(ResumeModel.user_id == user_id)
            .order_by(ResumeModel.updated_at.desc(), ResumeModel.id.desc())
        )
        result = await self.db.execute(stmt)

        return [self._model_to_entity(model) for model in result.scalars().all()]

    async def update(self, resume: Resume) -> Resume:
        """Update an existing resume."""
        model = await self._get_model(resume.id, resume.user_id)
        if not model:
            raise ValueError(f"Resume {resume.id} not found")

        model.title = resume.title
        model.content = resume.content
        model.updated_at = resume.updated_at

        await self.db.flush()
        await self.db.refresh(model)

        return self._model_to_entity(model)

    async def delete(self, resume_id: int) -> bool:
        """Delete a resume and its skill associations."""
        await self.db.execute(
            delete(ResumeSkillModel).where(ResumeSkillModel.resume_id == resume_id)
        )
        result = await self.db.execute(
            delete(ResumeModel).where(ResumeModel.id == resume_id)
        )
        return result.rowcount > 0

    async def _get_model(self, resume_id: int, user_id: int) -> Optional[ResumeModel]:
        stmt = select(ResumeModel).where(
            ResumeModel.id == resume_id, ResumeModel.user_id == user_id
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    def _model_to_entity(self, model: ResumeModel) -> Resume:
        """Convert SQLAlchemy model to domain entity."""
        return Resume(
            id=model.id,
            user_id=model.user_id,
            title=model.title,
            content=model.content or "",
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


class ResumeSkillRepository(ResumeSkillRepositoryInterface):
    """Resume-skill association repository implementation."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def exists(self, resume_id: int, skill_id: int) -> bool:
        """Check whether the association exists."""
        stmt = select(ResumeSkillModel.id).where(
            ResumeSkillModel.resume_id == resume_id,
            ResumeSkillModel.skill_id == skill_id,
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def add(self, resume_id: int, skill_id: int) -> None:
        """Insert the association."""
        self.db.add(ResumeSkillModel(resume_id=resume_id, skill_id=skill_id))
        try:
            await self.db.flush()
        except IntegrityError as e:
            await self.db.rollback()
            raise DuplicateResumeSkillError(resume_id, skill_id) from e

    async def remove(self, resume_id: int, skill_id: int) -> bool:
        """Delete the association only."""
        result = await self.db.execute(
            delete(ResumeSkillModel).where(
                ResumeSkillModel.resume_id == resume_id,
                ResumeSkillModel.skill_id == skill_id,
            )
        )
        return result.rowcount > 0

    async def list_view(self, resume_id: int, user_id: int) -> List[ResumeSkillView]:
        """Associated skills joined with the owner's current ledger rows.

        The inner join on user_skills drops associations whose ledger row was
        deleted.
        """
        stmt = (
            select(
                ResumeSkillModel.skill_id,
                UserSkillModel.level,
                UserSkillModel.experience_points,
                SkillModel,
                SkillCategoryModel.name,
                SkillCategoryModel.color,
            )
            .join(
                UserSkillModel,
                (UserSkillModel.skill_id == ResumeSkillModel.skill_id)
                & (UserSkillModel.user_id == user_id),
            )
            .join(SkillModel, SkillModel.id == ResumeSkillModel.skill_id)
            .outerjoin(
                SkillCategoryModel, SkillModel.category_id == SkillCategoryModel.id
            )
            .where(ResumeSkillModel.resume_id == resume_id)
            .order_by(SkillModel.name)
        )
        result = await self.db.execute(stmt)

        return [
            ResumeSkillView(
                skill_id=skill_id,
                user_level=level,
                user_experience=experience_points,
                skill_name=skill.name,
                description=skill.description,
                skill_type=skill.skill_type,
                max_level=skill.max_level,
                icon=skill.icon,
                category_name=category_name,
                category_color=category_color,
            )
            for (
                skill_id,
                level,
                experience_points,
                skill,
                category_name,
                category_color,
            ) in result.all()
        ]
