"""User skill ledger repository implementation."""

from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from skillz.application.interfaces.repositories import UserSkillRepositoryInterface
from skillz.domain.entities.user_skill import UserSkill
from skillz.infrastructure.database.models.skill import SkillModel
from skillz.infrastructure.database.models.skill_category import SkillCategoryModel
from skillz.infrastructure.database.models.user_skill import UserSkillModel


class UserSkillRepository(UserSkillRepositoryInterface):
    """User skill ledger repository implementation."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, user_id: int, skill_id: int) -> Optional[UserSkill]:
        """Get the ledger row for (user, skill)."""
        model = await self._get_model(user_id, skill_id)
        return self._model_to_entity(model) if model else None

    async def list_for_user(self, user_id: int) -> List[UserSkill]:
        """List a user's skills joined with catalog metadata."""
        stmt = (
            select(
                UserSkillModel,
                SkillModel,
                SkillCategoryModel.name,
                SkillCategoryModel.color,
            )
            .join(SkillModel, UserSkillModel.skill_id == SkillModel.id)
            .outerjoin(
                SkillCategoryModel, SkillModel.category_id == SkillCategoryModel.id
            )
            .where(UserSkillModel.user_id == user_id)
            .order_by(UserSkillModel.last_updated.desc(), UserSkillModel.id.desc())
        )
        result = await self.db.execute(stmt)

        user_skills = []
        for model, skill, category_name, category_color in result.all():
            user_skill = self._model_to_entity(model)
            user_skill.skill_name = skill.name
            user_skill.description = skill.description
            user_skill.skill_type = skill.skill_type
            user_skill.max_level = skill.max_level
            user_skill.icon = skill.icon
            user_skill.category_name = category_name
            user_skill.category_color = category_color
            user_skills.append(user_skill)

        return user_skills

    async def create(self, user_skill: UserSkill) -> UserSkill:
        """Insert a ledger row."""
        model = UserSkillModel(
            user_id=user_skill.user_id,
            skill_id=user_skill.skill_id,
            level=user_skill.level,
            experience_points=user_skill.experience_points,
            unlocked_at=user_skill.unlocked_at,
            last_updated=user_skill.last_updated,
        )

        self.db.add(model)
        # Use flush instead of commit so the caller owns the transaction
        await self.db.flush()
        await self.db.refresh(model)

        return self._model_to_entity(model)

    async def update(self, user_skill: UserSkill) -> UserSkill:
        """Persist level/XP changes of an existing row."""
        model = await self._get_model(user_skill.user_id, user_skill.skill_id)
        if not model:
            raise ValueError(
                f"User skill ({user_skill.user_id}, {user_skill.skill_id}) not found"
            )

        model.level = user_skill.level
        model.experience_points = user_skill.experience_points
        model.unlocked_at = user_skill.unlocked_at
        model.last_updated = user_skill.last_updated

        await self.db.flush()
        await self.db.refresh(model)

        return self._model_to_entity(model)

    async def delete(self, user_id: int, skill_id: int) -> bool:
        """Delete a ledger row. Resume associations are left untouched."""
        result = await self.db.execute(
            delete(UserSkillModel).where(
                UserSkillModel.user_id == user_id, UserSkillModel.skill_id == skill_id
            )
        )
        return result.rowcount > 0

    async def _get_model(self, user_id: int, skill_id: int) -> Optional[UserSkillModel]:
        stmt = select(UserSkillModel).where(
            UserSkillModel.user_id == user_id, UserSkillModel.skill_id == skill_id
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    def _model_to_entity(self, model: UserSkillModel) -> UserSkill:
        """Convert SQLAlchemy model to domain entity."""
        return UserSkill(
            id=model.id,
            user_id=model.user_id,
            skill_id=model.skill_id,
            level=model.level,
            experience_points=model.experience_points,
            unlocked_at=model.unlocked_at,
            last_updated=model.last_updated,
        )
