"""Skill catalog repository implementation."""

from typing import Dict, Iterable, List, Optional

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from skillz.application.interfaces.repositories import SkillCatalogRepositoryInterface
from skillz.domain.entities.skill import Skill, SkillCategory, SkillTreeEntry
from skillz.infrastructure.database.models.skill import SkillModel
from skillz.infrastructure.database.models.skill_category import SkillCategoryModel
from skillz.infrastructure.database.models.skill_tree_node import SkillTreeNodeModel
from skillz.infrastructure.database.models.user_skill import UserSkillModel


class SkillCatalogRepository(SkillCatalogRepositoryInterface):
    """Skill catalog repository implementation."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_categories(self) -> List[SkillCategory]:
        """List all skill categories ordered by name."""
        stmt = select(SkillCategoryModel).order_by(SkillCategoryModel.name)
        result = await self.db.execute(stmt)

        return [
            SkillCategory(
                id=model.id,
                name=model.name,
                description=model.description,
                color=model.color,
                icon=model.icon,
            )
            for model in result.scalars().all()
        ]

    async def list_skills(
        self, category_id: Optional[int] = None, skill_type: Optional[str] = None
    ) -> List[Skill]:
        """List skills, optionally filtered by category and type."""
        stmt = self._skill_query()
        if category_id is not None:
            stmt = stmt.where(SkillModel.category_id == category_id)
        if skill_type:
            stmt = stmt.where(SkillModel.skill_type == skill_type)
        stmt = stmt.order_by(SkillModel.name)

        result = await self.db.execute(stmt)
        return [
            self._skill_to_entity(model, category_name, category_color)
            for model, category_name, category_color in result.all()
        ]

    async def get_skill(self, skill_id: int) -> Optional[Skill]:
        """Get a skill by ID."""
        stmt = self._skill_query().where(SkillModel.id == skill_id)
        result = await self.db.execute(stmt)
        row = result.first()

        return self._skill_to_entity(*row) if row else None

    async def get_skills_by_ids(self, skill_ids: Iterable[int]) -> Dict[int, Skill]:
        """Get the subset of the given IDs that exist, keyed by ID."""
        ids = set(skill_ids)
        if not ids:
            return {}

        stmt = self._skill_query().where(SkillModel.id.in_(ids))
        result = await self.db.execute(stmt)

        return {
            model.id: self._skill_to_entity(model, category_name, category_color)
            for model, category_name, category_color in result.all()
        }

    async def list_tree(self) -> List[SkillTreeEntry]:
        """List tree nodes joined with their skills."""
        result = await self.db.execute(self._tree_query())

        return [
            self._tree_row_to_entry(node, skill, category_name, category_color)
            for node, skill, category_name, category_color in result.all()
        ]

    async def list_user_tree(self, user_id: int) -> List[SkillTreeEntry]:
        """List tree nodes with the user's level/XP overlay."""
        stmt = (
            self._tree_query()
            .add_columns(UserSkillModel)
            .outerjoin(
                UserSkillModel,
                and_(
                    UserSkillModel.skill_id == SkillModel.id,
                    UserSkillModel.user_id == user_id,
                ),
            )
        )
        result = await self.db.execute(stmt)

        return [
            self._tree_row_to_entry(
                node, skill, category_name, category_color, user_skill
            )
            for node, skill, category_name, category_color, user_skill in result.all()
        ]

    def _skill_query(self):
        return select(
            SkillModel, SkillCategoryModel.name, SkillCategoryModel.color
        ).outerjoin(SkillCategoryModel, SkillModel.category_id == SkillCategoryModel.id)

    def _tree_query(self):
        return (
            select(
                SkillTreeNodeModel,
                SkillModel,
                SkillCategoryModel.name,
                SkillCategoryModel.color,
            )
            .join(SkillModel, SkillTreeNodeModel.skill_id == SkillModel.id)
            .outerjoin(
                SkillCategoryModel, SkillModel.category_id == SkillCategoryModel.id
            )
            .order_by(
                SkillTreeNodeModel.tier,
                SkillTreeNodeModel.position_y,
                SkillTreeNodeModel.position_x,
            )
        )

    def _skill_to_entity(
        self,
        model: SkillModel,
        category_name: Optional[str] = None,
        category_color: Optional[str] = None,
    ) -> Skill:
        """Convert SQLAlchemy model to domain entity."""
        return Skill(
            id=model.id,
            name=model.name,
            description=model.description,
            skill_type=model.skill_type,
            max_level=model.max_level,
            icon=model.icon,
            category_id=model.category_id,
            category_name=category_name,
            category_color=category_color,
        )

    def _tree_row_to_entry(
        self,
        node: SkillTreeNodeModel,
        skill: SkillModel,
        category_name: Optional[str],
        category_color: Optional[str],
        user_skill: Optional[UserSkillModel] = None,
    ) -> SkillTreeEntry:
        return SkillTreeEntry(
            node_id=node.id,
            skill_id=node.skill_id,
            parent_skill_id=node.parent_skill_id,
            position_x=node.position_x,
            position_y=node.position_y,
            tier=node.tier,
            unlock_requirement=node.unlock_requirement,
            skill_name=skill.name,
            description=skill.description,
            skill_type=skill.skill_type,
            max_level=skill.max_level,
            icon=skill.icon,
            category_name=category_name,
            category_color=category_color,
            user_level=user_skill.level if user_skill else 0,
            user_experience=user_skill.experience_points if user_skill else 0,
            is_unlocked=bool(user_skill and user_skill.unlocked_at is not None),
        )
