"""
Skill SQLAlchemy model.
"""

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from skillz.domain.value_objects.skill_type import SkillType

from .base import BaseModel


class SkillModel(BaseModel):
    """Skill database model."""

    __tablename__ = "skills"

    category_id = Column(
        Integer,
        ForeignKey("skill_categories.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    name = Column(String(100), nullable=False, unique=True, index=True)
    description = Column(Text, nullable=True)
    skill_type = Column(
        String(10), nullable=False, default=SkillType.HARD.value, index=True
    )
    max_level = Column(Integer, nullable=False, default=10)
    icon = Column(String(20), nullable=True)

    # Relationships
    category = relationship("SkillCategoryModel", back_populates="skills")

    __table_args__ = (
        CheckConstraint("max_level >= 1", name="ck_skills_max_level_positive"),
        CheckConstraint(
            "skill_type IN ('hard', 'soft')", name="ck_skills_skill_type"
        ),
    )

    def __repr__(self) -> str:
        return f"<Skill(id={self.id}, name={self.name}, type={self.skill_type})>"
