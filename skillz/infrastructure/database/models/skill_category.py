"""
Skill Category SQLAlchemy model.
"""

from sqlalchemy import Column, String, Text
from sqlalchemy.orm import relationship

from .base import BaseModel


class SkillCategoryModel(BaseModel):
    """Skill Category database model."""

    __tablename__ = "skill_categories"

    name = Column(String(100), nullable=False, unique=True, index=True)
    description = Column(Text, nullable=True)
    color = Column(String(20), nullable=True)
    icon = Column(String(20), nullable=True)

    # Relationships
    skills = relationship("SkillModel", back_populates="category")

    def __repr__(self) -> str:
        return f"<SkillCategory(id={self.id}, name={self.name})>"
