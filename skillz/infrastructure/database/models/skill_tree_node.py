"""
Skill Tree Node SQLAlchemy model.
"""

from sqlalchemy import Column, ForeignKey, Index, Integer, Text
from sqlalchemy.orm import relationship

from .base import BaseModel


class SkillTreeNodeModel(BaseModel):
    """Skill Tree Node database model."""

    __tablename__ = "skill_tree_nodes"

    skill_id = Column(
        Integer,
        ForeignKey("skills.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    parent_skill_id = Column(
        Integer, ForeignKey("skills.id"), nullable=True, index=True
    )  # Forest: several roots allowed
    position_x = Column(Integer, nullable=False, default=0)
    position_y = Column(Integer, nullable=False, default=0)
    tier = Column(Integer, nullable=False, default=1)
    unlock_requirement = Column(Text, nullable=True)

    # Relationships
    skill = relationship("SkillModel", foreign_keys=[skill_id])
    parent_skill = relationship("SkillModel", foreign_keys=[parent_skill_id])

    __table_args__ = (
        Index("idx_skill_tree_layout", "tier", "position_y", "position_x"),
    )

    def __repr__(self) -> str:
        return f"<SkillTreeNode(skill_id={self.skill_id}, parent={self.parent_skill_id}, tier={self.tier})>"
