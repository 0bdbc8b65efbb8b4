"""
User Skill SQLAlchemy model.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from .base import BaseModel, utcnow


class UserSkillModel(BaseModel):
    """User Skill (ledger) database model."""

    __tablename__ = "user_skills"

    user_id = Column(Integer, nullable=False, index=True)
    skill_id = Column(
        Integer, ForeignKey("skills.id", ondelete="CASCADE"), nullable=False, index=True
    )
    level = Column(Integer, nullable=False, default=0)
    experience_points = Column(Integer, nullable=False, default=0)
    unlocked_at = Column(DateTime(timezone=True), nullable=True)
    last_updated = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    # Relationships
    skill = relationship("SkillModel")

    __table_args__ = (
        UniqueConstraint("user_id", "skill_id", name="uq_user_skills_user_skill"),
        CheckConstraint("level >= 0", name="ck_user_skills_level_non_negative"),
        CheckConstraint(
            "experience_points >= 0", name="ck_user_skills_experience_non_negative"
        ),
    )

    def __repr__(self) -> str:
        return f"<UserSkill(user_id={self.user_id}, skill_id={self.skill_id}, level={self.level})>"
