"""
Skill Unlock SQLAlchemy model.
"""

from sqlalchemy import Column, ForeignKey, Integer
from sqlalchemy.orm import relationship

from .base import BaseModel


class SkillUnlockModel(BaseModel):
    """Skill Unlock (provenance) database model. Insert-only."""

    __tablename__ = "skill_unlocks"

    job_experience_id = Column(
        Integer,
        ForeignKey("job_experiences.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    skill_id = Column(
        Integer, ForeignKey("skills.id", ondelete="CASCADE"), nullable=False, index=True
    )
    level_granted = Column(Integer, nullable=False)
    experience_points_granted = Column(Integer, nullable=False)

    # Relationships
    job_experience = relationship("JobExperienceModel", back_populates="skill_unlocks")
    skill = relationship("SkillModel")

    def __repr__(self) -> str:
        return f"<SkillUnlock(job_experience_id={self.job_experience_id}, skill_id={self.skill_id}, level={self.level_granted})>"
