"""
Resume Skill SQLAlchemy model.
"""

from sqlalchemy import Column, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship

from .base import BaseModel


class ResumeSkillModel(BaseModel):
    """Resume Skill (showcase association) database model.

    References the catalog skill, not the ledger row, so removing a user skill
    leaves the association in place; reads drop it through the ledger join.
    """

    __tablename__ = "resume_skills"

    resume_id = Column(
        Integer, ForeignKey("resumes.id", ondelete="CASCADE"), nullable=False, index=True
    )
    skill_id = Column(
        Integer, ForeignKey("skills.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # Relationships
    resume = relationship("ResumeModel", back_populates="skills")
    skill = relationship("SkillModel")

    __table_args__ = (
        UniqueConstraint("resume_id", "skill_id", name="uq_resume_skills_resume_skill"),
    )

    def __repr__(self) -> str:
        return f"<ResumeSkill(resume_id={self.resume_id}, skill_id={self.skill_id})>"
