"""
Job Experience SQLAlchemy model.
"""

from sqlalchemy import Column, Date, Integer, String, Text
from sqlalchemy.orm import relationship

from .base import BaseModel


class JobExperienceModel(BaseModel):
    """Job Experience database model."""

    __tablename__ = "job_experiences"

    user_id = Column(Integer, nullable=False, index=True)
    company = Column(String(255), nullable=False)
    position = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    start_date = Column(Date, nullable=True, index=True)
    end_date = Column(Date, nullable=True)  # NULL = ongoing
    skills_gained = Column(Text, nullable=True)  # free text, not a structured link

    # Relationships
    skill_unlocks = relationship(
        "SkillUnlockModel",
        back_populates="job_experience",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<JobExperience(id={self.id}, company={self.company}, position={self.position})>"
