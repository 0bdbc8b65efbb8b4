"""
Resume SQLAlchemy model.
"""

from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship

from .base import BaseModel


class ResumeModel(BaseModel):
    """Resume database model."""

    __tablename__ = "resumes"

    user_id = Column(Integer, nullable=False, index=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False, default="")

    # Relationships
    skills = relationship(
        "ResumeSkillModel",
        back_populates="resume",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Resume(id={self.id}, title={self.title})>"
