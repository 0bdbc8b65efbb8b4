"""Job experience and unlock provenance entities."""

from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Optional


@dataclass
class JobExperience:
    """A past or ongoing job held by a user."""

    user_id: int
    company: str
    position: str
    description: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    skills_gained: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate job experience data."""
        if not self.company or not self.company.strip():
            raise ValueError("Company is required")
        if not self.position or not self.position.strip():
            raise ValueError("Position is required")
        self.company = self.company.strip()
        self.position = self.position.strip()
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("End date cannot be before start date")

        if not self.created_at:
            self.created_at = datetime.now(timezone.utc)
        if not self.updated_at:
            self.updated_at = datetime.now(timezone.utc)

    @property
    def is_ongoing(self) -> bool:
        return self.end_date is None

    def copy_for(self, user_id: int) -> "JobExperience":
        """Deep copy into a new, unsaved record."""
        return JobExperience(
            user_id=user_id,
            company=self.company,
            position=self.position,
            description=self.description,
            start_date=self.start_date,
            end_date=self.end_date,
            skills_gained=self.skills_gained,
        )

    def to_payload(self) -> dict:
        """Fields accepted by the create-job-experience endpoint."""
        return {
            "company": self.company,
            "position": self.position,
            "description": self.description,
            "start_date": self.start_date.isoformat() if self.start_date else None,
            "end_date": self.end_date.isoformat() if self.end_date else None,
            "skills_gained": self.skills_gained,
        }


@dataclass
class SkillUnlock:
    """Append-only record of what one grant from one job gave."""

    job_experience_id: int
    skill_id: int
    level_granted: int
    experience_points_granted: int
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    skill_name: Optional[str] = None
