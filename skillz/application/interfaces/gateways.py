"""
Gateway interface used by the resume comparison engine.

Mirrors the request/response verbs the comparison view issues against the
service, so the engine can run in-process or against a remote API.
"""

from abc import ABC, abstractmethod
from typing import List

from skillz.domain.entities.job_experience import JobExperience
from skillz.domain.entities.resume import Resume, ResumeSkillView


class CareerGatewayInterface(ABC):
    """Career API gateway interface."""

    @abstractmethod
    async def get_resume(self, resume_id: int) -> Resume:
        """Fetch one resume. Raises NotFoundError."""
        pass

    @abstractmethod
    async def get_resume_skills(self, resume_id: int) -> List[ResumeSkillView]:
        """Fetch the live skill view of one resume."""
        pass

    @abstractmethod
    async def list_job_experiences(self) -> List[JobExperience]:
        """Fetch the caller's job experiences."""
        pass

    @abstractmethod
    async def add_skill_to_resume(self, resume_id: int, skill_id: int) -> None:
        """Raises NotFoundError or ConflictError."""
        pass

    @abstractmethod
    async def remove_skill_from_resume(self, resume_id: int, skill_id: int) -> None:
        """Raises NotFoundError."""
        pass

    @abstractmethod
    async def create_job_experience(self, job_experience: JobExperience) -> JobExperience:
        """Create a new job experience for the caller."""
        pass

    @abstractmethod
    async def delete_job_experience(self, job_experience_id: int) -> None:
        """Raises NotFoundError."""
        pass
