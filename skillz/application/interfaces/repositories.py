"""
Repository interfaces for dependency inversion.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

from skillz.domain.entities.job_experience import JobExperience, SkillUnlock
from skillz.domain.entities.resume import Resume, ResumeSkillView
from skillz.domain.entities.skill import Skill, SkillCategory, SkillTreeEntry
from skillz.domain.entities.user_skill import UserSkill


class SkillCatalogRepositoryInterface(ABC):
    """Read access to skills, categories and tree topology."""

    @abstractmethod
    async def list_categories(self) -> List[SkillCategory]:
        """List all skill categories ordered by name."""
        pass

    @abstractmethod
    async def list_skills(
        self, category_id: Optional[int] = None, skill_type: Optional[str] = None
    ) -> List[Skill]:
        """List skills, optionally filtered by category and type."""
        pass

    @abstractmethod
    async def get_skill(self, skill_id: int) -> Optional[Skill]:
        """Get a skill by ID."""
        pass

    @abstractmethod
    async def get_skills_by_ids(self, skill_ids: Iterable[int]) -> Dict[int, Skill]:
        """Get the subset of the given IDs that exist, keyed by ID."""
        pass

    @abstractmethod
    async def list_tree(self) -> List[SkillTreeEntry]:
        """List tree nodes joined with their skills."""
        pass

    @abstractmethod
    async def list_user_tree(self, user_id: int) -> List[SkillTreeEntry]:
        """List tree nodes with the user's level/XP overlay (0 when not owned)."""
        pass


class UserSkillRepositoryInterface(ABC):
    """User skill ledger repository interface."""

    @abstractmethod
    async def get(self, user_id: int, skill_id: int) -> Optional[UserSkill]:
        """Get the ledger row for (user, skill)."""
        pass

    @abstractmethod
    async def list_for_user(self, user_id: int) -> List[UserSkill]:
        """List a user's skills joined with catalog metadata."""
        pass

    @abstractmethod
    async def create(self, user_skill: UserSkill) -> UserSkill:
        """Insert a ledger row."""
        pass

    @abstractmethod
    async def update(self, user_skill: UserSkill) -> UserSkill:
        """Persist level/XP changes of an existing row."""
        pass

    @abstractmethod
    async def delete(self, user_id: int, skill_id: int) -> bool:
        """Delete a ledger row. Resume associations are left untouched."""
        pass


class JobExperienceRepositoryInterface(ABC):
    """Job experience repository interface."""

    @abstractmethod
    async def create(self, job_experience: JobExperience) -> JobExperience:
        """Create a new job experience."""
        pass

    @abstractmethod
    async def get_for_user(
        self, job_experience_id: int, user_id: int
    ) -> Optional[JobExperience]:
        """Get a job experience only if it belongs to the user."""
        pass

    @abstractmethod
    async def list_for_user(self, user_id: int) -> List[JobExperience]:
        """List a user's job experiences, most recent start first."""
        pass

    @abstractmethod
    async def delete(self, job_experience_id: int) -> bool:
        """Delete a job experience and its unlock provenance."""
        pass


class SkillUnlockRepositoryInterface(ABC):
    """Unlock provenance repository interface. Insert and read only."""

    @abstractmethod
    async def create(self, skill_unlock: SkillUnlock) -> SkillUnlock:
        """Append a provenance record."""
        pass

    @abstractmethod
    async def list_for_job(self, job_experience_id: int) -> List[SkillUnlock]:
        """List provenance records produced by one job experience."""
        pass

    @abstractmethod
    async def list_for_user_skill(self, user_id: int, skill_id: int) -> List[SkillUnlock]:
        """List provenance records for one skill across the user's jobs."""
        pass


class ResumeRepositoryInterface(ABC):
    """Resume repository interface."""

    @abstractmethod
    async def create(self, resume: Resume) -> Resume:
        """Create a new resume."""
        pass

    @abstractmethod
    async def get_for_user(self, resume_id: int, user_id: int) -> Optional[Resume]:
        """Get a resume only if it belongs to the user."""
        pass

    @abstractmethod
    async def list_for_user(self, user_id: int) -> List[Resume]:
        """List a user's resumes, most recently updated first."""
        pass

    @abstractmethod
    async def update(self, resume: Resume) -> Resume:
        """Update an existing resume."""
        pass

    @abstractmethod
    async def delete(self, resume_id: int) -> bool:
        """Delete a resume and its skill associations."""
        pass


class ResumeSkillRepositoryInterface(ABC):
    """Resume-skill association repository interface."""

    @abstractmethod
    async def exists(self, resume_id: int, skill_id: int) -> bool:
        """Check whether the association exists."""
        pass

    @abstractmethod
    async def add(self, resume_id: int, skill_id: int) -> None:
        """Insert the association.

        Raises:
            DuplicateResumeSkillError: if the pair already exists
        """
        pass

    @abstractmethod
    async def remove(self, resume_id: int, skill_id: int) -> bool:
        """Delete the association only."""
        pass

    @abstractmethod
    async def list_view(self, resume_id: int, user_id: int) -> List[ResumeSkillView]:
        """Associated skills joined with the owner's current ledger rows."""
        pass
