"""
Skill grant value object.
"""

from dataclasses import dataclass

from skillz.domain.exceptions.validation_error import OutOfRangeError


@dataclass(frozen=True)
class SkillGrant:
    """A request to grant a level and experience for one skill."""

    skill_id: int
    level: int = 1
    experience_points: int = 100

    def __post_init__(self):
        if self.level < 0:
            raise OutOfRangeError("level", self.level, minimum=0)
        if self.experience_points < 0:
            raise OutOfRangeError("experience_points", self.experience_points, minimum=0)

    def clamped_level(self, max_level: int) -> int:
        """Level capped at the catalog maximum for the skill."""
        return min(self.level, max_level)
