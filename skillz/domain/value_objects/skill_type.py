"""
Skill type value object.
"""

from enum import Enum


class SkillType(str, Enum):
    """Skill type enumeration."""

    HARD = "hard"
    SOFT = "soft"

    @property
    def label(self) -> str:
        """Human readable label used in resume content."""
        return "Hard" if self == self.HARD else "Soft"
