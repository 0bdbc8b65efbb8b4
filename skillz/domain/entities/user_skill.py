"""User skill ledger entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from skillz.domain.exceptions.validation_error import ValidationError
from skillz.domain.value_objects.skill_grant import SkillGrant


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class UserSkill:
    """Per-user progression state for one skill.

    ``level`` is always stored within [0, max_level] and never decreases
    through grants; ``experience_points`` only accumulates.
    """

    user_id: int
    skill_id: int
    level: int = 0
    experience_points: int = 0
    unlocked_at: Optional[datetime] = None
    last_updated: Optional[datetime] = None
    id: Optional[int] = None

    # Catalog fields joined in by read queries
    skill_name: Optional[str] = field(default=None, compare=False)
    description: Optional[str] = field(default=None, compare=False)
    skill_type: Optional[str] = field(default=None, compare=False)
    max_level: Optional[int] = field(default=None, compare=False)
    icon: Optional[str] = field(default=None, compare=False)
    category_name: Optional[str] = field(default=None, compare=False)
    category_color: Optional[str] = field(default=None, compare=False)

    @property
    def is_unlocked(self) -> bool:
        return self.unlocked_at is not None

    @classmethod
    def from_grant(
        cls, user_id: int, grant: SkillGrant, max_level: int
    ) -> "UserSkill":
        """Create the first ledger row for a skill from a job grant."""
        now = _utcnow()
        return cls(
            user_id=user_id,
            skill_id=grant.skill_id,
            level=grant.clamped_level(max_level),
            experience_points=grant.experience_points,
            unlocked_at=now,
            last_updated=now,
        )

    def apply_grant(self, grant: SkillGrant, max_level: int) -> None:
        """Merge a grant into an existing row: level max-wins, XP adds."""
        self.level = min(max(self.level, grant.clamped_level(max_level)), max_level)
        self.experience_points += grant.experience_points
        if self.unlocked_at is None:
            self.unlocked_at = _utcnow()
        self.last_updated = _utcnow()

    def set_progress(
        self,
        max_level: int,
        level: Optional[int] = None,
        experience_points: Optional[int] = None,
    ) -> None:
        """Direct level/XP assignment outside of any job grant."""
        if experience_points is not None:
            if experience_points < self.experience_points:
                raise ValidationError(
                    f"Experience points cannot decrease "
                    f"(current {self.experience_points}, requested {experience_points})"
                )
            self.experience_points = experience_points
        if level is not None:
            self.level = max(0, min(level, max_level))
        if self.unlocked_at is None:
            self.unlocked_at = _utcnow()
        self.last_updated = _utcnow()
