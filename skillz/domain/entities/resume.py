"""Resume domain entities."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional


@dataclass
class Resume:
    """Resume document owned by a user."""

    user_id: int
    title: str
    content: str = ""
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        if not self.title or not self.title.strip():
            raise ValueError("Resume title is required")
        self.title = self.title.strip()
        if self.content is None:
            self.content = ""

        if not self.created_at:
            self.created_at = datetime.now(timezone.utc)
        if not self.updated_at:
            self.updated_at = datetime.now(timezone.utc)

    def update(self, title: Optional[str] = None, content: Optional[str] = None) -> None:
        if title is not None:
            if not title.strip():
                raise ValueError("Resume title is required")
            self.title = title.strip()
        if content is not None:
            self.content = content
        self.updated_at = datetime.now(timezone.utc)

    def append_section(self, section: str) -> None:
        """Append a block of text separated by a blank line."""
        self.content = self.content + ("\n\n" if self.content else "") + section
        self.updated_at = datetime.now(timezone.utc)


@dataclass
class ResumeSkillView:
    """A skill showcased on a resume, joined with the owner's live ledger row."""

    skill_id: int
    user_level: int
    user_experience: int
    skill_name: str
    description: Optional[str] = None
    skill_type: Optional[str] = None
    max_level: Optional[int] = None
    icon: Optional[str] = None
    category_name: Optional[str] = None
    category_color: Optional[str] = None
