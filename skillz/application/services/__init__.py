"""
Application services package.
"""

from .resume_comparison import (
    ComparisonSideState,
    CopyOutcome,
    DropStatus,
    ResumeComparisonEngine,
)
from .resume_content import format_skills_section
from .unlock_engine import AppliedGrant, SkillUnlockEngine

__all__ = [
    "AppliedGrant",
    "ComparisonSideState",
    "CopyOutcome",
    "DropStatus",
    "ResumeComparisonEngine",
    "SkillUnlockEngine",
    "format_skills_section",
]
