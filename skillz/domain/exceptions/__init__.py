"""
Domain exceptions package.
"""

from .comparison_error import (
    ComparisonError,
    ComparisonNotLoadedError,
    ComparisonRefreshError,
    DragPayloadError,
)
from .conflict_error import (
    ConflictError,
    DuplicateResumeSkillError,
    MergeInProgressError,
)
from .not_found_error import (
    JobExperienceNotFoundError,
    NotFoundError,
    ResumeNotFoundError,
    ResumeSkillNotFoundError,
    SkillNotFoundError,
    SkillNotUnlockedError,
)
from .validation_error import (
    InvalidFormatError,
    OutOfRangeError,
    RequiredFieldError,
    ValidationError,
)

__all__ = [
    "ComparisonError",
    "ComparisonNotLoadedError",
    "ComparisonRefreshError",
    "ConflictError",
    "DragPayloadError",
    "DuplicateResumeSkillError",
    "InvalidFormatError",
    "JobExperienceNotFoundError",
    "MergeInProgressError",
    "NotFoundError",
    "OutOfRangeError",
    "RequiredFieldError",
    "ResumeNotFoundError",
    "ResumeSkillNotFoundError",
    "SkillNotFoundError",
    "SkillNotUnlockedError",
    "ValidationError",
]
