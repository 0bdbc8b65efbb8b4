"""
Conflict-related domain exceptions.
"""


class ConflictError(Exception):
    """Base exception for duplicate or concurrent-state conflicts."""

    pass


class DuplicateResumeSkillError(ConflictError):
    """Raised when a skill is already associated with a resume."""

    def __init__(self, resume_id: int, skill_id: int):
        self.resume_id = resume_id
        self.skill_id = skill_id
        super().__init__("Skill already in resume")


class MergeInProgressError(ConflictError):
    """Raised when a batch copy is started while another one is outstanding."""

    def __init__(self):
        super().__init__("A copy operation is already in progress")
