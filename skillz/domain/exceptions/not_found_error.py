"""
Lookup-related domain exceptions.

Missing resources and resources owned by another user raise the same error
so callers cannot probe for existence.
"""


class NotFoundError(Exception):
    """Raised when a resource is missing or not owned by the caller."""

    def __init__(self, resource: str, message: str = None):
        self.resource = resource
        super().__init__(message or f"{resource} not found")


class JobExperienceNotFoundError(NotFoundError):
    def __init__(self, job_experience_id: int):
        self.job_experience_id = job_experience_id
        super().__init__("Job experience")


class ResumeNotFoundError(NotFoundError):
    def __init__(self, resume_id: int):
        self.resume_id = resume_id
        super().__init__("Resume")


class SkillNotFoundError(NotFoundError):
    def __init__(self, skill_id: int):
        self.skill_id = skill_id
        super().__init__("Skill")


class SkillNotUnlockedError(NotFoundError):
    """Raised when a user tries to showcase a skill they have not unlocked."""

    def __init__(self, skill_id: int):
        self.skill_id = skill_id
        super().__init__("User skill", "Skill not found in your skills")


class ResumeSkillNotFoundError(NotFoundError):
    def __init__(self, resume_id: int, skill_id: int):
        self.resume_id = resume_id
        self.skill_id = skill_id
        super().__init__("Resume skill", "Skill not found in resume")
