"""
Unit tests for resume content formatting.
"""

from skillz.application.services.resume_content import (
    format_skill_entry,
    format_skills_section,
)
from skillz.domain.entities.skill import Skill
from skillz.domain.value_objects.skill_type import SkillType


def test_format_skill_entry():
    skill = Skill(
        name="Python",
        skill_type=SkillType.HARD,
        description="Python programming language",
    )
    assert format_skill_entry(skill) == (
        "• Python (Hard Skill)\n  Python programming language"
    )


def test_format_skill_entry_without_description():
    skill = Skill(name="Mentoring", skill_type=SkillType.SOFT)
    assert format_skill_entry(skill) == "• Mentoring (Soft Skill)\n  No description"


def test_format_skills_section():
    skills = [
        Skill(name="Python", skill_type=SkillType.HARD, description="Snakes"),
        Skill(name="Mentoring", skill_type=SkillType.SOFT, description="Coaching"),
    ]
    assert format_skills_section(skills) == (
        "Skills:\n\n"
        "• Python (Hard Skill)\n  Snakes\n\n"
        "• Mentoring (Soft Skill)\n  Coaching"
    )
