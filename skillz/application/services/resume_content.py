"""
Plain-text resume sections built from catalog skills.
"""

from typing import Iterable

from skillz.domain.entities.skill import Skill

SKILLS_HEADER = "Skills:"


def format_skill_entry(skill: Skill) -> str:
    description = skill.description or "No description"
    return f"• {skill.name} ({skill.skill_type.label} Skill)\n  {description}"


def format_skills_section(skills: Iterable[Skill]) -> str:
    """Render a "Skills:" block, one bullet per skill, blank line between."""
    entries = "\n\n".join(format_skill_entry(skill) for skill in skills)
    return f"{SKILLS_HEADER}\n\n{entries}"
