"""
Skill catalog seed data.

Eight categories, twenty-eight skills and a four tier tree. Re-running the
seed is a no-op for rows that already exist (matched by name, or by skill
for tree nodes).
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from skillz.config.logging import get_logger
from skillz.config.settings import settings
from skillz.domain.entities.skill import SkillTreeNode
from skillz.domain.entities.skill_forest import SkillForest, SkillForestError
from skillz.infrastructure.database.models.skill import SkillModel
from skillz.infrastructure.database.models.skill_category import SkillCategoryModel
from skillz.infrastructure.database.models.skill_tree_node import SkillTreeNodeModel

logger = get_logger(__name__)

TIER_SPACING_X = 200
TIER_SPACING_Y = 200

CATEGORIES = [
    ("Programming Languages", "Technical programming skills", "💻", "#4A90E2"),
    ("Frameworks & Libraries", "Development frameworks and tools", "⚙️", "#50C878"),
    ("Databases", "Database technologies", "🗄️", "#FF6B6B"),
    ("DevOps & Cloud", "Infrastructure and deployment", "☁️", "#FFA500"),
    ("Communication", "Interpersonal and communication skills", "💬", "#9B59B6"),
    ("Leadership", "Management and leadership abilities", "👥", "#E74C3C"),
    ("Problem Solving", "Analytical and problem-solving skills", "🧩", "#3498DB"),
    ("Design", "UI/UX and design skills", "🎨", "#E91E63"),
]

# (name, description, skill_type, category, icon)
SKILLS = [
    ("JavaScript", "JavaScript programming language", "hard", "Programming Languages", "🟨"),
    ("Python", "Python programming language", "hard", "Programming Languages", "🐍"),
    ("Java", "Java programming language", "hard", "Programming Languages", "☕"),
    ("C++", "C++ programming language", "hard", "Programming Languages", "⚡"),
    ("TypeScript", "TypeScript programming language", "hard", "Programming Languages", "🔷"),
    ("React", "React framework", "hard", "Frameworks & Libraries", "⚛️"),
    ("Node.js", "Node.js runtime", "hard", "Frameworks & Libraries", "🟢"),
    ("Express", "Express.js framework", "hard", "Frameworks & Libraries", "🚂"),
    ("Vue.js", "Vue.js framework", "hard", "Frameworks & Libraries", "💚"),
    ("Angular", "Angular framework", "hard", "Frameworks & Libraries", "🅰️"),
    ("SQL", "SQL database language", "hard", "Databases", "🗃️"),
    ("MongoDB", "MongoDB NoSQL database", "hard", "Databases", "🍃"),
    ("PostgreSQL", "PostgreSQL database", "hard", "Databases", "🐘"),
    ("Redis", "Redis in-memory database", "hard", "Databases", "🔴"),
    ("Docker", "Docker containerization", "hard", "DevOps & Cloud", "🐳"),
    ("Kubernetes", "Kubernetes orchestration", "hard", "DevOps & Cloud", "⚓"),
    ("AWS", "Amazon Web Services", "hard", "DevOps & Cloud", "☁️"),
    ("Git", "Version control with Git", "hard", "DevOps & Cloud", "📦"),
    ("Team Communication", "Effective team communication", "soft", "Communication", "💬"),
    ("Public Speaking", "Public speaking and presentations", "soft", "Communication", "🎤"),
    ("Written Communication", "Clear written communication", "soft", "Communication", "✍️"),
    ("Team Leadership", "Leading teams effectively", "soft", "Leadership", "👑"),
    ("Project Management", "Managing projects and timelines", "soft", "Leadership", "📊"),
    ("Mentoring", "Mentoring and coaching others", "soft", "Leadership", "🎓"),
    ("Critical Thinking", "Analytical and critical thinking", "soft", "Problem Solving", "🧠"),
    ("Debugging", "Systematic problem debugging", "soft", "Problem Solving", "🔍"),
    ("UI Design", "User interface design", "hard", "Design", "🎨"),
    ("UX Design", "User experience design", "hard", "Design", "✨"),
]

# One list per tier of (skill, parent). Roots have no parent.
TREE_TIERS: List[List[Tuple[str, Optional[str]]]] = [
    [
        ("JavaScript", None),
        ("Python", None),
        ("SQL", None),
        ("Team Communication", None),
        ("Critical Thinking", None),
    ],
    [
        ("React", "JavaScript"),
        ("Node.js", "JavaScript"),
        ("TypeScript", "JavaScript"),
        ("Express", "Node.js"),
        ("MongoDB", "SQL"),
        ("PostgreSQL", "SQL"),
        ("Public Speaking", "Team Communication"),
        ("Written Communication", "Team Communication"),
        ("Debugging", "Critical Thinking"),
    ],
    [
        ("Vue.js", "React"),
        ("Angular", "TypeScript"),
        ("Docker", "Node.js"),
        ("Git", "Node.js"),
        ("Team Leadership", "Public Speaking"),
        ("Project Management", "Written Communication"),
        ("Mentoring", "Team Leadership"),
    ],
    [
        ("Kubernetes", "Docker"),
        ("AWS", "Docker"),
        ("Redis", "PostgreSQL"),
    ],
]


@dataclass
class SeedSummary:
    categories_created: int = 0
    skills_created: int = 0
    nodes_created: int = 0


def build_tree_nodes(skill_ids: Dict[str, int]) -> List[SkillTreeNode]:
    """Lay out the tree: x advances per node within a tier, y per tier."""
    nodes = []
    for tier_index, tier in enumerate(TREE_TIERS):
        for position, (name, parent) in enumerate(tier):
            if name not in skill_ids:
                raise SkillForestError(f"Tree references unknown skill '{name}'")
            if parent is not None and parent not in skill_ids:
                raise SkillForestError(f"Skill '{name}' references unknown parent '{parent}'")
            nodes.append(
                SkillTreeNode(
                    skill_id=skill_ids[name],
                    parent_skill_id=skill_ids[parent] if parent else None,
                    position_x=position * TIER_SPACING_X,
                    position_y=tier_index * TIER_SPACING_Y,
                    tier=tier_index + 1,
                )
            )
    return nodes


async def seed_skill_catalog(session: AsyncSession) -> SeedSummary:
    """Insert missing categories, skills and tree nodes, then commit."""
    summary = SeedSummary()

    result = await session.execute(select(SkillCategoryModel))
    category_ids = {model.name: model.id for model in result.scalars().all()}
    for name, description, icon, color in CATEGORIES:
        if name in category_ids:
            continue
        model = SkillCategoryModel(name=name, description=description, icon=icon, color=color)
        session.add(model)
        await session.flush()
        category_ids[name] = model.id
        summary.categories_created += 1

    result = await session.execute(select(SkillModel))
    skill_ids = {model.name: model.id for model in result.scalars().all()}
    for name, description, skill_type, category, icon in SKILLS:
        if name in skill_ids:
            continue
        model = SkillModel(
            name=name,
            description=description,
            skill_type=skill_type,
            category_id=category_ids[category],
            max_level=settings.DEFAULT_SKILL_MAX_LEVEL,
            icon=icon,
        )
        session.add(model)
        await session.flush()
        skill_ids[name] = model.id
        summary.skills_created += 1

    nodes = build_tree_nodes(skill_ids)
    SkillForest(nodes).validate(known_skill_ids=set(skill_ids.values()))

    result = await session.execute(select(SkillTreeNodeModel.skill_id))
    placed = set(result.scalars().all())
    for node in nodes:
        if node.skill_id in placed:
            continue
        session.add(
            SkillTreeNodeModel(
                skill_id=node.skill_id,
                parent_skill_id=node.parent_skill_id,
                position_x=node.position_x,
                position_y=node.position_y,
                tier=node.tier,
            )
        )
        summary.nodes_created += 1

    await session.commit()

    logger.info(
        "Skill catalog seeded",
        categories_created=summary.categories_created,
        skills_created=summary.skills_created,
        nodes_created=summary.nodes_created,
    )
    return summary
