"""
Unit tests for domain entities.
"""

from datetime import date

import pytest

from skillz.domain.entities import (
    JobExperience,
    Resume,
    Skill,
    SkillForest,
    SkillForestError,
    SkillTreeNode,
    UserSkill,
)
from skillz.domain.exceptions import ValidationError
from skillz.domain.value_objects.skill_grant import SkillGrant
from skillz.domain.value_objects.skill_type import SkillType


class TestUserSkill:
    """Ledger merge rules."""

    def test_from_grant_clamps_level(self):
        user_skill = UserSkill.from_grant(
            1, SkillGrant(skill_id=5, level=50, experience_points=300), max_level=10
        )
        assert user_skill.level == 10
        assert user_skill.experience_points == 300
        assert user_skill.is_unlocked

    def test_apply_grant_level_never_decreases(self):
        user_skill = UserSkill(user_id=1, skill_id=5, level=5, experience_points=100)
        user_skill.apply_grant(SkillGrant(skill_id=5, level=1, experience_points=20), 10)

        assert user_skill.level == 5
        assert user_skill.experience_points == 120

    def test_apply_grant_takes_higher_level(self):
        user_skill = UserSkill(user_id=1, skill_id=5, level=2, experience_points=0)
        user_skill.apply_grant(SkillGrant(skill_id=5, level=7, experience_points=0), 10)
        assert user_skill.level == 7

    def test_sequence_of_grants(self):
        """Level is the running max (capped), XP the running sum."""
        user_skill = UserSkill.from_grant(1, SkillGrant(5, 3, 150), max_level=8)
        for level, xp in [(1, 50), (12, 10), (0, 0), (4, 40)]:
            user_skill.apply_grant(SkillGrant(5, level, xp), max_level=8)
            assert 0 <= user_skill.level <= 8

        assert user_skill.level == 8
        assert user_skill.experience_points == 250

    def test_set_progress_can_lower_level(self):
        user_skill = UserSkill(user_id=1, skill_id=5, level=6, experience_points=10)
        user_skill.set_progress(10, level=2)
        assert user_skill.level == 2
        assert user_skill.experience_points == 10

    def test_set_progress_clamps_to_max_level(self):
        user_skill = UserSkill(user_id=1, skill_id=5)
        user_skill.set_progress(5, level=9, experience_points=40)
        assert user_skill.level == 5
        assert user_skill.is_unlocked

    def test_set_progress_rejects_experience_decrease(self):
        user_skill = UserSkill(user_id=1, skill_id=5, level=1, experience_points=200)
        with pytest.raises(ValidationError):
            user_skill.set_progress(10, experience_points=100)
        assert user_skill.experience_points == 200


class TestSkill:
    def test_coerces_skill_type(self):
        skill = Skill(name="Git", skill_type="hard")
        assert skill.skill_type is SkillType.HARD

    def test_rejects_invalid_max_level(self):
        with pytest.raises(ValueError):
            Skill(name="Git", skill_type=SkillType.HARD, max_level=0)

    def test_clamp_level(self):
        skill = Skill(name="Git", skill_type=SkillType.HARD, max_level=10)
        assert skill.clamp_level(15) == 10
        assert skill.clamp_level(-3) == 0


class TestJobExperience:
    def test_requires_company_and_position(self):
        with pytest.raises(ValueError, match="Company is required"):
            JobExperience(user_id=1, company="  ", position="Engineer")
        with pytest.raises(ValueError, match="Position is required"):
            JobExperience(user_id=1, company="Acme", position="")

    def test_end_date_before_start_date(self):
        with pytest.raises(ValueError):
            JobExperience(
                user_id=1,
                company="Acme",
                position="Engineer",
                start_date=date(2022, 5, 1),
                end_date=date(2021, 5, 1),
            )

    def test_copy_for_creates_unsaved_copy(self):
        job = JobExperience(
            id=9,
            user_id=1,
            company="Acme",
            position="Engineer",
            start_date=date(2020, 1, 1),
            skills_gained="Python",
        )
        copy = job.copy_for(1)

        assert copy.id is None
        assert (copy.company, copy.position, copy.start_date, copy.skills_gained) == (
            "Acme",
            "Engineer",
            date(2020, 1, 1),
            "Python",
        )
        assert copy.is_ongoing

    def test_to_payload_serialises_dates(self):
        job = JobExperience(
            user_id=1,
            company="Acme",
            position="Engineer",
            start_date=date(2020, 1, 1),
        )
        payload = job.to_payload()
        assert payload["start_date"] == "2020-01-01"
        assert payload["end_date"] is None


class TestResume:
    def test_title_required(self):
        with pytest.raises(ValueError):
            Resume(user_id=1, title=" ")

    def test_append_section(self):
        resume = Resume(user_id=1, title="CV")
        resume.append_section("Skills:")
        assert resume.content == "Skills:"

        resume.append_section("More")
        assert resume.content == "Skills:\n\nMore"


class TestSkillForest:
    """Topology checks run when the catalog is seeded."""

    def test_valid_forest(self):
        forest = SkillForest(
            [
                SkillTreeNode(skill_id=1),
                SkillTreeNode(skill_id=2, parent_skill_id=1, tier=2),
                SkillTreeNode(skill_id=3, parent_skill_id=2, tier=3),
                SkillTreeNode(skill_id=4),
            ]
        )
        forest.validate(known_skill_ids={1, 2, 3, 4})

        assert forest.roots() == [1, 4]
        assert forest.children_of(1) == [2]
        assert forest.parent_of(3) == 2

    def test_cycle_detected(self):
        forest = SkillForest(
            [
                SkillTreeNode(skill_id=1, parent_skill_id=3),
                SkillTreeNode(skill_id=2, parent_skill_id=1),
                SkillTreeNode(skill_id=3, parent_skill_id=2),
            ]
        )
        with pytest.raises(SkillForestError, match="Cycle"):
            forest.validate()

    def test_self_parent_is_a_cycle(self):
        with pytest.raises(SkillForestError):
            SkillForest([SkillTreeNode(skill_id=1, parent_skill_id=1)]).validate()

    def test_duplicate_node_rejected(self):
        with pytest.raises(SkillForestError):
            SkillForest([SkillTreeNode(skill_id=1), SkillTreeNode(skill_id=1)])

    def test_dangling_parent_rejected(self):
        forest = SkillForest([SkillTreeNode(skill_id=2, parent_skill_id=99)])
        with pytest.raises(SkillForestError, match="unknown parent"):
            forest.validate(known_skill_ids={2})

    def test_unknown_skill_rejected(self):
        forest = SkillForest([SkillTreeNode(skill_id=5)])
        with pytest.raises(SkillForestError, match="unknown skill"):
            forest.validate(known_skill_ids={1})
