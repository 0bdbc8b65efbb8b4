"""
Unit tests for request schemas.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from skillz.api.schemas.skill import UnlockSkillsRequest
from skillz.domain.value_objects.skill_grant import SkillGrant


class TestUnlockSkillsRequest:
    """Both wire forms normalise to the same domain grants."""

    def test_grants_form(self):
        request = UnlockSkillsRequest(
            grants=[{"skill_id": 1, "level": 3, "experience_points": 150}, {"skill_id": 2}]
        )
        assert request.to_grants() == [
            SkillGrant(skill_id=1, level=3, experience_points=150),
            SkillGrant(skill_id=2, level=1, experience_points=100),
        ]

    def test_parallel_arrays_with_defaults(self):
        request = UnlockSkillsRequest(
            skill_ids=[1, 2, 3], levels=[4, 0], experience_points=[None, 60, 70]
        )
        assert request.to_grants() == [
            SkillGrant(skill_id=1, level=4, experience_points=100),
            SkillGrant(skill_id=2, level=1, experience_points=60),
            SkillGrant(skill_id=3, level=1, experience_points=70),
        ]

    def test_grants_take_precedence(self):
        request = UnlockSkillsRequest(grants=[{"skill_id": 9}], skill_ids=[1])
        assert [g.skill_id for g in request.to_grants()] == [9]

    @pytest.mark.parametrize("payload", [{}, {"grants": []}, {"skill_ids": []}])
    def test_requires_grants(self, payload):
        with pytest.raises(PydanticValidationError):
            UnlockSkillsRequest(**payload)

    def test_negative_level_rejected(self):
        with pytest.raises(PydanticValidationError):
            UnlockSkillsRequest(grants=[{"skill_id": 1, "level": -2}])
