"""
Unit tests for value objects.
"""

import dataclasses
import json

import pytest

from skillz.domain.exceptions import DragPayloadError, OutOfRangeError
from skillz.domain.value_objects.comparison import ComparisonSide, DragPayload, ItemType
from skillz.domain.value_objects.skill_grant import SkillGrant
from skillz.domain.value_objects.skill_type import SkillType


class TestSkillType:
    """Test SkillType value object."""

    def test_enum_values(self):
        assert [t.value for t in SkillType] == ["hard", "soft"]

    def test_label(self):
        assert SkillType.HARD.label == "Hard"
        assert SkillType.SOFT.label == "Soft"

    def test_from_string(self):
        assert SkillType("soft") is SkillType.SOFT
        with pytest.raises(ValueError):
            SkillType("medium")


class TestSkillGrant:
    """Test SkillGrant value object."""

    def test_defaults(self):
        grant = SkillGrant(skill_id=7)
        assert grant.level == 1
        assert grant.experience_points == 100

    def test_is_immutable(self):
        grant = SkillGrant(skill_id=7, level=3, experience_points=150)
        with pytest.raises(dataclasses.FrozenInstanceError):
            grant.level = 5

    def test_negative_level_rejected(self):
        with pytest.raises(OutOfRangeError) as exc_info:
            SkillGrant(skill_id=7, level=-1)
        assert exc_info.value.field_name == "level"

    def test_negative_experience_rejected(self):
        with pytest.raises(OutOfRangeError) as exc_info:
            SkillGrant(skill_id=7, experience_points=-10)
        assert exc_info.value.field_name == "experience_points"

    def test_zero_values_allowed(self):
        grant = SkillGrant(skill_id=7, level=0, experience_points=0)
        assert grant.clamped_level(10) == 0

    @pytest.mark.parametrize(
        "level,max_level,expected",
        [(3, 10, 3), (10, 10, 10), (99, 10, 10), (6, 5, 5)],
    )
    def test_clamped_level(self, level, max_level, expected):
        assert SkillGrant(skill_id=1, level=level).clamped_level(max_level) == expected


class TestComparisonSide:
    def test_opposite(self):
        assert ComparisonSide.LEFT.opposite() is ComparisonSide.RIGHT
        assert ComparisonSide.RIGHT.opposite() is ComparisonSide.LEFT


class TestDragPayload:
    """Test DragPayload channels and fallback resolution."""

    @pytest.fixture
    def payload(self):
        return DragPayload(
            item_id=12, item_type=ItemType.SKILL, origin_side=ComparisonSide.LEFT
        )

    def test_json_channel(self, payload):
        raw = payload.to_json()
        assert json.loads(raw) == {"item": 12, "type": "skill", "side": "left"}
        assert DragPayload.from_json(raw) == payload

    def test_text_channel(self, payload):
        assert payload.to_text() == "skill:12:left"
        assert DragPayload.from_text("job:4:right") == DragPayload(
            item_id=4, item_type=ItemType.JOB, origin_side=ComparisonSide.RIGHT
        )

    def test_resolve_prefers_in_memory_payload(self, payload):
        other = DragPayload(4, ItemType.JOB, ComparisonSide.RIGHT)
        assert DragPayload.resolve(payload, other.to_json(), other.to_text()) is payload

    def test_resolve_falls_back_to_json_then_text(self, payload):
        assert DragPayload.resolve(None, payload.to_json(), "job:1:right") == payload
        assert DragPayload.resolve(None, None, payload.to_text()) == payload
        assert DragPayload.resolve(None, "", payload.to_text()) == payload

    def test_resolve_without_any_channel(self):
        with pytest.raises(DragPayloadError) as exc_info:
            DragPayload.resolve()
        assert str(exc_info.value).startswith("Failed to get drag data")

    @pytest.mark.parametrize(
        "raw",
        ["not json", '{"item": 1}', '{"item": "x", "type": "skill", "side": "left"}',
         '{"item": 1, "type": "badge", "side": "left"}'],
    )
    def test_malformed_json(self, raw):
        with pytest.raises(DragPayloadError):
            DragPayload.from_json(raw)

    @pytest.mark.parametrize("raw", ["skill:1", "skill:one:left", "skill:1:middle"])
    def test_malformed_text(self, raw):
        with pytest.raises(DragPayloadError):
            DragPayload.from_text(raw)
