"""
Unit tests for the resume builder use cases.
"""

from unittest.mock import AsyncMock

import pytest

from skillz.application.use_cases.build_resume_from_skills import (
    AppendSkillsToResumeUseCase,
    BuildResumeFromSkillsUseCase,
)
from skillz.application.use_cases.manage_resume_skills import AddSkillToResumeUseCase
from skillz.domain.entities.resume import Resume
from skillz.domain.exceptions import (
    DuplicateResumeSkillError,
    RequiredFieldError,
    ResumeNotFoundError,
    SkillNotUnlockedError,
    ValidationError,
)


@pytest.fixture
def mock_add_skill():
    return AsyncMock(spec=AddSkillToResumeUseCase)


@pytest.fixture
def catalog(mock_skill_catalog_repository, sample_skills):
    async def get_skills_by_ids(skill_ids):
        return {i: sample_skills[i] for i in skill_ids if i in sample_skills}

    mock_skill_catalog_repository.get_skills_by_ids.side_effect = get_skills_by_ids
    return mock_skill_catalog_repository


class TestBuildResumeFromSkillsUseCase:
    """Test BuildResumeFromSkillsUseCase."""

    @pytest.fixture
    def use_case(
        self, catalog, mock_resume_repository, mock_add_skill, mock_transaction_service
    ):
        async def create(resume):
            resume.id = 21
            return resume

        mock_resume_repository.create.side_effect = create
        return BuildResumeFromSkillsUseCase(
            catalog, mock_resume_repository, mock_add_skill, mock_transaction_service
        )

    @pytest.mark.asyncio
    async def test_builds_content_and_links_skills(self, use_case, mock_add_skill):
        result = await use_case.execute(1, "My CV", [3, 1, 3])

        assert result.resume.id == 21
        assert result.resume.content.startswith("Skills:\n\n• Team Communication (Soft")
        assert "• JavaScript (Hard Skill)\n  No description" in result.resume.content
        assert result.associated_skill_ids == [3, 1]
        assert result.skipped == {}
        assert mock_add_skill.execute.await_count == 2

    @pytest.mark.asyncio
    async def test_skills_that_cannot_be_linked_are_skipped(
        self, use_case, mock_add_skill
    ):
        mock_add_skill.execute.side_effect = [
            None,
            SkillNotUnlockedError(2),
            DuplicateResumeSkillError(21, 3),
        ]

        result = await use_case.execute(1, "My CV", [1, 2, 3])

        assert result.associated_skill_ids == [1]
        assert result.skipped == {
            2: "Skill not found in your skills",
            3: "Skill already in resume",
        }

    @pytest.mark.asyncio
    async def test_unknown_skills_are_left_out_of_content(self, use_case):
        result = await use_case.execute(1, "My CV", [1, 404])
        assert "404" not in result.resume.content
        assert result.resume.content.count("•") == 1

    @pytest.mark.asyncio
    async def test_requires_title(self, use_case):
        with pytest.raises(RequiredFieldError):
            await use_case.execute(1, "  ", [1])

    @pytest.mark.asyncio
    async def test_requires_skills(self, use_case):
        with pytest.raises(RequiredFieldError):
            await use_case.execute(1, "My CV", [])

    @pytest.mark.asyncio
    async def test_no_known_skills(self, use_case, mock_resume_repository):
        with pytest.raises(ValidationError):
            await use_case.execute(1, "My CV", [404, 405])
        mock_resume_repository.create.assert_not_called()


class TestAppendSkillsToResumeUseCase:
    @pytest.mark.asyncio
    async def test_appends_section(
        self, catalog, mock_resume_repository, mock_add_skill, mock_transaction_service
    ):
        mock_resume_repository.get_for_user.return_value = Resume(
            id=5, user_id=1, title="CV", content="Experience: lots"
        )
        mock_resume_repository.update.side_effect = lambda resume: resume
        use_case = AppendSkillsToResumeUseCase(
            catalog, mock_resume_repository, mock_add_skill, mock_transaction_service
        )

        result = await use_case.execute(1, 5, [2])

        assert result.resume.content == (
            "Experience: lots\n\nSkills:\n\n• Python (Hard Skill)\n  No description"
        )
        mock_add_skill.execute.assert_awaited_once_with(1, 5, 2)

    @pytest.mark.asyncio
    async def test_missing_resume(
        self, catalog, mock_resume_repository, mock_add_skill, mock_transaction_service
    ):
        mock_resume_repository.get_for_user.return_value = None
        use_case = AppendSkillsToResumeUseCase(
            catalog, mock_resume_repository, mock_add_skill, mock_transaction_service
        )

        with pytest.raises(ResumeNotFoundError):
            await use_case.execute(1, 5, [2])
