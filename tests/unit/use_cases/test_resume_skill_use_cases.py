"""
Unit tests for resume-skill association use cases.
"""

from datetime import datetime, timezone

import pytest

from skillz.application.use_cases.manage_resume_skills import (
    AddSkillToResumeUseCase,
    GetResumeSkillsUseCase,
    RemoveSkillFromResumeUseCase,
)
from skillz.application.use_cases.manage_resumes import (
    UpdateResumeRequest,
    UpdateResumeUseCase,
)
from skillz.domain.entities.resume import Resume
from skillz.domain.entities.user_skill import UserSkill
from skillz.domain.exceptions import (
    DuplicateResumeSkillError,
    ResumeNotFoundError,
    ResumeSkillNotFoundError,
    SkillNotUnlockedError,
    ValidationError,
)


@pytest.fixture
def resume():
    return Resume(id=7, user_id=1, title="Backend CV")


@pytest.fixture
def unlocked_skill():
    return UserSkill(
        id=3,
        user_id=1,
        skill_id=2,
        level=4,
        experience_points=100,
        unlocked_at=datetime.now(timezone.utc),
    )


class TestAddSkillToResumeUseCase:
    """Test AddSkillToResumeUseCase."""

    @pytest.fixture
    def use_case(
        self,
        mock_resume_repository,
        mock_user_skill_repository,
        mock_resume_skill_repository,
        mock_transaction_service,
    ):
        return AddSkillToResumeUseCase(
            mock_resume_repository,
            mock_user_skill_repository,
            mock_resume_skill_repository,
            mock_transaction_service,
        )

    @pytest.mark.asyncio
    async def test_add_unlocked_skill(
        self,
        use_case,
        resume,
        unlocked_skill,
        mock_resume_repository,
        mock_user_skill_repository,
        mock_resume_skill_repository,
        mock_transaction_service,
    ):
        mock_resume_repository.get_for_user.return_value = resume
        mock_user_skill_repository.get.return_value = unlocked_skill
        mock_resume_skill_repository.exists.return_value = False

        await use_case.execute(1, 7, 2)

        mock_resume_skill_repository.add.assert_awaited_once_with(7, 2)
        mock_transaction_service.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_skill_not_unlocked(
        self,
        use_case,
        resume,
        mock_resume_repository,
        mock_user_skill_repository,
        mock_resume_skill_repository,
    ):
        mock_resume_repository.get_for_user.return_value = resume
        mock_user_skill_repository.get.return_value = None

        with pytest.raises(SkillNotUnlockedError) as exc_info:
            await use_case.execute(1, 7, 2)

        assert str(exc_info.value) == "Skill not found in your skills"
        mock_resume_skill_repository.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_duplicate(
        self,
        use_case,
        resume,
        unlocked_skill,
        mock_resume_repository,
        mock_user_skill_repository,
        mock_resume_skill_repository,
    ):
        mock_resume_repository.get_for_user.return_value = resume
        mock_user_skill_repository.get.return_value = unlocked_skill
        mock_resume_skill_repository.exists.return_value = True

        with pytest.raises(DuplicateResumeSkillError):
            await use_case.execute(1, 7, 2)
        mock_resume_skill_repository.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_resume_of_another_user(
        self, use_case, mock_resume_repository, mock_user_skill_repository
    ):
        mock_resume_repository.get_for_user.return_value = None

        with pytest.raises(ResumeNotFoundError):
            await use_case.execute(2, 7, 2)
        mock_user_skill_repository.get.assert_not_called()


class TestRemoveSkillFromResumeUseCase:
    @pytest.mark.asyncio
    async def test_remove(
        self,
        resume,
        mock_resume_repository,
        mock_resume_skill_repository,
        mock_transaction_service,
    ):
        mock_resume_repository.get_for_user.return_value = resume
        mock_resume_skill_repository.remove.return_value = True
        use_case = RemoveSkillFromResumeUseCase(
            mock_resume_repository, mock_resume_skill_repository, mock_transaction_service
        )

        await use_case.execute(1, 7, 2)

        mock_resume_skill_repository.remove.assert_awaited_once_with(7, 2)
        mock_transaction_service.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_remove_missing_association(
        self,
        resume,
        mock_resume_repository,
        mock_resume_skill_repository,
        mock_transaction_service,
    ):
        mock_resume_repository.get_for_user.return_value = resume
        mock_resume_skill_repository.remove.return_value = False
        use_case = RemoveSkillFromResumeUseCase(
            mock_resume_repository, mock_resume_skill_repository, mock_transaction_service
        )

        with pytest.raises(ResumeSkillNotFoundError):
            await use_case.execute(1, 7, 2)


class TestGetResumeSkillsUseCase:
    @pytest.mark.asyncio
    async def test_reads_view_scoped_to_owner(
        self, resume, mock_resume_repository, mock_resume_skill_repository
    ):
        mock_resume_repository.get_for_user.return_value = resume
        mock_resume_skill_repository.list_view.return_value = []
        use_case = GetResumeSkillsUseCase(
            mock_resume_repository, mock_resume_skill_repository
        )

        assert await use_case.execute(1, 7) == []
        mock_resume_skill_repository.list_view.assert_awaited_once_with(7, 1)


class TestUpdateResumeUseCase:
    @pytest.mark.asyncio
    async def test_no_fields(self, mock_resume_repository, mock_transaction_service):
        use_case = UpdateResumeUseCase(mock_resume_repository, mock_transaction_service)

        with pytest.raises(ValidationError, match="No fields to update"):
            await use_case.execute(UpdateResumeRequest(user_id=1, resume_id=7))

    @pytest.mark.asyncio
    async def test_update_title(
        self, resume, mock_resume_repository, mock_transaction_service
    ):
        mock_resume_repository.get_for_user.return_value = resume
        mock_resume_repository.update.side_effect = lambda r: r
        use_case = UpdateResumeUseCase(mock_resume_repository, mock_transaction_service)

        updated = await use_case.execute(
            UpdateResumeRequest(user_id=1, resume_id=7, title="  Frontend CV ")
        )

        assert updated.title == "Frontend CV"
