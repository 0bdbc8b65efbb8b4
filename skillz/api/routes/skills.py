"""Skill catalog and user skill ledger endpoints."""

from typing import List, Optional

from fastapi import APIRouter

from skillz.api.dependencies import (
    CurrentUserId,
    SkillCatalogRepositoryDep,
    SkillUnlockRepositoryDep,
    TransactionServiceDep,
    UserSkillRepositoryDep,
)
from skillz.api.schemas.common import MessageResponse
from skillz.api.schemas.skill import (
    SetUserSkillLevelRequest,
    SkillCategoryResponse,
    SkillResponse,
    SkillTreeNodeResponse,
    SkillUnlockResponse,
    UserSkillResponse,
)
from skillz.application.use_cases.manage_user_skills import (
    DeleteUserSkillUseCase,
    ListSkillUnlocksUseCase,
)
from skillz.application.use_cases.manage_user_skills import (
    SetUserSkillLevelRequest as SetUserSkillLevelCommand,
)
from skillz.application.use_cases.manage_user_skills import SetUserSkillLevelUseCase
from skillz.config.logging import get_logger
from skillz.domain.value_objects.skill_type import SkillType

logger = get_logger(__name__)
router = APIRouter(prefix="/skills", tags=["skills"])


@router.get("/categories", response_model=List[SkillCategoryResponse])
async def list_categories(
    _: CurrentUserId, skill_catalog_repository: SkillCatalogRepositoryDep
):
    return await skill_catalog_repository.list_categories()


@router.get("", response_model=List[SkillResponse])
async def list_skills(
    _: CurrentUserId,
    skill_catalog_repository: SkillCatalogRepositoryDep,
    category_id: Optional[int] = None,
    skill_type: Optional[SkillType] = None,
):
    """List the catalog, optionally filtered by category and type."""
    return await skill_catalog_repository.list_skills(
        category_id=category_id,
        skill_type=skill_type.value if skill_type else None,
    )


@router.get("/tree", response_model=List[SkillTreeNodeResponse])
async def get_skill_tree(
    _: CurrentUserId, skill_catalog_repository: SkillCatalogRepositoryDep
):
    """Tree topology ordered by tier then position."""
    return await skill_catalog_repository.list_tree()


@router.get("/user", response_model=List[UserSkillResponse])
async def list_user_skills(
    user_id: CurrentUserId, user_skill_repository: UserSkillRepositoryDep
):
    return await user_skill_repository.list_for_user(user_id)


@router.get("/user/tree", response_model=List[SkillTreeNodeResponse])
async def get_user_skill_tree(
    user_id: CurrentUserId, skill_catalog_repository: SkillCatalogRepositoryDep
):
    """Tree topology with the caller's level, XP and unlocked flag per node."""
    return await skill_catalog_repository.list_user_tree(user_id)


@router.post("/user/{skill_id}", response_model=UserSkillResponse)
async def set_user_skill_level(
    skill_id: int,
    payload: SetUserSkillLevelRequest,
    user_id: CurrentUserId,
    skill_catalog_repository: SkillCatalogRepositoryDep,
    user_skill_repository: UserSkillRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    """Set level or XP directly, creating the ledger row if needed."""
    use_case = SetUserSkillLevelUseCase(
        skill_catalog_repository, user_skill_repository, transaction_service
    )
    return await use_case.execute(
        SetUserSkillLevelCommand(
            user_id=user_id,
            skill_id=skill_id,
            level=payload.level,
            experience_points=payload.experience_points,
        )
    )


@router.delete("/user/{skill_id}", response_model=MessageResponse)
async def delete_user_skill(
    skill_id: int,
    user_id: CurrentUserId,
    user_skill_repository: UserSkillRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    use_case = DeleteUserSkillUseCase(user_skill_repository, transaction_service)
    await use_case.execute(user_id, skill_id)
    return MessageResponse(message="Skill deleted successfully")


@router.get("/user/{skill_id}/unlocks", response_model=List[SkillUnlockResponse])
async def list_skill_unlocks(
    skill_id: int,
    user_id: CurrentUserId,
    skill_unlock_repository: SkillUnlockRepositoryDep,
):
    """Which of the caller's job experiences granted this skill."""
    use_case = ListSkillUnlocksUseCase(skill_unlock_repository)
    return await use_case.execute(user_id, skill_id)
