"""Resume endpoints: CRUD, skill associations and the resume builder."""

from typing import List

from fastapi import APIRouter, status

from skillz.api.dependencies import (
    CurrentUserId,
    ResumeRepositoryDep,
    ResumeSkillRepositoryDep,
    SkillCatalogRepositoryDep,
    TransactionServiceDep,
    UserSkillRepositoryDep,
)
from skillz.api.schemas.common import MessageResponse
from skillz.api.schemas.resume import (
    AppendSkillsRequest,
    BuildResumeRequest,
    BuildResumeResponse,
    ResumeCreateRequest,
    ResumeResponse,
    ResumeSkillResponse,
    ResumeUpdateRequest,
)
from skillz.application.use_cases.build_resume_from_skills import (
    AppendSkillsToResumeUseCase,
    BuildResumeFromSkillsUseCase,
    BuildResumeResult,
)
from skillz.application.use_cases.manage_resume_skills import (
    AddSkillToResumeUseCase,
    GetResumeSkillsUseCase,
    RemoveSkillFromResumeUseCase,
)
from skillz.application.use_cases.manage_resumes import (
    CreateResumeRequest,
    CreateResumeUseCase,
    DeleteResumeUseCase,
    GetResumeUseCase,
    ListResumesUseCase,
    UpdateResumeRequest,
    UpdateResumeUseCase,
)
from skillz.config.logging import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/resumes", tags=["resumes"])


def _build_response(result: BuildResumeResult) -> BuildResumeResponse:
    return BuildResumeResponse(
        resume=ResumeResponse.model_validate(result.resume),
        associated_skill_ids=result.associated_skill_ids,
        skipped=result.skipped,
    )


@router.get("", response_model=List[ResumeResponse])
async def list_resumes(user_id: CurrentUserId, resume_repository: ResumeRepositoryDep):
    """List the caller's resumes, most recently updated first."""
    return await ListResumesUseCase(resume_repository).execute(user_id)


@router.post("", response_model=ResumeResponse, status_code=status.HTTP_201_CREATED)
async def create_resume(
    payload: ResumeCreateRequest,
    user_id: CurrentUserId,
    resume_repository: ResumeRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    use_case = CreateResumeUseCase(resume_repository, transaction_service)
    return await use_case.execute(
        CreateResumeRequest(user_id=user_id, title=payload.title, content=payload.content)
    )


@router.post(
    "/from-skills",
    response_model=BuildResumeResponse,
    status_code=status.HTTP_201_CREATED,
)
async def build_resume_from_skills(
    payload: BuildResumeRequest,
    user_id: CurrentUserId,
    skill_catalog_repository: SkillCatalogRepositoryDep,
    resume_repository: ResumeRepositoryDep,
    user_skill_repository: UserSkillRepositoryDep,
    resume_skill_repository: ResumeSkillRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    """Create a resume whose content lists the selected skills."""
    add_skill = AddSkillToResumeUseCase(
        resume_repository,
        user_skill_repository,
        resume_skill_repository,
        transaction_service,
    )
    use_case = BuildResumeFromSkillsUseCase(
        skill_catalog_repository, resume_repository, add_skill, transaction_service
    )
    result = await use_case.execute(user_id, payload.title, payload.skill_ids)
    return _build_response(result)


@router.get("/{resume_id}", response_model=ResumeResponse)
async def get_resume(
    resume_id: int, user_id: CurrentUserId, resume_repository: ResumeRepositoryDep
):
    return await GetResumeUseCase(resume_repository).execute(user_id, resume_id)


@router.put("/{resume_id}", response_model=ResumeResponse)
async def update_resume(
    resume_id: int,
    payload: ResumeUpdateRequest,
    user_id: CurrentUserId,
    resume_repository: ResumeRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    use_case = UpdateResumeUseCase(resume_repository, transaction_service)
    return await use_case.execute(
        UpdateResumeRequest(
            user_id=user_id,
            resume_id=resume_id,
            title=payload.title,
            content=payload.content,
        )
    )


@router.delete("/{resume_id}", response_model=MessageResponse)
async def delete_resume(
    resume_id: int,
    user_id: CurrentUserId,
    resume_repository: ResumeRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    use_case = DeleteResumeUseCase(resume_repository, transaction_service)
    await use_case.execute(user_id, resume_id)
    return MessageResponse(message="Resume deleted successfully")


@router.post("/{resume_id}/append-skills", response_model=BuildResumeResponse)
async def append_skills_to_resume(
    resume_id: int,
    payload: AppendSkillsRequest,
    user_id: CurrentUserId,
    skill_catalog_repository: SkillCatalogRepositoryDep,
    resume_repository: ResumeRepositoryDep,
    user_skill_repository: UserSkillRepositoryDep,
    resume_skill_repository: ResumeSkillRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    """Append a skills section to an existing resume."""
    add_skill = AddSkillToResumeUseCase(
        resume_repository,
        user_skill_repository,
        resume_skill_repository,
        transaction_service,
    )
    use_case = AppendSkillsToResumeUseCase(
        skill_catalog_repository, resume_repository, add_skill, transaction_service
    )
    result = await use_case.execute(user_id, resume_id, payload.skill_ids)
    return _build_response(result)


@router.get("/{resume_id}/skills", response_model=List[ResumeSkillResponse])
async def get_resume_skills(
    resume_id: int,
    user_id: CurrentUserId,
    resume_repository: ResumeRepositoryDep,
    resume_skill_repository: ResumeSkillRepositoryDep,
):
    """Skills on the resume with the owner's current level and XP."""
    use_case = GetResumeSkillsUseCase(resume_repository, resume_skill_repository)
    return await use_case.execute(user_id, resume_id)


@router.post("/{resume_id}/skills/{skill_id}", response_model=MessageResponse)
async def add_skill_to_resume(
    resume_id: int,
    skill_id: int,
    user_id: CurrentUserId,
    resume_repository: ResumeRepositoryDep,
    user_skill_repository: UserSkillRepositoryDep,
    resume_skill_repository: ResumeSkillRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    use_case = AddSkillToResumeUseCase(
        resume_repository,
        user_skill_repository,
        resume_skill_repository,
        transaction_service,
    )
    await use_case.execute(user_id, resume_id, skill_id)
    return MessageResponse(message="Skill added to resume successfully")


@router.delete("/{resume_id}/skills/{skill_id}", response_model=MessageResponse)
async def remove_skill_from_resume(
    resume_id: int,
    skill_id: int,
    user_id: CurrentUserId,
    resume_repository: ResumeRepositoryDep,
    resume_skill_repository: ResumeSkillRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    """Unlink the skill from this resume only."""
    use_case = RemoveSkillFromResumeUseCase(
        resume_repository, resume_skill_repository, transaction_service
    )
    await use_case.execute(user_id, resume_id, skill_id)
    return MessageResponse(message="Skill removed from resume successfully")
