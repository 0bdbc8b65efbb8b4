"""
FastAPI dependency injection container.
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from skillz.application.services.unlock_engine import SkillUnlockEngine
from skillz.config.database import get_db_session
from skillz.config.logging import get_logger
from skillz.config.settings import settings
from skillz.infrastructure.database.repositories.job_experience_repository import (
    JobExperienceRepository,
    SkillUnlockRepository,
)
from skillz.infrastructure.database.repositories.resume_repository import (
    ResumeRepository,
    ResumeSkillRepository,
)
from skillz.infrastructure.database.repositories.skill_catalog_repository import (
    SkillCatalogRepository,
)
from skillz.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)
from skillz.infrastructure.database.repositories.user_skill_repository import (
    UserSkillRepository,
)

logger = get_logger(__name__)


# Identity
async def get_current_user_id(request: Request) -> int:
    """Caller identity, already authenticated upstream and passed as a header."""
    raw = request.headers.get(settings.USER_ID_HEADER)
    try:
        user_id = int(raw) if raw is not None else None
    except ValueError:
        user_id = None

    if user_id is None or user_id <= 0:
        logger.info("Rejected request without a valid user id", path=request.url.path)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return user_id


# Database Dependencies
async def get_skill_catalog_repository(
    db: AsyncSession = Depends(get_db_session),
) -> SkillCatalogRepository:
    """Get skill catalog repository instance."""
    return SkillCatalogRepository(db)


async def get_user_skill_repository(
    db: AsyncSession = Depends(get_db_session),
) -> UserSkillRepository:
    """Get user skill repository instance."""
    return UserSkillRepository(db)


async def get_job_experience_repository(
    db: AsyncSession = Depends(get_db_session),
) -> JobExperienceRepository:
    """Get job experience repository instance."""
    return JobExperienceRepository(db)


async def get_skill_unlock_repository(
    db: AsyncSession = Depends(get_db_session),
) -> SkillUnlockRepository:
    """Get skill unlock repository instance."""
    return SkillUnlockRepository(db)


async def get_resume_repository(
    db: AsyncSession = Depends(get_db_session),
) -> ResumeRepository:
    """Get resume repository instance."""
    return ResumeRepository(db)


async def get_resume_skill_repository(
    db: AsyncSession = Depends(get_db_session),
) -> ResumeSkillRepository:
    """Get resume skill repository instance."""
    return ResumeSkillRepository(db)


async def get_transaction_service(
    db: AsyncSession = Depends(get_db_session),
) -> TransactionService:
    """Get transaction service instance."""
    return TransactionService(db)


# Service Dependencies
async def get_skill_unlock_engine(
    skill_catalog_repo: SkillCatalogRepository = Depends(get_skill_catalog_repository),
    user_skill_repo: UserSkillRepository = Depends(get_user_skill_repository),
    skill_unlock_repo: SkillUnlockRepository = Depends(get_skill_unlock_repository),
    transaction_service: TransactionService = Depends(get_transaction_service),
) -> SkillUnlockEngine:
    """Get skill unlock engine instance."""
    return SkillUnlockEngine(
        skill_catalog_repo, user_skill_repo, skill_unlock_repo, transaction_service
    )


# Type aliases for cleaner dependency injection
CurrentUserId = Annotated[int, Depends(get_current_user_id)]
SkillCatalogRepositoryDep = Annotated[
    SkillCatalogRepository, Depends(get_skill_catalog_repository)
]
UserSkillRepositoryDep = Annotated[UserSkillRepository, Depends(get_user_skill_repository)]
JobExperienceRepositoryDep = Annotated[
    JobExperienceRepository, Depends(get_job_experience_repository)
]
SkillUnlockRepositoryDep = Annotated[
    SkillUnlockRepository, Depends(get_skill_unlock_repository)
]
ResumeRepositoryDep = Annotated[ResumeRepository, Depends(get_resume_repository)]
ResumeSkillRepositoryDep = Annotated[
    ResumeSkillRepository, Depends(get_resume_skill_repository)
]
TransactionServiceDep = Annotated[TransactionService, Depends(get_transaction_service)]
SkillUnlockEngineDep = Annotated[SkillUnlockEngine, Depends(get_skill_unlock_engine)]
