"""Resume CRUD use cases."""

from dataclasses import dataclass
from typing import List, Optional

from skillz.application.interfaces.repositories import ResumeRepositoryInterface
from skillz.config.logging import get_logger
from skillz.domain.entities.resume import Resume
from skillz.domain.exceptions.not_found_error import ResumeNotFoundError
from skillz.domain.exceptions.validation_error import ValidationError
from skillz.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)

logger = get_logger(__name__)


@dataclass
class CreateResumeRequest:
    user_id: int
    title: str
    content: Optional[str] = None


@dataclass
class UpdateResumeRequest:
    """Partial update. At least one field must be provided."""

    user_id: int
    resume_id: int
    title: Optional[str] = None
    content: Optional[str] = None


class ResumeUseCaseBase:
    def __init__(
        self,
        resume_repo: ResumeRepositoryInterface,
        transaction_service: Optional[TransactionService] = None,
    ):
        self.resume_repo = resume_repo
        self.transaction_service = transaction_service

    async def _get_owned(self, user_id: int, resume_id: int) -> Resume:
        resume = await self.resume_repo.get_for_user(resume_id, user_id)
        if resume is None:
            raise ResumeNotFoundError(resume_id)
        return resume


class CreateResumeUseCase(ResumeUseCaseBase):
    async def execute(self, request: CreateResumeRequest) -> Resume:
        try:
            resume = Resume(
                user_id=request.user_id,
                title=request.title,
                content=request.content or "",
            )
        except ValueError as e:
            raise ValidationError(str(e)) from e

        created = await self.transaction_service.execute_in_transaction(
            lambda: self.resume_repo.create(resume)
        )
        logger.info("Resume created", user_id=request.user_id, resume_id=created.id)
        return created


class GetResumeUseCase(ResumeUseCaseBase):
    async def execute(self, user_id: int, resume_id: int) -> Resume:
        return await self._get_owned(user_id, resume_id)


class ListResumesUseCase(ResumeUseCaseBase):
    async def execute(self, user_id: int) -> List[Resume]:
        return await self.resume_repo.list_for_user(user_id)


class UpdateResumeUseCase(ResumeUseCaseBase):
    async def execute(self, request: UpdateResumeRequest) -> Resume:
        if request.title is None and request.content is None:
            raise ValidationError("No fields to update")

        resume = await self._get_owned(request.user_id, request.resume_id)
        try:
            resume.update(title=request.title, content=request.content)
        except ValueError as e:
            raise ValidationError(str(e)) from e

        updated = await self.transaction_service.execute_in_transaction(
            lambda: self.resume_repo.update(resume)
        )
        logger.info("Resume updated", user_id=request.user_id, resume_id=resume.id)
        return updated


class DeleteResumeUseCase(ResumeUseCaseBase):
    """Delete a resume together with its skill associations."""

    async def execute(self, user_id: int, resume_id: int) -> None:
        resume = await self._get_owned(user_id, resume_id)
        await self.resume_repo.delete(resume.id)
        await self.transaction_service.commit()
        logger.info("Resume deleted", user_id=user_id, resume_id=resume.id)
