"""
Resume comparison and merge engine.

Holds the state of a two-resume comparison (left and right side), the
selections made on each side, and the operations that move skills and job
experiences from one side to the other. All mutations go through a
``CareerGatewayInterface`` and every mutation is followed by a re-fetch of
both sides, so local state never diverges from the server.
"""

import asyncio
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Set, Tuple

from skillz.application.interfaces.gateways import CareerGatewayInterface
from skillz.config.logging import get_logger
from skillz.config.settings import settings
from skillz.domain.entities.job_experience import JobExperience
from skillz.domain.entities.resume import Resume, ResumeSkillView
from skillz.domain.exceptions import (
    ComparisonNotLoadedError,
    ComparisonRefreshError,
    ConflictError,
    MergeInProgressError,
    NotFoundError,
    ValidationError,
)
from skillz.domain.value_objects.comparison import ComparisonSide, DragPayload, ItemType
from skillz.infrastructure.monitoring.metrics import record_merge_outcome

logger = get_logger(__name__)


class DropStatus(str, Enum):
    """Outcome of moving one item to the other side."""

    COPIED = "copied"
    ALREADY_PRESENT = "already_present"
    NOT_IN_SOURCE = "not_in_source"
    NOT_UNLOCKED = "not_unlocked"
    REJECTED = "rejected"
    FAILED = "failed"


@dataclass
class CopyOutcome:
    item_type: ItemType
    item_id: int
    status: DropStatus
    message: str
    new_item_id: Optional[int] = None

    @property
    def succeeded(self) -> bool:
        return self.status == DropStatus.COPIED


@dataclass
class ComparisonSideState:
    """What one side of the comparison currently shows and has selected."""

    resume: Optional[Resume] = None
    skills: List[ResumeSkillView] = field(default_factory=list)
    jobs: List[JobExperience] = field(default_factory=list)
    selected_skill_ids: Set[int] = field(default_factory=set)
    selected_job_ids: Set[int] = field(default_factory=set)

    def has_skill(self, skill_id: int) -> bool:
        return any(skill.skill_id == skill_id for skill in self.skills)

    def find_skill(self, skill_id: int) -> Optional[ResumeSkillView]:
        return next((s for s in self.skills if s.skill_id == skill_id), None)

    def find_job(self, job_id: int) -> Optional[JobExperience]:
        return next((j for j in self.jobs if j.id == job_id), None)

    def toggle(self, item_type: ItemType, item_id: int) -> bool:
        """Flip selection of an item. Returns True if it is now selected."""
        selected = (
            self.selected_skill_ids
            if item_type == ItemType.SKILL
            else self.selected_job_ids
        )
        if item_id in selected:
            selected.discard(item_id)
            return False
        selected.add(item_id)
        return True

    def clear_selection(self) -> None:
        self.selected_skill_ids.clear()
        self.selected_job_ids.clear()


class ResumeComparisonEngine:
    """Selection, drag-and-drop and batch copy between two resumes."""

    def __init__(
        self,
        gateway: CareerGatewayInterface,
        max_concurrency: Optional[int] = None,
    ):
        self.gateway = gateway
        self.max_concurrency = max_concurrency or settings.MERGE_MAX_CONCURRENCY
        self.sides: Dict[ComparisonSide, ComparisonSideState] = {
            ComparisonSide.LEFT: ComparisonSideState(),
            ComparisonSide.RIGHT: ComparisonSideState(),
        }
        self._merge_in_progress = False

    def side(self, side: ComparisonSide) -> ComparisonSideState:
        return self.sides[ComparisonSide(side)]

    @property
    def merge_in_progress(self) -> bool:
        return self._merge_in_progress

    async def load(self, left_resume_id: int, right_resume_id: int) -> None:
        """Fetch both resumes with their skills and the user's jobs.

        Neither side is replaced unless both fetches succeed.
        """
        left, right = await asyncio.gather(
            self._fetch_side(left_resume_id),
            self._fetch_side(right_resume_id),
        )
        for side, (resume, skills, jobs) in (
            (ComparisonSide.LEFT, left),
            (ComparisonSide.RIGHT, right),
        ):
            state = self.sides[side]
            state.resume = resume
            state.skills = skills
            state.jobs = jobs
        logger.info(
            "Comparison loaded",
            left_resume_id=left_resume_id,
            right_resume_id=right_resume_id,
        )

    async def refresh(self) -> None:
        """Re-fetch both sides from the gateway."""
        self._require_loaded()
        await self.load(
            self.side(ComparisonSide.LEFT).resume.id,
            self.side(ComparisonSide.RIGHT).resume.id,
        )

    def toggle_selection(
        self, side: ComparisonSide, item_type: ItemType, item_id: int
    ) -> bool:
        return self.side(side).toggle(ItemType(item_type), item_id)

    def start_drag(
        self, side: ComparisonSide, item_type: ItemType, item_id: int
    ) -> DragPayload:
        """Build the payload handed to the drop handler."""
        return DragPayload(
            item_id=item_id,
            item_type=ItemType(item_type),
            origin_side=ComparisonSide(side),
        )

    async def drop_item(
        self,
        to_side: ComparisonSide,
        payload: Optional[DragPayload] = None,
        json_data: Optional[str] = None,
        text_data: Optional[str] = None,
    ) -> CopyOutcome:
        """
        Copy the dragged item onto ``to_side``.

        The payload is taken from memory first, then from the serialised
        channels. An unresolvable payload raises ``DragPayloadError``.
        """
        self._require_loaded()
        resolved = DragPayload.resolve(payload, json_data, text_data)
        to_side = ComparisonSide(to_side)

        if resolved.origin_side == to_side:
            outcome = CopyOutcome(
                item_type=resolved.item_type,
                item_id=resolved.item_id,
                status=DropStatus.REJECTED,
                message="Item is already on this side",
            )
            record_merge_outcome(outcome.item_type.value, outcome.status.value)
            return outcome

        outcome = await self._copy_item(
            resolved.item_type, resolved.item_id, resolved.origin_side, to_side
        )
        if outcome.succeeded:
            await self.refresh()
        return outcome

    async def copy_all_selected(
        self, from_side: ComparisonSide, to_side: ComparisonSide
    ) -> List[CopyOutcome]:
        """
        Copy every selected skill and job from one side to the other.

        Items are copied concurrently, bounded by ``max_concurrency``. A
        failing item never stops the others. Selections on both sides are
        cleared and both sides re-fetched once every item has settled.

        Raises:
            MergeInProgressError: if another batch is still running
            ComparisonRefreshError: if the re-fetch after the copy fails; the
                error carries the per-item outcomes
        """
        if self._merge_in_progress:
            raise MergeInProgressError()
        self._require_loaded()
        from_side, to_side = ComparisonSide(from_side), ComparisonSide(to_side)
        if from_side == to_side:
            raise ValidationError("Source and target side must differ")

        self._merge_in_progress = True
        try:
            source = self.side(from_side)
            items = [(ItemType.SKILL, item_id) for item_id in sorted(source.selected_skill_ids)]
            items += [(ItemType.JOB, item_id) for item_id in sorted(source.selected_job_ids)]

            semaphore = asyncio.Semaphore(self.max_concurrency)

            async def copy_bounded(item_type: ItemType, item_id: int) -> CopyOutcome:
                async with semaphore:
                    return await self._copy_item(item_type, item_id, from_side, to_side)

            results = await asyncio.gather(
                *(copy_bounded(item_type, item_id) for item_type, item_id in items),
                return_exceptions=True,
            )

            outcomes = []
            for (item_type, item_id), result in zip(items, results):
                if isinstance(result, BaseException):
                    result = self._failed(item_type, item_id, result)
                outcomes.append(result)

            for state in self.sides.values():
                state.clear_selection()
            try:
                await self.refresh()
            except Exception as e:
                raise ComparisonRefreshError(outcomes, e) from e
        finally:
            self._merge_in_progress = False

        logger.info(
            "Copied selected items",
            from_side=from_side.value,
            to_side=to_side.value,
            total=len(outcomes),
            copied=sum(1 for o in outcomes if o.succeeded),
        )
        return outcomes

    def confirm_delete_text(
        self, side: ComparisonSide, item_type: ItemType, item_id: int
    ) -> str:
        """Text the user confirms before ``delete_association`` runs."""
        state = self.side(side)
        if ItemType(item_type) == ItemType.SKILL:
            skill = state.find_skill(item_id)
            name = skill.skill_name if skill else f"skill {item_id}"
            return (
                f'Remove "{name}" from this resume? '
                "The skill will remain in your skills list."
            )

        job = state.find_job(item_id)
        label = f"{job.position} at {job.company}" if job else f"job {item_id}"
        return (
            f'Delete "{label}"? This permanently deletes the job experience '
            "and removes it from every resume."
        )

    async def delete_association(
        self, side: ComparisonSide, item_type: ItemType, item_id: int
    ) -> None:
        """
        Remove an item shown on one side.

        Skills are only unlinked from that side's resume. Jobs are not
        resume-scoped, so the job experience itself is deleted.
        """
        self._require_loaded()
        state = self.side(side)

        if ItemType(item_type) == ItemType.SKILL:
            await self.gateway.remove_skill_from_resume(state.resume.id, item_id)
            logger.info(
                "Skill removed from resume",
                resume_id=state.resume.id,
                skill_id=item_id,
            )
        else:
            await self.gateway.delete_job_experience(item_id)
            logger.info("Job experience deleted", job_experience_id=item_id)

        await self.refresh()

    async def _copy_item(
        self,
        item_type: ItemType,
        item_id: int,
        from_side: ComparisonSide,
        to_side: ComparisonSide,
    ) -> CopyOutcome:
        if item_type == ItemType.SKILL:
            outcome = await self._copy_skill(item_id, from_side, to_side)
        else:
            outcome = await self._copy_job(item_id, from_side)
        record_merge_outcome(outcome.item_type.value, outcome.status.value)
        return outcome

    async def _copy_skill(
        self, skill_id: int, from_side: ComparisonSide, to_side: ComparisonSide
    ) -> CopyOutcome:
        source, target = self.side(from_side), self.side(to_side)

        if target.has_skill(skill_id):
            return self._already_present(skill_id)
        if not source.has_skill(skill_id):
            return CopyOutcome(
                item_type=ItemType.SKILL,
                item_id=skill_id,
                status=DropStatus.NOT_IN_SOURCE,
                message=f"Skill not found in source resume. Skill ID: {skill_id}",
            )

        try:
            await self.gateway.add_skill_to_resume(target.resume.id, skill_id)
        except NotFoundError:
            return CopyOutcome(
                item_type=ItemType.SKILL,
                item_id=skill_id,
                status=DropStatus.NOT_UNLOCKED,
                message=(
                    "Skill not found in your skills. "
                    "Please ensure the skill is unlocked first."
                ),
            )
        except ConflictError:
            return self._already_present(skill_id)
        except Exception as e:
            return self._failed(ItemType.SKILL, skill_id, e)

        return CopyOutcome(
            item_type=ItemType.SKILL,
            item_id=skill_id,
            status=DropStatus.COPIED,
            message="Skill added to the resume",
        )

    async def _copy_job(self, job_id: int, from_side: ComparisonSide) -> CopyOutcome:
        job = self.side(from_side).find_job(job_id)
        if job is None:
            return CopyOutcome(
                item_type=ItemType.JOB,
                item_id=job_id,
                status=DropStatus.NOT_IN_SOURCE,
                message=f"Job experience not found in source resume. Job ID: {job_id}",
            )

        try:
            created = await self.gateway.create_job_experience(job.copy_for(job.user_id))
        except Exception as e:
            return self._failed(ItemType.JOB, job_id, e)

        return CopyOutcome(
            item_type=ItemType.JOB,
            item_id=job_id,
            status=DropStatus.COPIED,
            message="Job experience copied",
            new_item_id=created.id,
        )

    async def _fetch_side(
        self, resume_id: int
    ) -> Tuple[Resume, List[ResumeSkillView], List[JobExperience]]:
        return await asyncio.gather(
            self.gateway.get_resume(resume_id),
            self.gateway.get_resume_skills(resume_id),
            self.gateway.list_job_experiences(),
        )

    def _require_loaded(self) -> None:
        if any(state.resume is None for state in self.sides.values()):
            raise ComparisonNotLoadedError()

    def _already_present(self, skill_id: int) -> CopyOutcome:
        return CopyOutcome(
            item_type=ItemType.SKILL,
            item_id=skill_id,
            status=DropStatus.ALREADY_PRESENT,
            message="This skill is already in the target resume",
        )

    def _failed(self, item_type: ItemType, item_id: int, error: BaseException) -> CopyOutcome:
        logger.warning(
            "Failed to copy item",
            item_type=item_type.value,
            item_id=item_id,
            error=str(error),
        )
        noun = "skill" if item_type == ItemType.SKILL else "job experience"
        return CopyOutcome(
            item_type=item_type,
            item_id=item_id,
            status=DropStatus.FAILED,
            message=f"Failed to copy {noun}: {str(error) or type(error).__name__}",
        )
