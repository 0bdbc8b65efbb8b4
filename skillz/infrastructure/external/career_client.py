"""
Career API gateway backed by httpx.

Talks to this service's own REST surface on behalf of one user, the same
way the comparison page of a browser client does.
"""

from datetime import date
from typing import Any, Dict, List, Optional

import httpx

from skillz.application.interfaces.gateways import CareerGatewayInterface
from skillz.config.logging import get_logger
from skillz.config.settings import settings
from skillz.domain.entities.job_experience import JobExperience
from skillz.domain.entities.resume import Resume, ResumeSkillView
from skillz.domain.exceptions import ConflictError, NotFoundError, ValidationError
from skillz.infrastructure.external.http_client import HTTPClient

logger = get_logger(__name__)


class CareerApiClient(CareerGatewayInterface):
    """Gateway implementation over the HTTP API."""

    def __init__(
        self,
        user_id: int,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.user_id = user_id
        self.http = HTTPClient(
            base_url=base_url or settings.CAREER_API_BASE_URL,
            timeout=timeout or settings.HTTP_TIMEOUT,
            headers={settings.USER_ID_HEADER: str(user_id)},
            transport=transport,
        )

    async def __aenter__(self):
        await self.http.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.http.__aexit__(exc_type, exc_val, exc_tb)

    async def get_resume(self, resume_id: int) -> Resume:
        data = await self._call("GET", f"/resumes/{resume_id}", resource="Resume")
        return Resume(
            id=data["id"],
            user_id=data["user_id"],
            title=data["title"],
            content=data.get("content") or "",
        )

    async def get_resume_skills(self, resume_id: int) -> List[ResumeSkillView]:
        data = await self._call("GET", f"/resumes/{resume_id}/skills", resource="Resume")
        return [
            ResumeSkillView(
                skill_id=item["skill_id"],
                user_level=item["user_level"],
                user_experience=item["user_experience"],
                skill_name=item["skill_name"],
                description=item.get("description"),
                skill_type=item.get("skill_type"),
                max_level=item.get("max_level"),
                icon=item.get("icon"),
                category_name=item.get("category_name"),
                category_color=item.get("category_color"),
            )
            for item in data
        ]

    async def list_job_experiences(self) -> List[JobExperience]:
        data = await self._call("GET", "/skills/user/jobs", resource="Job experience")
        return [self._job_from_payload(item) for item in data]

    async def add_skill_to_resume(self, resume_id: int, skill_id: int) -> None:
        await self._call(
            "POST", f"/resumes/{resume_id}/skills/{skill_id}", resource="Resume skill"
        )

    async def remove_skill_from_resume(self, resume_id: int, skill_id: int) -> None:
        await self._call(
            "DELETE", f"/resumes/{resume_id}/skills/{skill_id}", resource="Resume skill"
        )

    async def create_job_experience(self, job_experience: JobExperience) -> JobExperience:
        data = await self._call(
            "POST",
            "/skills/user/jobs",
            resource="Job experience",
            payload=job_experience.to_payload(),
        )
        return self._job_from_payload(data)

    async def delete_job_experience(self, job_experience_id: int) -> None:
        await self._call(
            "DELETE",
            f"/skills/user/jobs/{job_experience_id}",
            resource="Job experience",
        )

    async def _call(
        self,
        method: str,
        path: str,
        resource: str,
        payload: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Send a request and translate error statuses into domain errors."""
        response = await self.http.request(method, path, data=payload)

        if response.status_code < 400:
            return response.json() if response.content else None

        message = self._error_message(response)
        logger.info(
            "Career API returned an error",
            method=method,
            path=path,
            status_code=response.status_code,
            message=message,
        )

        if response.status_code == 404:
            raise NotFoundError(resource, message)
        if response.status_code == 409:
            raise ConflictError(message)
        if response.status_code == 400:
            raise ValidationError(message)
        response.raise_for_status()

    def _error_message(self, response: httpx.Response) -> Optional[str]:
        try:
            body = response.json()
        except ValueError:
            return response.text or None
        if isinstance(body, dict):
            return body.get("message") or body.get("detail") or body.get("error")
        return None

    def _job_from_payload(self, data: Dict[str, Any]) -> JobExperience:
        return JobExperience(
            id=data["id"],
            user_id=data["user_id"],
            company=data["company"],
            position=data["position"],
            description=data.get("description"),
            start_date=_parse_date(data.get("start_date")),
            end_date=_parse_date(data.get("end_date")),
            skills_gained=data.get("skills_gained"),
        )


def _parse_date(value: Optional[str]) -> Optional[date]:
    return date.fromisoformat(value) if value else None
