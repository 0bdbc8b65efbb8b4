"""
Unit tests for the career API gateway.
"""

import json
from datetime import date

import httpx
import pytest

from skillz.domain.entities.job_experience import JobExperience
from skillz.domain.exceptions import ConflictError, NotFoundError, ValidationError
from skillz.infrastructure.external.career_client import CareerApiClient
from skillz.infrastructure.external.http_client import HTTPClient

BASE_URL = "http://career.test/api"


def make_client(handler) -> CareerApiClient:
    return CareerApiClient(
        user_id=1, base_url=BASE_URL, transport=httpx.MockTransport(handler)
    )


class TestCareerApiClient:
    """Test CareerApiClient."""

    @pytest.mark.asyncio
    async def test_sends_identity_header_and_parses_resume(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["user"] = request.headers.get("X-User-ID")
            return httpx.Response(
                200, json={"id": 4, "user_id": 1, "title": "CV", "content": None}
            )

        async with make_client(handler) as client:
            resume = await client.get_resume(4)

        assert seen == {"url": f"{BASE_URL}/resumes/4", "user": "1"}
        assert (resume.id, resume.title, resume.content) == (4, "CV", "")

    @pytest.mark.asyncio
    async def test_parses_resume_skills(self):
        def handler(request):
            return httpx.Response(
                200,
                json=[
                    {
                        "skill_id": 2,
                        "user_level": 3,
                        "user_experience": 150,
                        "skill_name": "Python",
                        "skill_type": "hard",
                    }
                ],
            )

        async with make_client(handler) as client:
            skills = await client.get_resume_skills(4)

        assert skills[0].skill_id == 2
        assert skills[0].user_experience == 150
        assert skills[0].category_name is None

    @pytest.mark.asyncio
    async def test_create_job_posts_payload(self):
        captured = {}

        def handler(request):
            captured["method"] = request.method
            captured["path"] = request.url.path
            captured["body"] = json.loads(request.content)
            return httpx.Response(
                201,
                json={"id": 8, "user_id": 1, **captured["body"]},
            )

        job = JobExperience(
            user_id=1, company="Acme", position="Engineer", start_date=date(2021, 3, 1)
        )
        async with make_client(handler) as client:
            created = await client.create_job_experience(job)

        assert captured["method"] == "POST"
        assert captured["path"] == "/api/skills/user/jobs"
        assert captured["body"]["start_date"] == "2021-03-01"
        assert created.id == 8
        assert created.start_date == date(2021, 3, 1)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "status_code,body,error",
        [
            (404, {"error": "not_found", "message": "Skill not found in your skills"}, NotFoundError),
            (409, {"error": "conflict", "message": "Skill already in resume"}, ConflictError),
            (400, {"detail": "bad input"}, ValidationError),
        ],
    )
    async def test_error_statuses_map_to_domain_errors(self, status_code, body, error):
        def handler(request):
            return httpx.Response(status_code, json=body)

        async with make_client(handler) as client:
            with pytest.raises(error) as exc_info:
                await client.add_skill_to_resume(1, 2)

        expected = body.get("message") or body.get("detail")
        assert str(exc_info.value) == expected

    @pytest.mark.asyncio
    async def test_server_error_raises_http_error(self):
        def handler(request):
            return httpx.Response(500, text="boom")

        async with make_client(handler) as client:
            with pytest.raises(httpx.HTTPStatusError):
                await client.delete_job_experience(3)

    @pytest.mark.asyncio
    async def test_http_client_requires_context(self):
        client = HTTPClient(base_url=BASE_URL)
        with pytest.raises(RuntimeError):
            await client.request("GET", "/resumes")

    @pytest.mark.asyncio
    async def test_http_client_sends_json_body(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["body"] = json.loads(request.content)
            return httpx.Response(201, json={"id": 9})

        async with HTTPClient(
            base_url=BASE_URL, transport=httpx.MockTransport(handler)
        ) as client:
            response = await client.request("POST", "/resumes", data={"title": "CV"})

        assert response.status_code == 201
        assert seen == {"method": "POST", "body": {"title": "CV"}}
